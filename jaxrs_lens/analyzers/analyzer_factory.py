from loguru import logger

from jaxrs_lens.analyzers.java_analyzer import JavaSourceAnalyzer
from jaxrs_lens.utils.exceptions import UnsupportedLanguageError


class AnalyzerFactory:

    @staticmethod
    def create_analyzer(language: str) -> JavaSourceAnalyzer:
        logger.info(f"Creating analyzer for language: {language}")
        if language.lower() == "java":
            return JavaSourceAnalyzer()
        raise UnsupportedLanguageError(f"Unsupported language: {language}")
