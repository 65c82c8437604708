import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Configs(BaseSettings):

    # Local server the URL lenses point at
    SERVER_SCHEME: str = os.getenv("SERVER_SCHEME", "http")
    SERVER_HOST: str = os.getenv("SERVER_HOST", "localhost")
    SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8080"))

    # Code lens
    URL_CODE_LENS_ENABLED: bool = os.getenv("URL_CODE_LENS_ENABLED", "true").lower() in ("1", "true", "yes")
    OPEN_URI_COMMAND_ID: str = os.getenv("OPEN_URI_COMMAND_ID", "")

    # Logging
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    def base_url_for(self, port: int = None) -> str:
        """Build the base URL of the local server, optionally for another port."""
        return f"{self.SERVER_SCHEME}://{self.SERVER_HOST}:{port or self.SERVER_PORT}"

    @property
    def BASE_URL(self) -> str:
        return self.base_url_for()

    def validate_server_config(self) -> None:
        """Validate that the local server configuration is usable."""
        if not self.SERVER_HOST:
            raise ValueError(
                "SERVER_HOST environment variable is required. "
                "Please set it in your .env file or environment."
            )
        if not 0 < self.SERVER_PORT < 65536:
            raise ValueError(f"SERVER_PORT must be between 1 and 65535, got {self.SERVER_PORT}.")

    class Config:
        case_sensitive = True


configs = Configs()
