import re
from pathlib import Path


def normalize_whitespace(text):
    # First, normalize all whitespace to single spaces
    text = re.sub(r'\s+', ' ', text).strip()
    # Then, remove spaces after '(' and before ')'
    text = re.sub(r'\(\s+', '(', text)
    text = re.sub(r'\s+\)', ')', text)
    # Same for generics
    text = re.sub(r'<\s+', '<', text)
    text = re.sub(r'\s+>', '>', text)
    return text


def read_file_content(file_path: Path) -> str:
    """Read file content with encoding fallback."""
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except UnicodeDecodeError:
        with open(file_path, 'r', encoding='latin1', newline='') as f:
            return f.read()
