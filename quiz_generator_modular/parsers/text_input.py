# parsers/text_input.py
from typing import Optional
from quiz_generator_modular.config import config

def truncate_text(text: str, max_length: Optional[int] = None) -> str:
    """Cut text to the first max_length characters (idempotent)"""
    limit = config.max_text_length if max_length is None else max_length
    return text[:limit]

def sanitize_text(text: str, max_length: Optional[int] = None) -> str:
    """Trim surrounding whitespace, then truncate"""
    return truncate_text(text.strip(), max_length)
