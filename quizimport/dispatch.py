from __future__ import annotations
import logging
from typing import Callable, Dict
from .document import parse_document
from .tabular import parse_tabular
from .types import ImportResult

logger = logging.getLogger(__name__)

PARSERS: Dict[str, Callable[[bytes], ImportResult]] = {
    ".xlsx": parse_tabular,
    ".xls": parse_tabular,
    ".docx": parse_document,
}


def supported_extensions() -> str:
    return ", ".join(PARSERS)


def parse_question_file(data: bytes, filename: str) -> ImportResult:
    """
    Routes by file extension only (case-insensitive); the content is not sniffed.
    Unsupported extensions are rejected without touching the bytes.
    """
    name = (filename or "").lower()
    for ext, parser in PARSERS.items():
        if name.endswith(ext):
            logger.debug("%s -> %s", filename, parser.__name__)
            return parser(data)

    logger.info("unsupported file rejected: %s", filename)
    return ImportResult.failure(f"Unsupported file format: {filename}. Supported: {supported_extensions()}")
