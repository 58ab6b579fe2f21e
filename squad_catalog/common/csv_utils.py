"""
CSV Utilities

Functions for turning raw CSV bytes into row dictionaries.
Handles large field sizes, byte order marks and malformed quoting.
"""

import csv
import io
from typing import Dict, List

UTF8_BOM = '\ufeff'


def configure_csv(field_size_limit: int = 10 * 1024 * 1024) -> None:
    """
    Configure CSV module for large fields.

    Args:
        field_size_limit: Maximum field size in bytes (default: 10MB)
    """
    csv.field_size_limit(field_size_limit)


def parse_csv_text(text: str) -> List[Dict[str, str]]:
    """
    Parse CSV text with a header row into a list of row dictionaries.

    The reader runs in strict mode, so an unterminated quote or a stray
    character after a closing quote raises instead of being patched over.
    Cells missing from short rows read as empty strings.

    Args:
        text: Decoded CSV content

    Returns:
        List of dictionaries, one per data row, in file order

    Raises:
        csv.Error: If the text is not valid delimited data
    """
    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM):]

    reader = csv.DictReader(io.StringIO(text, newline=''), restval='', strict=True)
    return [row for row in reader]


def parse_csv_bytes(data: bytes, encoding: str = 'utf-8') -> List[Dict[str, str]]:
    """
    Decode and parse CSV bytes.

    Args:
        data: Raw file contents
        encoding: File encoding (default: utf-8)

    Returns:
        List of row dictionaries in file order

    Raises:
        UnicodeDecodeError: If the bytes are not valid in the given encoding
        csv.Error: If the text is not valid delimited data
    """
    return parse_csv_text(data.decode(encoding))


# Initialize CSV configuration on module import
configure_csv()
