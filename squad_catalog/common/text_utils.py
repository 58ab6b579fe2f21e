"""
Text Utilities

Helper functions for text processing and cleanup.
"""

import re

from bs4 import BeautifulSoup


def html_to_text(html: str) -> str:
    """
    Convert an HTML product body to plain text.

    Args:
        html: HTML fragment (e.g. the "Body (HTML)" column)

    Returns:
        Visible text with whitespace collapsed
    """
    if not html:
        return ''

    soup = BeautifulSoup(html, 'html.parser')
    text = soup.get_text(separator=' ')

    # Clean up extra whitespace
    return re.sub(r'\s+', ' ', text).strip()


def split_tags(tags_str: str) -> list:
    """
    Split a comma-separated tag field into trimmed, non-empty tags.

    Args:
        tags_str: Raw tag field, e.g. "summer, cotton,, sale"

    Returns:
        Tags in source order
    """
    if not tags_str:
        return []
    return [t.strip() for t in tags_str.split(',') if t.strip()]
