"""
Catalog import errors.

Only two failures abort an import: unreadable input and a failed
catalog write. Row-level problems are skipped, never raised.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    PARSE_FAILURE = 'parse_failure'
    PERSISTENCE_FAILURE = 'persistence_failure'


class PersistenceError(Exception):
    """Raised by catalog stores when a read or write does not complete."""


class CatalogImportError(Exception):
    """
    Fatal catalog import failure.

    Attributes:
        kind: Which stage failed
        cause: Underlying exception, if any (also chained as __cause__)
    """

    MESSAGES = {
        ErrorKind.PARSE_FAILURE: 'Failed to parse CSV file. Please check the format.',
        ErrorKind.PERSISTENCE_FAILURE: 'Failed to save the catalog. The previous catalog is unchanged.',
    }

    def __init__(self, kind: ErrorKind, detail: str = '', cause: Optional[BaseException] = None):
        self.kind = kind
        self.detail = detail
        self.cause = cause
        message = self.MESSAGES[kind]
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
