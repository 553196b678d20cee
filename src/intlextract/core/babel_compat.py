"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    intlextract supports two installation modes:
    - Extraction only: `pip install intlextract` (no external dependencies)
    - Gettext export: `pip install intlextract[babel]` (adds Babel's
      message catalog model and PO/POT writer)

    This module ensures that:
    1. Extraction-only installations never trigger Babel imports
    2. Catalog export gets a consistent, helpful error when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from intlextract.core.babel_compat import get_catalog_class

    def to_babel_catalog(...):
        Catalog = get_catalog_class()  # Raises BabelImportError if missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import IO, TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog


# pylint: disable=unnecessary-ellipsis
class WritePoProtocol(Protocol):
    """Protocol for babel.messages.pofile.write_po.

    Defines the subset of the signature intlextract relies on.
    """

    def __call__(
        self,
        fileobj: IO[bytes],
        catalog: Catalog,
        width: int = 76,
        no_location: bool = False,
        omit_header: bool = False,
        sort_output: bool = False,
        sort_by_file: bool = False,
        ignore_obsolete: bool = False,
        include_previous: bool = False,
        include_lineno: bool = True,
    ) -> Any:
        """Write catalog to fileobj in PO format."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "WritePoProtocol",
    "get_catalog_class",
    "get_write_po",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for gettext catalog support. "
            "Install with: pip install intlextract[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_catalog_class() -> type[Catalog]:
    """Get the Babel message Catalog class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_catalog_class")
    from babel.messages.catalog import Catalog  # noqa: PLC0415

    return Catalog


def get_write_po() -> WritePoProtocol:
    """Get Babel's PO/POT writer.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_write_po")
    from babel.messages.pofile import write_po  # noqa: PLC0415

    return write_po
