"""Enumerations for intlextract type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class DescriptorField(StrEnum):
    """Field of a message descriptor, spelled as at the declaration site.

    StrEnum provides automatic string conversion: str(DescriptorField.ID) == "id"
    """

    ID = "id"
    """Catalog key: id="app.greeting" """

    DESCRIPTION = "description"
    """Translator-facing guidance: description="Shown on the home page" """

    DEFAULT_MESSAGE = "defaultMessage"
    """Source-language text: defaultMessage="Hello {name}" """


class UnitState(StrEnum):
    """Lifecycle state of one compilation unit's aggregation.

    UNVISITED -> SCANNING -> CLOSED, or UNVISITED -> IRRELEVANT when the unit
    imports none of the recognized names.
    """

    UNVISITED = "unvisited"
    SCANNING = "scanning"
    IRRELEVANT = "irrelevant"
    CLOSED = "closed"


class StoreOutcome(StrEnum):
    """Result of storing one descriptor in a MessageRegistry.

    Distinguishes per-site recoverable outcomes from registry growth.
    Unit-fatal problems are raised, never returned.
    """

    STORED = "stored"
    """New id inserted."""

    UNCHANGED = "unchanged"
    """Identical re-declaration of a known id (no-op)."""

    SKIPPED = "skipped"
    """Declaration has no default message; left out with a warning."""


__all__ = [
    "DescriptorField",
    "StoreOutcome",
    "UnitState",
]
