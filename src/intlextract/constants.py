"""Shared constants for intlextract.

Centralizes the names the extractor recognizes and the limits it enforces.
Placing constants here avoids circular imports between the syntax, icu
and extraction packages.

Constants are grouped by domain:
- Recognized declaration forms: component and function names
- Descriptor fields: the keys read from a declaration site
- Output: metadata key and file suffix for unit exports
- Depth limits: recursion protection for traversal and evaluation

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Recognized declaration forms
    "DEFAULT_MODULE_SOURCE_NAME",
    "COMPONENT_NAMES",
    "FUNCTION_NAMES",
    "SINGLE_DESCRIPTOR_FUNCTION",
    "BATCH_DESCRIPTOR_FUNCTION",
    "IMPORTED_NAMES",
    # Descriptor fields
    "DESCRIPTOR_FIELDS",
    # Output
    "METADATA_KEY",
    "MESSAGES_FILE_SUFFIX",
    "JSON_INDENT",
    # Depth limits
    "MAX_DEPTH",
    # Documentation
    "MESSAGE_SYNTAX_URL",
]

# ============================================================================
# RECOGNIZED DECLARATION FORMS
# ============================================================================

# Module the recognized names must be imported from unless configured otherwise.
DEFAULT_MODULE_SOURCE_NAME: str = "react-intl"

# Declarative element form: <FormattedMessage id="..." defaultMessage="..." />
COMPONENT_NAMES: tuple[str, ...] = ("FormattedMessage", "FormattedHTMLMessage")

# Function-call form: defineMessage({...}) and defineMessages({key: {...}})
SINGLE_DESCRIPTOR_FUNCTION: str = "defineMessage"
BATCH_DESCRIPTOR_FUNCTION: str = "defineMessages"
FUNCTION_NAMES: tuple[str, ...] = (SINGLE_DESCRIPTOR_FUNCTION, BATCH_DESCRIPTOR_FUNCTION)

IMPORTED_NAMES: frozenset[str] = frozenset(COMPONENT_NAMES + FUNCTION_NAMES)

# ============================================================================
# DESCRIPTOR FIELDS
# ============================================================================

# Field names as written at declaration sites. Every other key is ignored.
DESCRIPTOR_FIELDS: frozenset[str] = frozenset({"id", "description", "defaultMessage"})

# ============================================================================
# OUTPUT
# ============================================================================

# Key under which a unit's descriptor list is attached to its result metadata.
METADATA_KEY: str = "react-intl"

MESSAGES_FILE_SUFFIX: str = ".json"

# Matches JSON.stringify(descriptors, null, 2) so catalogs diff cleanly
# against files produced by the JavaScript toolchain.
JSON_INDENT: int = 2

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: constant evaluator, message parser. Tree traversal is sized
# from the recursion limit instead (core.depth_guard.traversal_depth).
# 100 levels of syntactic nesting is almost certainly generated or
# malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# DOCUMENTATION
# ============================================================================

MESSAGE_SYNTAX_URL: str = "https://formatjs.io/docs/core-concepts/icu-syntax"
