"""intlextract - static extraction of react-intl message descriptors.

Runs as a pass inside a source-to-source pipeline: the host parses
JavaScript/JSX into a tree, intlextract finds `<FormattedMessage>`,
`defineMessage()` and `defineMessages()` declarations, validates their
ICU MessageFormat default messages, derives stable ids, and hands back
the (optionally rewritten) tree together with a per-unit catalog.

Public API:
    extract_messages - Process one compilation unit
    ExtractionRun - Process many units into one merged catalog
    ExtractionOptions - Configuration (plugin-style mapping supported)
    CompilationUnit - One parsed source file
    MessageDescriptor - id, description, default message
    from_estree / to_estree - JSON tree interchange with JavaScript parsers
    normalize_message - ICU MessageFormat validation and canonical form

Exceptions:
    IntlError - Base exception class
    ExtractionError - Unit-fatal extraction failures
    MessageFormatSyntaxError - Invalid message text

Submodules:
    intlextract.syntax - Host tree nodes, visitor, ESTree interchange
    intlextract.icu - ICU MessageFormat parser and printer
    intlextract.extraction - Evaluator, recognizers, registry, catalogs
    intlextract.diagnostics - Diagnostic codes, error types, formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import ExtractionError, IntlError, MessageFormatSyntaxError
from .extraction import (
    CompilationUnit,
    ExtractionOptions,
    ExtractionRun,
    MessageCatalog,
    MessageDescriptor,
    UnitResult,
    extract_messages,
)
from .icu import normalize_message
from .syntax import from_estree, to_estree

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("intlextract")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompilationUnit",
    "ExtractionError",
    "ExtractionOptions",
    "ExtractionRun",
    "IntlError",
    "MessageCatalog",
    "MessageDescriptor",
    "MessageFormatSyntaxError",
    "UnitResult",
    "__version__",
    "extract_messages",
    "from_estree",
    "normalize_message",
    "to_estree",
]
