"""Extraction options.

Provides a single frozen dataclass with every knob the extractor reads.
Build tools usually hand over plugin-style option objects with camelCase
keys; ExtractionOptions.from_mapping accepts those as well as the Python
spelling.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from intlextract.constants import DEFAULT_MODULE_SOURCE_NAME

__all__ = ["ExtractionOptions"]

_CAMEL_CASE_KEYS: dict[str, str] = {
    "moduleSourceName": "module_source_name",
    "messagesDir": "messages_dir",
    "enforceDescriptions": "enforce_descriptions",
    "generateMessageIds": "generate_message_ids",
    "removeExtractedData": "remove_extracted_data",
}

_FLAGS: tuple[str, ...] = (
    "enforce_descriptions",
    "generate_message_ids",
    "remove_extracted_data",
)


@dataclass(frozen=True, slots=True)
class ExtractionOptions:
    """Immutable configuration for one extraction run.

    Constructing ``ExtractionOptions()`` with no arguments extracts from
    react-intl imports, writes no files and leaves the tree unchanged.

    Attributes:
        module_source_name: Module the recognized names must be imported
            from (default: "react-intl").
        messages_dir: Root directory for per-unit JSON exports. None
            disables file output (default: None).
        enforce_descriptions: Reject messages without a description
            (default: False).
        generate_message_ids: Derive a content hash id for messages
            declared without one and write it back into the tree
            (default: False).
        remove_extracted_data: Strip descriptions and default messages
            from the rewritten tree, keeping only ids (default: False).

    Example:
        >>> options = ExtractionOptions.from_mapping(
        ...     {"messagesDir": "build/messages", "enforceDescriptions": True}
        ... )
        >>> options.messages_dir
        PosixPath('build/messages')
    """

    module_source_name: str = DEFAULT_MODULE_SOURCE_NAME
    messages_dir: Path | None = None
    enforce_descriptions: bool = False
    generate_message_ids: bool = False
    remove_extracted_data: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize option values.

        Raises:
            TypeError: If a value has the wrong type
            ValueError: If module_source_name is empty
        """
        if not isinstance(self.module_source_name, str):
            msg = f"module_source_name must be a string, got {type(self.module_source_name).__name__}"
            raise TypeError(msg)
        if not self.module_source_name:
            msg = "module_source_name must not be empty"
            raise ValueError(msg)
        if isinstance(self.messages_dir, str):
            object.__setattr__(self, "messages_dir", Path(self.messages_dir))
        elif self.messages_dir is not None and not isinstance(self.messages_dir, Path):
            msg = f"messages_dir must be a path or None, got {type(self.messages_dir).__name__}"
            raise TypeError(msg)
        for name in _FLAGS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be a bool, got {type(value).__name__}"
                raise TypeError(msg)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ExtractionOptions:
        """Build options from a plugin-style mapping.

        Args:
            mapping: camelCase or snake_case option names

        Raises:
            ValueError: On unknown option names
            TypeError: On values of the wrong type
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                msg = f"Unknown extraction option: {key!r}"
                raise ValueError(msg)
            kwargs[name] = value
        return cls(**kwargs)
