"""Run-level message catalog.

Merges the exports of every unit in one build into a single id-keyed
catalog, rejecting ids that two units declare with different content.
The merged catalog can be written as one JSON array or, with the optional
Babel dependency, as a gettext POT template for translation tooling.

Python 3.13+. Babel optional (pip install intlextract[babel]).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import IO, TYPE_CHECKING

from intlextract.constants import MESSAGES_FILE_SUFFIX, METADATA_KEY
from intlextract.core.babel_compat import get_catalog_class, get_write_po
from intlextract.diagnostics import DuplicateMessageIdError, ErrorTemplate, ExtractionError
from intlextract.icu import normalize_message

from .descriptor import MessageDescriptor, Normalizer
from .options import ExtractionOptions
from .persistence import messages_path, read_messages, write_messages
from .unit import CompilationUnit, UnitResult, extract_messages

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog

__all__ = ["ExtractionRun", "MessageCatalog", "RunResult"]

logger = logging.getLogger(__name__)

type Origin = tuple[str, int | None]

_MISSING = object()


class MessageCatalog:
    """Merged descriptors of many units, in first-seen order.

    Merging is all-or-nothing per unit: a conflicting id leaves the catalog
    unchanged.

    Example:
        >>> catalog = MessageCatalog()
        >>> catalog.add(result_for_app_js)
        >>> catalog.origins("greeting")
        (('src/App.js', 3),)
    """

    __slots__ = ("_messages", "_origins")

    def __init__(self) -> None:
        self._messages: dict[str, MessageDescriptor] = {}
        self._origins: dict[str, list[Origin]] = {}

    @classmethod
    def from_directory(cls, messages_dir: str | Path) -> MessageCatalog:
        """Merge every unit export under messages_dir (sorted by path).

        Raises:
            DuplicateMessageIdError: If two files conflict on an id
            ValueError: If a file is not a descriptor array
        """
        root = Path(messages_dir)
        catalog = cls()
        for path in sorted(root.rglob(f"*{MESSAGES_FILE_SUFFIX}")):
            catalog.add_messages(path.relative_to(root).as_posix(), read_messages(path))
        return catalog

    def add(self, result: UnitResult) -> None:
        """Merge one unit's export.

        Raises:
            DuplicateMessageIdError: If an id is already cataloged with
                different content
        """
        self.add_messages(result.filename, result.messages, result.lines)

    def add_messages(
        self,
        filename: str,
        messages: Iterable[MessageDescriptor],
        lines: Mapping[str, int | None] | None = None,
    ) -> None:
        """Merge descriptors declared in filename.

        Raises:
            DuplicateMessageIdError: If an id is already cataloged with
                different content
            ValueError: If a descriptor has no id
        """
        batch = tuple(messages)
        for message in batch:
            if not message.id:
                msg = f"Descriptor without id in {filename}"
                raise ValueError(msg)
            existing = self._messages.get(message.id)
            if existing is not None and existing != message:
                first = self._origins[message.id][0][0]
                raise DuplicateMessageIdError(
                    ErrorTemplate.catalog_duplicate_id(message.id, first, filename)
                )

        for message in batch:
            message_id: str = message.id  # type: ignore[assignment]  # checked above
            origin = (filename, lines.get(message_id) if lines is not None else None)
            self._messages.setdefault(message_id, message)
            self._origins.setdefault(message_id, []).append(origin)
        logger.debug("Merged %d messages from %s", len(batch), filename)

    def messages(self) -> tuple[MessageDescriptor, ...]:
        """Merged descriptors in first-seen order."""
        return tuple(self._messages.values())

    def origins(self, message_id: str) -> tuple[Origin, ...]:
        """(filename, line) of every declaration of message_id."""
        return tuple(self._origins.get(message_id, ()))

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._messages

    def __iter__(self) -> Iterator[MessageDescriptor]:
        return iter(self._messages.values())

    def write_json(self, path: str | Path) -> Path:
        """Write the merged catalog in the unit export format."""
        return write_messages(Path(path), self.messages())

    def to_babel_catalog(self, locale: str | None = None, project: str | None = None) -> Catalog:
        """Build a Babel message catalog.

        Each message becomes one entry: msgctxt is the message id, msgid the
        default message, the description an extracted comment, and every
        declaration site a location.

        Raises:
            BabelImportError: If Babel is not installed
        """
        catalog_class = get_catalog_class()
        catalog = catalog_class(locale=locale, project=project)
        for message_id, message in self._messages.items():
            catalog.add(
                message.default_message,
                locations=self.origins(message_id),
                auto_comments=(message.description,) if message.description else (),
                context=message_id,
            )
        return catalog

    def write_pot(
        self,
        fileobj: IO[bytes],
        *,
        project: str | None = None,
        width: int = 76,
        include_lineno: bool = True,
    ) -> None:
        """Write the catalog as a gettext POT template.

        Raises:
            BabelImportError: If Babel is not installed
        """
        write_po = get_write_po()
        write_po(
            fileobj,
            self.to_babel_catalog(project=project),
            width=width,
            include_lineno=include_lineno,
        )
        logger.info("Wrote POT template with %d messages", len(self))


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of extracting many units.

    Attributes:
        results: Successful units in processing order
        failures: Unit filename -> the error that aborted it
        catalog: Merged catalog of the successful units
    """

    results: tuple[UnitResult, ...]
    failures: Mapping[str, ExtractionError] = field(default_factory=dict)
    catalog: MessageCatalog = field(default_factory=MessageCatalog)

    @property
    def ok(self) -> bool:
        """True when no unit failed."""
        return not self.failures


class ExtractionRun:
    """Extracts many units with shared options into one catalog.

    Units stay independent: each gets its own registry, and a failing unit
    neither contributes to the catalog nor stops the others.
    """

    __slots__ = ("_normalize", "catalog", "options")

    def __init__(
        self, options: ExtractionOptions | None = None, *, normalize: Normalizer = normalize_message
    ) -> None:
        self.options = options if options is not None else ExtractionOptions()
        self._normalize = normalize
        self.catalog = MessageCatalog()

    def process(self, unit: CompilationUnit) -> UnitResult:
        """Extract one unit and merge it into the catalog.

        The export file is written only after the merge succeeds, and a
        conflicting unit gets its metadata export withdrawn, so a failing
        unit leaves nothing behind.

        Raises:
            ExtractionError: If the unit fails or conflicts with the catalog
        """
        previous = unit.metadata.get(METADATA_KEY, _MISSING)
        in_memory = replace(self.options, messages_dir=None)
        result = extract_messages(unit, in_memory, normalize=self._normalize)
        try:
            self.catalog.add(result)
        except ExtractionError:
            if previous is _MISSING:
                unit.metadata.pop(METADATA_KEY, None)
            else:
                unit.metadata[METADATA_KEY] = previous
            raise

        if result.relevant and self.options.messages_dir is not None:
            path = messages_path(self.options.messages_dir, unit.filename, unit.root)
            result = replace(result, output_path=write_messages(path, result.messages))
        return result

    def process_all(self, units: Iterable[CompilationUnit]) -> RunResult:
        """Extract every unit, collecting failures instead of raising."""
        results: list[UnitResult] = []
        failures: dict[str, ExtractionError] = {}
        for unit in units:
            try:
                results.append(self.process(unit))
            except ExtractionError as e:
                failures[str(unit.filename)] = e
                logger.warning("Extraction failed for %s: %s", unit.filename, e.diagnostic or e)
        return RunResult(tuple(results), failures, self.catalog)
