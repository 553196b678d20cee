"""Per-unit aggregation.

Drives one compilation unit through its lifecycle:

    UNVISITED --enter--> SCANNING --scan--> SCANNING --close--> CLOSED
    UNVISITED --enter--> IRRELEVANT

A unit that imports none of the recognized names from the configured
module is IRRELEVANT: it gets no registry, no metadata and no file. Any
extraction error aborts the unit; nothing is exported for it.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from intlextract.constants import IMPORTED_NAMES, METADATA_KEY
from intlextract.diagnostics import Diagnostic, ExtractionError
from intlextract.enums import UnitState
from intlextract.icu import normalize_message
from intlextract.syntax.ast import Program
from intlextract.syntax.bindings import ImportBindings

from .descriptor import MessageDescriptor, Normalizer
from .options import ExtractionOptions
from .persistence import messages_path, write_messages
from .recognizers import ExtractionContext, MessageExtractor
from .registry import MessageRegistry

__all__ = ["CompilationUnit", "UnitAggregator", "UnitResult", "extract_messages"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CompilationUnit:
    """One source file as handed over by the host.

    Attributes:
        program: Parsed tree of the file
        filename: Source path
        root: Directory export paths are relative to (default: cwd)
        metadata: Host-visible result metadata; receives the export
        imports: Host-supplied import table (module -> imported names);
            derived from the program's import declarations when None
    """

    program: Program
    filename: str | Path
    root: Path | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    imports: Mapping[str, frozenset[str]] | None = None


@dataclass(frozen=True, slots=True)
class UnitResult:
    """Outcome of processing one unit.

    Attributes:
        filename: Source path as given
        state: CLOSED, or IRRELEVANT for skipped units
        program: Rewritten tree (the original one when nothing changed)
        messages: Exported descriptors in discovery order
        lines: First declaration line per message id
        warnings: Skipped-declaration diagnostics
        output_path: Export file written, if any
    """

    filename: str
    state: UnitState
    program: Program
    messages: tuple[MessageDescriptor, ...] = ()
    lines: Mapping[str, int | None] = field(default_factory=dict)
    warnings: tuple[Diagnostic, ...] = ()
    output_path: Path | None = None

    @property
    def relevant(self) -> bool:
        """True when the unit was scanned for messages."""
        return self.state is UnitState.CLOSED


class UnitAggregator:
    """Single-use lifecycle driver for one compilation unit.

    Example:
        >>> aggregator = UnitAggregator(ExtractionOptions())
        >>> result = aggregator.process(unit)
        >>> aggregator.state
        <UnitState.CLOSED: 'closed'>
    """

    __slots__ = ("_context", "_normalize", "_output_path", "_state", "options")

    def __init__(
        self, options: ExtractionOptions | None = None, *, normalize: Normalizer = normalize_message
    ) -> None:
        self.options = options if options is not None else ExtractionOptions()
        self._normalize = normalize
        self._state = UnitState.UNVISITED
        self._context: ExtractionContext | None = None
        self._output_path: Path | None = None

    @property
    def state(self) -> UnitState:
        """Current lifecycle state."""
        return self._state

    @property
    def registry(self) -> MessageRegistry | None:
        """The unit registry (None until the unit is found relevant)."""
        return self._context.registry if self._context is not None else None

    def _require(self, state: UnitState, action: str) -> None:
        if self._state is not state:
            msg = f"Cannot {action} a unit in state {self._state.value!r}"
            raise RuntimeError(msg)

    def _active_context(self) -> ExtractionContext:
        if self._context is None:
            msg = "Unit has not been entered"
            raise RuntimeError(msg)
        return self._context

    def enter(self, unit: CompilationUnit) -> UnitState:
        """Decide whether the unit may contain messages.

        Returns:
            SCANNING or IRRELEVANT

        Raises:
            RuntimeError: If the unit was already entered
        """
        self._require(UnitState.UNVISITED, "enter")
        bindings = ImportBindings.from_program(unit.program)
        table = unit.imports if unit.imports is not None else bindings.imports()
        imported = table.get(self.options.module_source_name, frozenset())

        if not IMPORTED_NAMES & set(imported):
            logger.debug(
                "Skipping %s: nothing imported from %r",
                unit.filename,
                self.options.module_source_name,
            )
            self._state = UnitState.IRRELEVANT
            return self._state

        registry = MessageRegistry(enforce_descriptions=self.options.enforce_descriptions)
        self._context = ExtractionContext(self.options, registry, bindings, self._normalize)
        self._state = UnitState.SCANNING
        return self._state

    def scan(self, program: Program) -> Program:
        """Recognize every declaration site, in source order.

        Returns:
            The rewritten program

        Raises:
            RuntimeError: If the unit is not being scanned
            ExtractionError: On the first unit-fatal problem
        """
        self._require(UnitState.SCANNING, "scan")
        rewritten = MessageExtractor(self._active_context()).transform(program)
        if not isinstance(rewritten, Program):
            msg = "Program root was removed or expanded during extraction"
            raise TypeError(msg)
        return rewritten

    def close(self, unit: CompilationUnit) -> tuple[MessageDescriptor, ...]:
        """Attach the export to unit metadata and write the export file.

        Returns:
            Exported descriptors in discovery order

        Raises:
            RuntimeError: If the unit is not being scanned
            OSError: If the export file cannot be written
        """
        self._require(UnitState.SCANNING, "close")
        messages = self._active_context().registry.export()
        unit.metadata[METADATA_KEY] = {"messages": [message.to_dict() for message in messages]}

        if self.options.messages_dir is not None:
            path = messages_path(self.options.messages_dir, unit.filename, unit.root)
            self._output_path = write_messages(path, messages)

        self._state = UnitState.CLOSED
        return messages

    def process(self, unit: CompilationUnit) -> UnitResult:
        """Run the whole lifecycle for unit.

        Raises:
            ExtractionError: On any unit-fatal problem, with the unit
                filename attached to its diagnostic
        """
        filename = str(unit.filename)
        try:
            if self.enter(unit) is UnitState.IRRELEVANT:
                return UnitResult(filename, UnitState.IRRELEVANT, unit.program)
            program = self.scan(unit.program)
            messages = self.close(unit)
        except ExtractionError as e:
            e.with_filename(filename)
            raise

        registry = self._active_context().registry
        return UnitResult(
            filename=filename,
            state=self._state,
            program=program,
            messages=messages,
            lines={message.id: registry.line_of(message.id) for message in messages},  # type: ignore[misc]
            warnings=tuple(registry.warnings),
            output_path=self._output_path,
        )


def extract_messages(
    unit: CompilationUnit,
    options: ExtractionOptions | None = None,
    *,
    normalize: Normalizer = normalize_message,
) -> UnitResult:
    """Extract, and optionally rewrite and export, one unit's messages.

    Args:
        unit: Compilation unit
        options: Extraction options (default: ExtractionOptions())
        normalize: Default-message grammar validator

    Returns:
        UnitResult; unit.metadata["react-intl"] holds the export

    Raises:
        ExtractionError: On any unit-fatal problem
    """
    return UnitAggregator(options, normalize=normalize).process(unit)
