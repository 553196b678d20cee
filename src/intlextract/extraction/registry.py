"""Per-unit message registry.

Append-or-verify store of descriptors keyed by id. A declaration without a
default message is skipped with a warning; every other problem is fatal for
the unit.

Python 3.13+.
"""

import logging
from collections.abc import Iterator

from intlextract.diagnostics import (
    Diagnostic,
    DuplicateMessageIdError,
    ErrorTemplate,
    MissingMessageFieldError,
)
from intlextract.enums import StoreOutcome
from intlextract.syntax.ast import SourceLocation

from .descriptor import MessageDescriptor

__all__ = ["MessageRegistry"]

logger = logging.getLogger(__name__)


class MessageRegistry:
    """Insertion-ordered id -> descriptor map for one compilation unit.

    Checks run in this order: missing default message (skip with warning),
    missing description under enforcement, missing id, conflicting
    re-declaration.

    Attributes:
        enforce_descriptions: Reject descriptors without a description
        warnings: Diagnostics for skipped declarations, in discovery order

    Example:
        >>> registry = MessageRegistry()
        >>> registry.store(MessageDescriptor("greet", None, "Hi"), None)
        <StoreOutcome.STORED: 'stored'>
        >>> registry.store(MessageDescriptor("greet", None, "Hi"), None)
        <StoreOutcome.UNCHANGED: 'unchanged'>
    """

    __slots__ = ("_lines", "_messages", "enforce_descriptions", "warnings")

    def __init__(self, *, enforce_descriptions: bool = False) -> None:
        self.enforce_descriptions = enforce_descriptions
        self.warnings: list[Diagnostic] = []
        self._messages: dict[str, MessageDescriptor] = {}
        self._lines: dict[str, int | None] = {}

    def store(
        self, descriptor: MessageDescriptor, location: SourceLocation | None
    ) -> StoreOutcome:
        """Record a descriptor found at location.

        Args:
            descriptor: Descriptor built from the declaration site
            location: Declaration site (used in diagnostics)

        Returns:
            STORED for a new id, UNCHANGED for an identical re-declaration,
            SKIPPED when there is no default message

        Raises:
            MissingMessageFieldError: No id, or no description while
                descriptions are enforced
            DuplicateMessageIdError: Known id with different content
        """
        span = location.to_span() if location is not None else None

        if not descriptor.default_message:
            warning = ErrorTemplate.missing_default_message(span)
            self.warnings.append(warning)
            logger.warning("%s", warning.message)
            return StoreOutcome.SKIPPED

        if self.enforce_descriptions and not descriptor.description:
            raise MissingMessageFieldError(ErrorTemplate.missing_description(span))

        if not descriptor.id:
            raise MissingMessageFieldError(ErrorTemplate.missing_id(span))

        existing = self._messages.get(descriptor.id)
        if existing is not None:
            if (
                existing.description != descriptor.description
                or existing.default_message != descriptor.default_message
            ):
                raise DuplicateMessageIdError(
                    ErrorTemplate.duplicate_message_id(descriptor.id, span)
                )
            return StoreOutcome.UNCHANGED

        self._messages[descriptor.id] = descriptor
        self._lines[descriptor.id] = location.line if location is not None else None
        logger.debug("Stored message %r", descriptor.id)
        return StoreOutcome.STORED

    def export(self) -> tuple[MessageDescriptor, ...]:
        """Stored descriptors in first-insertion order."""
        return tuple(self._messages.values())

    def get(self, message_id: str) -> MessageDescriptor | None:
        """Descriptor stored under message_id, if any."""
        return self._messages.get(message_id)

    def line_of(self, message_id: str) -> int | None:
        """Line of the first declaration of message_id."""
        return self._lines.get(message_id)

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._messages

    def __iter__(self) -> Iterator[MessageDescriptor]:
        return iter(self._messages.values())
