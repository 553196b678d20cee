"""Message descriptors and their construction from declaration sites.

A declaration site supplies (key, value) node pairs: JSX attributes or
object-literal properties. build_descriptor resolves the keys, keeps the
three descriptor fields, folds their values to strings and validates the
default message.

Python 3.13+.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from intlextract.diagnostics import (
    ErrorTemplate,
    MessageFormatSyntaxError,
    MessageValidationError,
    StaticEvaluationError,
)
from intlextract.enums import DescriptorField
from intlextract.icu import normalize_message
from intlextract.syntax.ast import Identifier, JSXIdentifier, Node, span_of

from .evaluator import evaluate, js_typeof

__all__ = ["MessageDescriptor", "Normalizer", "build_descriptor", "descriptor_key"]

logger = logging.getLogger(__name__)

type Normalizer = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """One translatable message.

    Attributes:
        id: Stable message identifier
        description: Context for translators
        default_message: Source-language text in ICU MessageFormat
    """

    id: str | None = None
    description: str | None = None
    default_message: str | None = None

    def with_id(self, message_id: str) -> "MessageDescriptor":
        """Copy with the id replaced."""
        return replace(self, id=message_id)

    def to_dict(self) -> dict[str, str | None]:
        """JSON form: id, description (omitted when None), defaultMessage."""
        data: dict[str, str | None] = {"id": self.id}
        if self.description is not None:
            data["description"] = self.description
        data["defaultMessage"] = self.default_message
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MessageDescriptor":
        """Inverse of to_dict (used when reloading a unit export)."""
        return cls(
            id=data.get("id"),
            description=data.get("description"),
            default_message=data.get("defaultMessage"),
        )


def descriptor_key(key: Node) -> str | None:
    """Field name a property key or attribute name denotes.

    Plain names give their text; any other key is folded and used when
    it is a string. Returns None for keys that cannot be resolved.
    """
    if isinstance(key, (Identifier, JSXIdentifier)):
        return key.name
    evaluation = evaluate(key)
    if evaluation.confident and isinstance(evaluation.value, str):
        return evaluation.value
    return None


def _field_text(field: DescriptorField, value: Node) -> str:
    evaluation = evaluate(value)
    if not evaluation.confident:
        raise StaticEvaluationError(ErrorTemplate.field_not_static(field.value, span_of(value)))
    if not isinstance(evaluation.value, str):
        type_name = js_typeof(evaluation.value)
        raise StaticEvaluationError(
            ErrorTemplate.field_not_string(field.value, type_name, span_of(value))
        )
    return evaluation.value.strip()


def build_descriptor(
    pairs: Iterable[tuple[Node, Node]],
    normalize: Normalizer = normalize_message,
) -> MessageDescriptor:
    """Build a descriptor from a declaration site's (key, value) pairs.

    Only id, description and defaultMessage are read; other keys are
    ignored. A later pair for the same field wins, as in an object literal.

    Args:
        pairs: Key and value nodes in source order
        normalize: Grammar validator for the default message

    Returns:
        Descriptor with absent fields left as None

    Raises:
        StaticEvaluationError: If a field value is not a build-time string
        MessageValidationError: If the default message fails validation
    """
    values: dict[DescriptorField, str] = {}
    value_nodes: dict[DescriptorField, Node] = {}
    for key, value in pairs:
        name = descriptor_key(key)
        if name is None:
            continue
        try:
            field = DescriptorField(name)
        except ValueError:
            continue
        values[field] = _field_text(field, value)
        value_nodes[field] = value

    default_message = values.get(DescriptorField.DEFAULT_MESSAGE)
    if default_message is not None:
        try:
            default_message = normalize(default_message)
        except MessageFormatSyntaxError as e:
            detail = e.parse_error.format_error() if e.parse_error is not None else str(e)
            span = span_of(value_nodes[DescriptorField.DEFAULT_MESSAGE])
            raise MessageValidationError(ErrorTemplate.message_syntax_invalid(detail, span)) from e

    descriptor = MessageDescriptor(
        id=values.get(DescriptorField.ID),
        description=values.get(DescriptorField.DESCRIPTION),
        default_message=default_message,
    )
    logger.debug("Built descriptor %r", descriptor)
    return descriptor
