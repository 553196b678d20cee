"""Declaration-site recognizers.

Two site forms are recognized when their name is imported from the
configured module:

    <FormattedMessage id="..." description="..." defaultMessage="..." />
    defineMessage({id, description, defaultMessage})
    defineMessages({key: {id, description, defaultMessage}, ...})

Each recognizer first computes and stores the descriptor, then builds the
rewritten node (generated id added, extracted text stripped). Nodes are
never mutated; an untouched site is returned as the same object.

Python 3.13+.
"""

import logging
from dataclasses import dataclass, replace

from intlextract.constants import (
    BATCH_DESCRIPTOR_FUNCTION,
    COMPONENT_NAMES,
    DESCRIPTOR_FIELDS,
    FUNCTION_NAMES,
)
from intlextract.diagnostics import ErrorTemplate, MalformedDescriptorError
from intlextract.enums import DescriptorField, StoreOutcome
from intlextract.icu import normalize_message
from intlextract.syntax.ast import (
    BooleanLiteral,
    CallExpression,
    Identifier,
    JSXAttribute,
    JSXIdentifier,
    JSXOpeningElement,
    Node,
    ObjectExpression,
    ObjectProperty,
    StringLiteral,
    span_of,
)
from intlextract.syntax.bindings import ImportBindings
from intlextract.syntax.visitor import ASTTransformer, TransformerResult

from .descriptor import Normalizer, build_descriptor
from .identifiers import generate_message_id
from .options import ExtractionOptions
from .registry import MessageRegistry

__all__ = [
    "ExtractionContext",
    "MessageExtractor",
    "recognize_call",
    "recognize_element",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExtractionContext:
    """Everything a recognizer needs for one compilation unit.

    Attributes:
        options: Extraction options
        registry: The unit's message registry
        bindings: The unit's import table
        normalize: Default-message grammar validator
    """

    options: ExtractionOptions
    registry: MessageRegistry
    bindings: ImportBindings
    normalize: Normalizer = normalize_message


# ============================================================================
# JSX ELEMENT FORM
# ============================================================================


def _attribute_value(attribute: JSXAttribute) -> Node:
    """Value node of an attribute; a bare attribute means `true`."""
    if attribute.value is None:
        return BooleanLiteral(value=True, loc=attribute.loc)
    return attribute.value


def _is_descriptor_attribute(attribute: JSXAttribute) -> bool:
    return isinstance(attribute.name, JSXIdentifier) and attribute.name.name in DESCRIPTOR_FIELDS


def recognize_element(node: JSXOpeningElement, context: ExtractionContext) -> JSXOpeningElement:
    """Extract the descriptor declared by a message component.

    Elements without a default message are left alone: their descriptor
    may be spread in (`<FormattedMessage {...message} />`) and extracted
    where it is defined.

    Args:
        node: Opening element of any JSX element
        context: Unit context

    Returns:
        node itself, or a rewritten copy when an id was added or
        descriptor attributes were stripped

    Raises:
        ExtractionError: On any unit-fatal descriptor problem
    """
    if context.bindings.references_import(
        node.name, context.options.module_source_name, COMPONENT_NAMES
    ) is None:
        return node

    attributes = [
        attr
        for attr in node.attributes
        if isinstance(attr, JSXAttribute) and isinstance(attr.name, JSXIdentifier)
    ]
    descriptor = build_descriptor(
        ((attr.name, _attribute_value(attr)) for attr in attributes), context.normalize
    )
    if not descriptor.default_message:
        return node

    rewritten = list(node.attributes)
    if context.options.generate_message_ids and not descriptor.id:
        message_id = generate_message_id(descriptor, node.loc)
        descriptor = descriptor.with_id(message_id)
        rewritten.append(
            JSXAttribute(JSXIdentifier(DescriptorField.ID.value), StringLiteral(message_id))
        )

    context.registry.store(descriptor, node.loc)

    if context.options.remove_extracted_data:
        rewritten = [
            attr
            for attr in rewritten
            if not (
                isinstance(attr, JSXAttribute)
                and _is_descriptor_attribute(attr)
                and attr.name.name != DescriptorField.ID  # type: ignore[union-attr]
            )
        ]

    if len(rewritten) == len(node.attributes) and all(
        new is old for new, old in zip(rewritten, node.attributes, strict=True)
    ):
        return node
    return replace(node, attributes=tuple(rewritten))


# ============================================================================
# CALL FORM
# ============================================================================


def _id_property(message_id: str) -> ObjectProperty:
    return ObjectProperty(key=Identifier(DescriptorField.ID.value), value=StringLiteral(message_id))


def _malformed(callee: str, call: CallExpression) -> MalformedDescriptorError:
    return MalformedDescriptorError(ErrorTemplate.malformed_descriptor_argument(callee, span_of(call)))


def _process_descriptor_object(
    obj: Node | None, callee: str, call: CallExpression, context: ExtractionContext
) -> Node:
    """Extract one descriptor object literal and return its replacement."""
    if not ObjectExpression.guard(obj):
        raise _malformed(callee, call)

    pairs = [(prop.key, prop.value) for prop in obj.properties if isinstance(prop, ObjectProperty)]
    descriptor = build_descriptor(pairs, context.normalize)

    rewritten: ObjectExpression = obj
    if context.options.generate_message_ids and not descriptor.id:
        message_id = generate_message_id(descriptor, call.loc)
        descriptor = descriptor.with_id(message_id)
        rewritten = replace(obj, properties=(_id_property(message_id), *obj.properties))

    if context.registry.store(descriptor, call.loc) is StoreOutcome.SKIPPED:
        return obj

    if context.options.remove_extracted_data:
        stored_id: str = descriptor.id  # type: ignore[assignment]  # stored descriptors have an id
        return ObjectExpression(properties=(_id_property(stored_id),), loc=obj.loc)
    return rewritten


def recognize_call(node: CallExpression, context: ExtractionContext) -> CallExpression:
    """Extract descriptors passed to defineMessage or defineMessages.

    The form is decided by the imported name, so
    `import {defineMessages as m}` makes `m({...})` a batch call.

    Args:
        node: Any call expression
        context: Unit context

    Returns:
        node itself, or a copy with rewritten descriptor objects

    Raises:
        MalformedDescriptorError: If the descriptor argument is missing or
            not an object literal (or, for a batch, holds a spread or a
            non-object value)
        ExtractionError: On any other unit-fatal descriptor problem
    """
    imported = context.bindings.references_import(
        node.callee, context.options.module_source_name, FUNCTION_NAMES
    )
    if imported is None:
        return node

    callee = node.callee.name  # type: ignore[union-attr]  # resolved references are identifiers
    first = node.arguments[0] if node.arguments else None

    if imported == BATCH_DESCRIPTOR_FUNCTION:
        if not ObjectExpression.guard(first):
            raise _malformed(callee, node)
        properties: list[Node] = []
        for prop in first.properties:
            if not isinstance(prop, ObjectProperty):
                raise _malformed(callee, node)
            value = _process_descriptor_object(prop.value, callee, node, context)
            properties.append(prop if value is prop.value else replace(prop, value=value))
        changed = any(new is not old for new, old in zip(properties, first.properties, strict=True))
        replacement: Node = replace(first, properties=tuple(properties)) if changed else first
    else:
        replacement = _process_descriptor_object(first, callee, node, context)

    if replacement is first:
        return node
    logger.debug("Rewrote descriptor argument of %s()", callee)
    return replace(node, arguments=(replacement, *node.arguments[1:]))


# ============================================================================
# TRANSFORMER
# ============================================================================


class MessageExtractor(ASTTransformer):
    """Pre-order transformer applying both recognizers to a unit.

    A site is recognized before its children are visited, so the registry
    receives descriptors in source order.
    """

    __slots__ = ("context",)

    def __init__(self, context: ExtractionContext, *, max_depth: int | None = None) -> None:
        super().__init__(max_depth=max_depth)
        self.context = context

    def visit_JSXOpeningElement(self, node: JSXOpeningElement) -> TransformerResult:  # noqa: N802
        return self.generic_visit(recognize_element(node, self.context))

    def visit_CallExpression(self, node: CallExpression) -> TransformerResult:  # noqa: N802
        return self.generic_visit(recognize_call(node, self.context))
