"""Tests for extraction.descriptor and extraction.identifiers."""

import hashlib

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from intlextract.diagnostics import (
    DiagnosticCode,
    MessageValidationError,
    MissingMessageFieldError,
    StaticEvaluationError,
)
from intlextract.extraction import MessageDescriptor, build_descriptor, descriptor_key
from intlextract.extraction.identifiers import generate_message_id
from intlextract.icu import normalize_message
from intlextract.syntax import (
    BinaryExpression,
    BooleanLiteral,
    Identifier,
    JSXIdentifier,
    NumericLiteral,
    SourceLocation,
    StringLiteral,
)
from tests.strategies import descriptions, simple_messages

optional_descriptions = st.none() | descriptions


def _pairs(**fields: object) -> list[tuple[Identifier, object]]:
    return [
        (Identifier(key), StringLiteral(value) if isinstance(value, str) else value)
        for key, value in fields.items()
    ]


# ============================================================================
# MESSAGE DESCRIPTOR
# ============================================================================


class TestMessageDescriptor:
    """Value object behaviour."""

    def test_to_dict_omits_missing_description(self) -> None:
        descriptor = MessageDescriptor(id="a", default_message="Hi")
        assert descriptor.to_dict() == {"id": "a", "defaultMessage": "Hi"}

    def test_to_dict_field_order(self) -> None:
        descriptor = MessageDescriptor(id="a", description="d", default_message="Hi")
        assert list(descriptor.to_dict()) == ["id", "description", "defaultMessage"]

    def test_from_dict_inverts_to_dict(self) -> None:
        descriptor = MessageDescriptor(id="a", description="d", default_message="Hi")
        assert MessageDescriptor.from_dict(descriptor.to_dict()) == descriptor

    def test_with_id(self) -> None:
        assert MessageDescriptor(default_message="Hi").with_id("x").id == "x"


# ============================================================================
# KEYS
# ============================================================================


class TestDescriptorKey:
    """Property keys and attribute names."""

    def test_identifier_and_jsx_identifier(self) -> None:
        assert descriptor_key(Identifier("id")) == "id"
        assert descriptor_key(JSXIdentifier("defaultMessage")) == "defaultMessage"

    def test_string_literal_key(self) -> None:
        assert descriptor_key(StringLiteral("description")) == "description"

    def test_computed_constant_key(self) -> None:
        key = BinaryExpression("+", StringLiteral("default"), StringLiteral("Message"))
        assert descriptor_key(key) == "defaultMessage"

    def test_unresolvable_keys(self) -> None:
        assert descriptor_key(NumericLiteral(1)) is None
        assert descriptor_key(BinaryExpression("+", Identifier("a"), Identifier("b"))) is None


# ============================================================================
# BUILD
# ============================================================================


class TestBuildDescriptor:
    """Descriptor construction from declaration sites."""

    def test_all_fields(self) -> None:
        descriptor = build_descriptor(
            _pairs(id="greet", description="On the home page", defaultMessage="Hello")
        )
        assert descriptor == MessageDescriptor("greet", "On the home page", "Hello")

    def test_unknown_keys_are_ignored(self) -> None:
        descriptor = build_descriptor(_pairs(id="x", values=Identifier("v"), defaultMessage="Hi"))
        assert descriptor == MessageDescriptor(id="x", default_message="Hi")

    def test_absent_fields_are_none(self) -> None:
        assert build_descriptor([]) == MessageDescriptor()

    def test_values_are_trimmed(self) -> None:
        descriptor = build_descriptor(_pairs(id="  x ", defaultMessage="\n  Hi\n"))
        assert descriptor == MessageDescriptor(id="x", default_message="Hi")

    def test_default_message_is_normalized(self) -> None:
        descriptor = build_descriptor(_pairs(defaultMessage="Hi { name }"))
        assert descriptor.default_message == "Hi {name}"

    def test_later_pair_wins(self) -> None:
        descriptor = build_descriptor(_pairs(id="first") + _pairs(id="second"))
        assert descriptor.id == "second"

    def test_constant_expression_value(self) -> None:
        value = BinaryExpression("+", StringLiteral("Hello, "), StringLiteral("world"))
        assert build_descriptor(_pairs(defaultMessage=value)).default_message == "Hello, world"

    def test_runtime_value_is_fatal(self) -> None:
        loc = SourceLocation(line=4, column=10)
        with pytest.raises(StaticEvaluationError) as info:
            build_descriptor(_pairs(defaultMessage=Identifier("greeting", loc=loc)))
        diagnostic = info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.FIELD_NOT_STATIC
        assert "`defaultMessage`" in diagnostic.message
        assert diagnostic.span is not None
        assert (diagnostic.span.line, diagnostic.span.column) == (4, 11)

    def test_non_string_value_is_fatal(self) -> None:
        with pytest.raises(StaticEvaluationError) as info:
            build_descriptor(_pairs(description=NumericLiteral(3)))
        assert info.value.diagnostic is not None
        assert info.value.diagnostic.code is DiagnosticCode.FIELD_NOT_STRING
        assert "got number" in info.value.diagnostic.message

    def test_bare_boolean_value_is_not_a_string(self) -> None:
        with pytest.raises(StaticEvaluationError, match="got boolean"):
            build_descriptor(_pairs(id=BooleanLiteral(True)))

    def test_invalid_message_is_fatal_and_chained(self) -> None:
        with pytest.raises(MessageValidationError) as info:
            build_descriptor(_pairs(defaultMessage="Hi {name"))
        assert info.value.diagnostic is not None
        assert info.value.diagnostic.code is DiagnosticCode.MESSAGE_SYNTAX_INVALID
        assert "Unclosed argument" in info.value.diagnostic.message
        assert info.value.__cause__ is not None

    def test_custom_normalizer(self) -> None:
        descriptor = build_descriptor(_pairs(defaultMessage="hi"), normalize=str.upper)
        assert descriptor.default_message == "HI"

    def test_empty_default_message_is_not_validated(self) -> None:
        def explode(text: str) -> str:
            raise AssertionError(text)

        assert build_descriptor(_pairs(id="x"), normalize=explode).default_message is None


# ============================================================================
# IDENTIFIERS
# ============================================================================


class TestGenerateMessageId:
    """Content hash ids."""

    def test_known_digest(self) -> None:
        assert (
            generate_message_id(MessageDescriptor(default_message="Hello"))
            == "f7ff9e8b7bb2e09b70935a5d785e0cc5d9d0abf0"
        )

    def test_description_is_appended(self) -> None:
        descriptor = MessageDescriptor(description="greeting", default_message="Hello")
        expected = hashlib.sha1(b"Hellogreeting", usedforsecurity=False).hexdigest()
        assert generate_message_id(descriptor) == expected

    def test_empty_description_is_ignored(self) -> None:
        with_empty = MessageDescriptor(description="", default_message="Hello")
        without = MessageDescriptor(default_message="Hello")
        assert generate_message_id(with_empty) == generate_message_id(without)

    def test_existing_id_does_not_matter(self) -> None:
        a = MessageDescriptor(id="a", default_message="Hello")
        b = MessageDescriptor(id="b", default_message="Hello")
        assert generate_message_id(a) == generate_message_id(b)

    def test_missing_default_message(self) -> None:
        loc = SourceLocation(line=2, column=0)
        with pytest.raises(MissingMessageFieldError) as info:
            generate_message_id(MessageDescriptor(description="d"), loc)
        assert info.value.diagnostic is not None
        assert info.value.diagnostic.code is DiagnosticCode.CANNOT_GENERATE_ID
        assert info.value.diagnostic.span is not None
        assert info.value.diagnostic.span.line == 2

    @given(message=simple_messages(), description=descriptions)
    def test_deterministic_lowercase_hex(self, message: str, description: str) -> None:
        if not message:
            return
        descriptor = MessageDescriptor(description=description, default_message=message)
        first = generate_message_id(descriptor)
        assert first == generate_message_id(descriptor)
        assert len(first) == 40
        assert first == first.lower()
        int(first, 16)

    def test_description_alone_changes_the_id(self) -> None:
        plain = MessageDescriptor(default_message="Save")
        button = MessageDescriptor(description="Button label", default_message="Save")
        menu = MessageDescriptor(description="Menu item", default_message="Save")
        ids = {generate_message_id(d) for d in (plain, button, menu)}
        assert len(ids) == 3

    @given(first=simple_messages(), second=simple_messages(), description=optional_descriptions)
    def test_different_messages_get_different_ids(
        self, first: str, second: str, description: str | None
    ) -> None:
        assume(first and second and first != second)
        a = MessageDescriptor(description=description, default_message=first)
        b = MessageDescriptor(description=description, default_message=second)
        assert generate_message_id(a) != generate_message_id(b)

    @given(message=simple_messages(), first=optional_descriptions, second=optional_descriptions)
    def test_different_descriptions_get_different_ids(
        self, message: str, first: str | None, second: str | None
    ) -> None:
        assume(message and first != second)
        a = MessageDescriptor(description=first, default_message=message)
        b = MessageDescriptor(description=second, default_message=message)
        assert generate_message_id(a) != generate_message_id(b)

    @given(message=simple_messages())
    def test_equivalent_spellings_share_an_id(self, message: str) -> None:
        if not message:
            return
        spaced = message.replace("{", "{ ").replace("}", " }")
        a = build_descriptor(_pairs(defaultMessage=message))
        b = build_descriptor(_pairs(defaultMessage=spaced))
        if not a.default_message:
            return
        assert generate_message_id(a) == generate_message_id(b)
        assert a.default_message == normalize_message(spaced.strip())
