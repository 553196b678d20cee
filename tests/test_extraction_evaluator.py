"""Tests for extraction.evaluator: constant folding with JavaScript semantics."""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intlextract.extraction.evaluator import (
    UNDEFINED,
    Evaluation,
    Evaluator,
    evaluate,
    js_to_string,
    js_truthy,
    js_typeof,
)
from intlextract.syntax import (
    BinaryExpression,
    BooleanLiteral,
    CallExpression,
    ConditionalExpression,
    GenericNode,
    Identifier,
    JSXExpressionContainer,
    LogicalExpression,
    MemberExpression,
    NullLiteral,
    NumericLiteral,
    StringLiteral,
    TemplateElement,
    TemplateLiteral,
    UnaryExpression,
)


def _value(node: object) -> object:
    evaluation = evaluate(node)  # type: ignore[arg-type]
    assert evaluation.confident
    return evaluation.value


def _template(*parts: object) -> TemplateLiteral:
    """Alternate quasis (str) and expressions (nodes), starting with a quasi."""
    quasis = [TemplateElement(raw=p, cooked=p) for p in parts[::2]]  # type: ignore[arg-type]
    quasis[-1] = TemplateElement(raw=quasis[-1].raw, cooked=quasis[-1].cooked, tail=True)
    return TemplateLiteral(quasis=tuple(quasis), expressions=tuple(parts[1::2]))  # type: ignore[arg-type]


# ============================================================================
# COERCION HELPERS
# ============================================================================


class TestCoercion:
    """JavaScript ToString / ToBoolean / typeof."""

    @pytest.mark.parametrize(
        ("value", "text"),
        [
            (1, "1"),
            (1.0, "1"),
            (1.5, "1.5"),
            (-0.0, "0"),
            (0.1, "0.1"),
            (1e21, "1e+21"),
            (1e-7, "1e-7"),
            (math.nan, "NaN"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (True, "true"),
            (None, "null"),
            (UNDEFINED, "undefined"),
        ],
    )
    def test_to_string(self, value: object, text: str) -> None:
        assert js_to_string(value) == text

    @pytest.mark.parametrize(
        ("value", "truthy"),
        [(0, False), (math.nan, False), ("", False), (None, False), (UNDEFINED, False),
         (1, True), ("0", True), (True, True)],
    )
    def test_truthy(self, value: object, truthy: bool) -> None:
        assert js_truthy(value) is truthy

    @pytest.mark.parametrize(
        ("value", "type_name"),
        [("s", "string"), (1, "number"), (1.5, "number"), (False, "boolean"),
         (None, "object"), (UNDEFINED, "undefined")],
    )
    def test_typeof(self, value: object, type_name: str) -> None:
        assert js_typeof(value) == type_name

    def test_undefined_is_a_singleton(self) -> None:
        assert type(UNDEFINED)() is UNDEFINED
        assert repr(UNDEFINED) == "undefined"


# ============================================================================
# LITERALS AND TEMPLATES
# ============================================================================


class TestLiterals:
    """Literal nodes fold to their values."""

    def test_literals(self) -> None:
        assert _value(StringLiteral("hi")) == "hi"
        assert _value(NumericLiteral(3)) == 3
        assert _value(BooleanLiteral(False)) is False
        assert _value(NullLiteral()) is None

    def test_global_constants(self) -> None:
        assert _value(Identifier("undefined")) is UNDEFINED
        assert math.isnan(_value(Identifier("NaN")))  # type: ignore[arg-type]
        assert _value(Identifier("Infinity")) == math.inf

    def test_runtime_identifier_is_not_confident(self) -> None:
        assert evaluate(Identifier("greeting")) == Evaluation(confident=False)

    def test_calls_and_member_access_are_not_confident(self) -> None:
        assert not evaluate(CallExpression(Identifier("t"), ())).confident
        assert not evaluate(MemberExpression(Identifier("a"), Identifier("b"))).confident

    def test_template_without_expressions(self) -> None:
        assert _value(_template("Hello")) == "Hello"

    def test_template_with_constant_expressions(self) -> None:
        node = _template("a", NumericLiteral(1), "b", StringLiteral("c"), "")
        assert _value(node) == "a1bc"

    def test_template_with_runtime_expression(self) -> None:
        assert not evaluate(_template("Hi ", Identifier("name"), "")).confident

    def test_template_with_invalid_escape(self) -> None:
        node = TemplateLiteral(quasis=(TemplateElement(raw="\\u", cooked=None, tail=True),), expressions=())
        assert not evaluate(node).confident

    def test_jsx_expression_container(self) -> None:
        assert _value(JSXExpressionContainer(StringLiteral("x"))) == "x"

    def test_parenthesized_expression(self) -> None:
        node = GenericNode(type="ParenthesizedExpression", fields=(("expression", StringLiteral("p")),))
        assert _value(node) == "p"

    def test_unknown_generic_node(self) -> None:
        assert not evaluate(GenericNode(type="ArrowFunctionExpression", fields=())).confident


# ============================================================================
# OPERATORS
# ============================================================================


class TestOperators:
    """Unary, binary, logical and conditional folding."""

    @pytest.mark.parametrize(
        ("operator", "left", "right", "expected"),
        [
            ("+", StringLiteral("a"), StringLiteral("b"), "ab"),
            ("+", StringLiteral("a"), NumericLiteral(1), "a1"),
            ("+", NumericLiteral(1), NumericLiteral(2), 3),
            ("+", NumericLiteral(1), BooleanLiteral(True), 2),
            ("+", StringLiteral("n: "), NullLiteral(), "n: null"),
            ("-", StringLiteral("5"), NumericLiteral(2), 3),
            ("*", NumericLiteral(2), NumericLiteral(2.5), 5),
            ("/", NumericLiteral(1), NumericLiteral(4), 0.25),
            ("/", NumericLiteral(1), NumericLiteral(0), math.inf),
            ("%", NumericLiteral(7), NumericLiteral(3), 1),
            ("**", NumericLiteral(2), NumericLiteral(10), 1024),
            ("|", NumericLiteral(5), NumericLiteral(2), 7),
            ("<<", NumericLiteral(1), NumericLiteral(33), 2),
            (">>>", NumericLiteral(-1), NumericLiteral(28), 15),
            ("===", NumericLiteral(1), NumericLiteral(1.0), True),
            ("===", StringLiteral("1"), NumericLiteral(1), False),
            ("==", StringLiteral("1"), NumericLiteral(1), True),
            ("==", NullLiteral(), Identifier("undefined"), True),
            ("!=", NullLiteral(), NumericLiteral(0), True),
            ("<", StringLiteral("a"), StringLiteral("b"), True),
            (">=", NumericLiteral(2), StringLiteral("10"), False),
        ],
    )
    def test_binary(self, operator: str, left: object, right: object, expected: object) -> None:
        assert _value(BinaryExpression(operator, left, right)) == expected  # type: ignore[arg-type]

    def test_nan_arithmetic(self) -> None:
        result = _value(BinaryExpression("-", StringLiteral("x"), NumericLiteral(1)))
        assert math.isnan(result)  # type: ignore[arg-type]

    def test_nan_comparison_is_false(self) -> None:
        assert _value(BinaryExpression("<", Identifier("NaN"), NumericLiteral(1))) is False

    def test_unknown_binary_operator(self) -> None:
        assert not evaluate(BinaryExpression("in", StringLiteral("a"), StringLiteral("b"))).confident

    @pytest.mark.parametrize(
        ("operator", "argument", "expected"),
        [
            ("!", StringLiteral(""), True),
            ("-", StringLiteral("3"), -3),
            ("+", BooleanLiteral(True), 1),
            ("~", NumericLiteral(0), -1),
            ("typeof", StringLiteral("x"), "string"),
            ("typeof", NullLiteral(), "object"),
        ],
    )
    def test_unary(self, operator: str, argument: object, expected: object) -> None:
        assert _value(UnaryExpression(operator, argument)) == expected  # type: ignore[arg-type]

    def test_void_ignores_argument(self) -> None:
        assert _value(UnaryExpression("void", Identifier("runtime"))) is UNDEFINED

    def test_delete_is_not_confident(self) -> None:
        assert not evaluate(UnaryExpression("delete", Identifier("x"))).confident

    def test_logical_short_circuit(self) -> None:
        assert _value(LogicalExpression("||", StringLiteral("a"), Identifier("runtime"))) == "a"
        assert _value(LogicalExpression("&&", StringLiteral(""), Identifier("runtime"))) == ""
        assert _value(LogicalExpression("??", NullLiteral(), StringLiteral("d"))) == "d"
        assert _value(LogicalExpression("??", NumericLiteral(0), StringLiteral("d"))) == 0

    def test_logical_needs_right_side_when_not_short_circuited(self) -> None:
        assert not evaluate(LogicalExpression("&&", StringLiteral("a"), Identifier("x"))).confident

    def test_conditional(self) -> None:
        node = ConditionalExpression(NumericLiteral(0), Identifier("runtime"), StringLiteral("no"))
        assert _value(node) == "no"

    def test_nested_concatenation(self) -> None:
        node = BinaryExpression(
            "+",
            BinaryExpression("+", StringLiteral("Hello, "), StringLiteral("{name}")),
            StringLiteral("!"),
        )
        assert _value(node) == "Hello, {name}!"

    @given(a=st.text(max_size=20), b=st.text(max_size=20))
    def test_string_concatenation_matches_python(self, a: str, b: str) -> None:
        assert _value(BinaryExpression("+", StringLiteral(a), StringLiteral(b))) == a + b

    @given(a=st.integers(-(2**31), 2**31 - 1), b=st.integers(-(2**31), 2**31 - 1))
    def test_bitwise_and_matches_int32(self, a: int, b: int) -> None:
        assert _value(BinaryExpression("&", NumericLiteral(a), NumericLiteral(b))) == a & b


class TestHugeNumbers:
    """Integers past the double range behave as Infinity, as in JavaScript."""

    huge = NumericLiteral(10**400)

    def test_concatenation(self) -> None:
        assert _value(BinaryExpression("+", StringLiteral("a"), self.huge)) == "aInfinity"
        assert _value(BinaryExpression("+", self.huge, StringLiteral("!"))) == "Infinity!"

    def test_arithmetic_and_unary(self) -> None:
        assert _value(BinaryExpression("*", self.huge, NumericLiteral(2))) == math.inf
        assert _value(UnaryExpression("-", self.huge)) == -math.inf
        assert _value(UnaryExpression("~", self.huge)) == -1

    def test_equality_and_truthiness(self) -> None:
        other = NumericLiteral(10**401)
        assert _value(BinaryExpression("===", self.huge, other)) is True
        assert js_truthy(10**400) is True
        assert js_to_string(-(10**400)) == "-Infinity"

    def test_huge_radix_string(self) -> None:
        assert _value(UnaryExpression("+", StringLiteral("0x" + "f" * 300))) == math.inf


# ============================================================================
# DEPTH
# ============================================================================


class TestDepth:
    """Deep operator chains are cut off, not crashed on."""

    def test_deep_chain_is_not_confident(self) -> None:
        node: object = StringLiteral("x")
        for _ in range(10):
            node = BinaryExpression("+", node, StringLiteral("y"))  # type: ignore[arg-type]
        assert not Evaluator(max_depth=5).evaluate(node).confident  # type: ignore[arg-type]
        assert Evaluator(max_depth=50).evaluate(node).value == "x" + "y" * 10  # type: ignore[arg-type]

    def test_evaluator_is_reusable(self) -> None:
        evaluator = Evaluator(max_depth=3)
        deep = BinaryExpression("+", BinaryExpression("+", BinaryExpression(
            "+", StringLiteral("a"), StringLiteral("b")), StringLiteral("c")), StringLiteral("d"))
        assert not evaluator.evaluate(deep).confident
        assert evaluator.evaluate(StringLiteral("ok")).value == "ok"
