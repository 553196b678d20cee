"""Build-time constant evaluation of host expressions.

Folds the expressions a descriptor field may be written with (literals,
template literals, operators over constants) to a Python value following
JavaScript semantics. Anything that depends on runtime state is reported
as not confident rather than guessed.

Value mapping:
    string -> str, number -> int | float, boolean -> bool,
    null -> None, undefined -> UNDEFINED

Python 3.13+. Zero external dependencies.
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from intlextract.constants import MAX_DEPTH
from intlextract.core.depth_guard import DepthGuard, DepthLimitExceededError
from intlextract.syntax.ast import (
    BinaryExpression,
    BooleanLiteral,
    ConditionalExpression,
    GenericNode,
    Identifier,
    JSXExpressionContainer,
    LogicalExpression,
    Node,
    NullLiteral,
    NumericLiteral,
    StringLiteral,
    TemplateLiteral,
    UnaryExpression,
)

__all__ = [
    "UNDEFINED",
    "Evaluation",
    "Evaluator",
    "evaluate",
    "js_to_string",
    "js_truthy",
    "js_typeof",
]


class _Undefined:
    """JavaScript `undefined` (distinct from null/None)."""

    __slots__ = ()
    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()

type JSValue = str | int | float | bool | None | _Undefined


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Outcome of folding one expression.

    Attributes:
        confident: True when value is the expression's build-time value
        value: Folded value (meaningless when not confident)
    """

    confident: bool
    value: object = None

    @classmethod
    def unknown(cls) -> "Evaluation":
        """Not statically known."""
        return cls(confident=False)


class _NotConstant(Exception):
    """Internal signal: the expression depends on runtime state."""


# ============================================================================
# JAVASCRIPT COERCION
# ============================================================================

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_float(value: int | float) -> float:
    """Integers beyond the double range become infinities."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def js_typeof(value: object) -> str:
    """Result of the `typeof` operator for a folded value."""
    match value:
        case bool():
            return "boolean"
        case str():
            return "string"
        case int() | float():
            return "number"
        case _Undefined():
            return "undefined"
        case _:
            return "object"


def js_truthy(value: object) -> bool:
    """JavaScript ToBoolean."""
    if _is_number(value):
        number = _as_float(value)  # type: ignore[arg-type]
        return not (number == 0 or math.isnan(number))
    return bool(value)


def _number_to_string(value: float) -> str:
    value = _as_float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(repr(float(value))), "f")
    mantissa, _, exponent = repr(float(value)).partition("e")
    exp = int(exponent)
    mantissa = mantissa.removesuffix(".0")
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def js_to_string(value: object) -> str:
    """JavaScript ToString for primitive values.

    Example:
        >>> js_to_string(1.0), js_to_string(None), js_to_string(UNDEFINED)
        ('1', 'null', 'undefined')
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case int() | float():
            return _number_to_string(value)
        case None:
            return "null"
        case _Undefined():
            return "undefined"
        case _:
            raise _NotConstant


def _to_number(value: object) -> float:
    """JavaScript ToNumber for primitive values."""
    match value:
        case bool():
            return 1.0 if value else 0.0
        case int() | float():
            return _as_float(value)
        case None:
            return 0.0
        case _Undefined():
            return math.nan
        case str():
            return _string_to_number(value)
        case _:
            raise _NotConstant


def _string_to_number(text: str) -> float:
    s = text.strip()
    if not s:
        return 0.0
    if s in ("Infinity", "+Infinity"):
        return math.inf
    if s == "-Infinity":
        return -math.inf
    radix = _RADIX_PREFIXES.get(s[:2].lower())
    if radix is not None:
        try:
            return _as_float(int(s[2:], radix))
        except ValueError:
            return math.nan
    if _DECIMAL_RE.fullmatch(s):
        return float(s)
    return math.nan


def _to_int32(value: object) -> int:
    number = _to_number(value)
    if math.isnan(number) or math.isinf(number):
        return 0
    n = int(number) & 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


def _normalize_number(value: float) -> int | float:
    """Integral results below 2**53 are reported as int."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 2**53:
        return int(value)
    return value


def _strict_equals(left: object, right: object) -> bool:
    if _is_number(left) and _is_number(right):
        return _as_float(left) == _as_float(right)  # type: ignore[arg-type]
    if type(left) is not type(right):
        return False
    return left == right


def _loose_equals(left: object, right: object) -> bool:
    nullish = (None, UNDEFINED)
    if left in nullish or right in nullish:
        return left in nullish and right in nullish
    if js_typeof(left) == js_typeof(right):
        return _strict_equals(left, right)
    return _to_number(left) == _to_number(right)


def _compare(operator: str, left: object, right: object) -> bool:
    if isinstance(left, str) and isinstance(right, str):
        a: object = left
        b: object = right
    else:
        a, b = _to_number(left), _to_number(right)
        if math.isnan(a) or math.isnan(b):  # type: ignore[arg-type]
            return False
    match operator:
        case "<":
            return a < b  # type: ignore[operator]
        case ">":
            return a > b  # type: ignore[operator]
        case "<=":
            return a <= b  # type: ignore[operator]
        case _:
            return a >= b  # type: ignore[operator]


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _power(base: float, exponent: float) -> float:
    if math.isnan(exponent) or (abs(base) == 1 and math.isinf(exponent)):
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _arithmetic(operator: str, left: object, right: object) -> JSValue:
    if operator == "+":
        if isinstance(left, str) or isinstance(right, str):
            return js_to_string(left) + js_to_string(right)
        return _normalize_number(_to_number(left) + _to_number(right))

    if operator in ("&", "|", "^", "<<", ">>", ">>>"):
        a, b = _to_int32(left), _to_int32(right)
        shift = b & 0x1F
        match operator:
            case "&":
                return a & b
            case "|":
                return a | b
            case "^":
                return a ^ b
            case "<<":
                return _to_int32(a << shift)
            case ">>":
                return a >> shift
            case _:
                return (a & 0xFFFFFFFF) >> shift

    x, y = _to_number(left), _to_number(right)
    match operator:
        case "-":
            result = x - y
        case "*":
            result = x * y
        case "/":
            result = _divide(x, y)
        case "%":
            if y == 0 or math.isinf(x):
                result = math.nan
            elif math.isinf(y):
                result = x
            else:
                result = math.fmod(x, y)
        case "**":
            result = _power(x, y)
        case _:
            raise _NotConstant
    return _normalize_number(result)


# ============================================================================
# EVALUATOR
# ============================================================================


class Evaluator:
    """Constant folder over host expressions.

    Deeply nested expressions are cut off at max_depth and reported as not
    confident.

    Example:
        >>> Evaluator().evaluate(BinaryExpression("+", StringLiteral("a"), NumericLiteral(1)))
        Evaluation(confident=True, value='a1')
    """

    __slots__ = ("_depth_guard",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        self._depth_guard = DepthGuard(max_depth=max_depth)

    def evaluate(self, node: Node) -> Evaluation:
        """Fold node to a constant. Never raises."""
        self._depth_guard.reset()
        try:
            return Evaluation(confident=True, value=self._eval(node))
        except (_NotConstant, DepthLimitExceededError, OverflowError):
            return Evaluation.unknown()

    def _eval(self, node: Node) -> JSValue:
        with self._depth_guard:
            return self._eval_node(node)

    def _eval_node(self, node: Node) -> JSValue:  # noqa: PLR0911 - one branch per node kind
        match node:
            case StringLiteral(value=value) | BooleanLiteral(value=value):
                return value
            case NumericLiteral(value=value):
                return value
            case NullLiteral():
                return None
            case Identifier(name="undefined"):
                return UNDEFINED
            case Identifier(name="NaN"):
                return math.nan
            case Identifier(name="Infinity"):
                return math.inf
            case TemplateLiteral():
                return self._eval_template(node)
            case UnaryExpression():
                return self._eval_unary(node)
            case BinaryExpression():
                return self._eval_binary(node)
            case LogicalExpression():
                return self._eval_logical(node)
            case ConditionalExpression(test=test, consequent=consequent, alternate=alternate):
                return self._eval(consequent if js_truthy(self._eval(test)) else alternate)
            case JSXExpressionContainer(expression=expression):
                return self._eval(expression)
            case GenericNode(type="ParenthesizedExpression"):
                return self._eval(node.get("expression"))  # type: ignore[arg-type]
            case _:
                raise _NotConstant

    def _eval_template(self, node: TemplateLiteral) -> str:
        parts: list[str] = []
        for index, quasi in enumerate(node.quasis):
            if quasi.cooked is None:
                raise _NotConstant
            parts.append(quasi.cooked)
            if index < len(node.expressions):
                parts.append(js_to_string(self._eval(node.expressions[index])))
        return "".join(parts)

    def _eval_unary(self, node: UnaryExpression) -> JSValue:
        if node.operator == "void":
            return UNDEFINED
        argument = self._eval(node.argument)
        match node.operator:
            case "!":
                return not js_truthy(argument)
            case "-":
                return _normalize_number(-_to_number(argument))
            case "+":
                return _normalize_number(_to_number(argument))
            case "~":
                return ~_to_int32(argument)
            case "typeof":
                return js_typeof(argument)
            case _:
                raise _NotConstant

    def _eval_binary(self, node: BinaryExpression) -> JSValue:
        left = self._eval(node.left)
        right = self._eval(node.right)
        match node.operator:
            case "===":
                return _strict_equals(left, right)
            case "!==":
                return not _strict_equals(left, right)
            case "==":
                return _loose_equals(left, right)
            case "!=":
                return not _loose_equals(left, right)
            case "<" | ">" | "<=" | ">=":
                return _compare(node.operator, left, right)
            case _:
                return _arithmetic(node.operator, left, right)

    def _eval_logical(self, node: LogicalExpression) -> JSValue:
        left = self._eval(node.left)
        match node.operator:
            case "&&":
                return self._eval(node.right) if js_truthy(left) else left
            case "||":
                return left if js_truthy(left) else self._eval(node.right)
            case "??":
                return self._eval(node.right) if left is None or left is UNDEFINED else left
            case _:
                raise _NotConstant


def evaluate(node: Node) -> Evaluation:
    """Fold an expression to its build-time value.

    Args:
        node: Host expression node

    Returns:
        Evaluation; confident=False when the value depends on runtime state

    Example:
        >>> evaluate(StringLiteral("Hello"))
        Evaluation(confident=True, value='Hello')
        >>> evaluate(Identifier("greeting"))
        Evaluation(confident=False, value=None)
    """
    return Evaluator().evaluate(node)
