"""
Access Site Extraction (tree-sitter JavaScript / TypeScript)

Turns one syntax node into an AccessSite, or None when the node is not
a property access this rule cares about.

Handled node shapes:
- member_expression        foo.bar, foo?.bar
- subscript_expression     foo["bar"], foo[0], foo[`bar`], foo[bar] (unknown)
- variable_declarator      const { a, b: c } = foo;
- assignment_expression    ({ a } = foo);
- assignment_pattern       function f({ a } = foo) {}
- required_parameter /     TypeScript parameter with a default value
  optional_parameter

Only bare identifiers count as objects. Anything else (this, calls,
nested patterns) cannot be resolved statically and is skipped.
JSX tag names and `typeof` type queries are not runtime reads.
"""

import math
import re
from decimal import Decimal
from typing import TYPE_CHECKING

from codegraph_lint.types.access import UNKNOWN_PROPERTY, AccessSite, PropertyName

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode


MEMBER_ACCESS_TYPES = frozenset(["member_expression", "subscript_expression"])

DESTRUCTURING_TYPES = frozenset(
    [
        "variable_declarator",
        "assignment_expression",
        "assignment_pattern",
        "required_parameter",
        "optional_parameter",
    ]
)

ACCESS_NODE_TYPES = MEMBER_ACCESS_TYPES | DESTRUCTURING_TYPES

# (pattern field, source field) per destructuring node type
_DESTRUCTURING_FIELDS: dict[str, tuple[str, str]] = {
    "variable_declarator": ("name", "value"),
    "assignment_expression": ("left", "right"),
    "assignment_pattern": ("left", "right"),
    "required_parameter": ("pattern", "value"),
    "optional_parameter": ("pattern", "value"),
}

_JSX_ELEMENT_TYPES = frozenset(["jsx_opening_element", "jsx_closing_element", "jsx_self_closing_element"])

_LEGACY_OCTAL = re.compile(r"0[0-7]+")

_ESCAPE_SEQUENCE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-3][0-7]{0,2}|[4-7][0-7]?|\r\n|.)",
    re.DOTALL,
)

_SINGLE_CHARACTER_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}

_LINE_CONTINUATIONS = frozenset(["\n", "\r", "\r\n", "\u2028", "\u2029"])


def extract_access_site(node: "TSNode") -> AccessSite | None:
    """
    Extract the accessed object and property names from a node.

    Args:
        node: Tree-sitter node visited by the host traversal

    Returns:
        AccessSite, or None if the node is not an access shape
    """
    match node.type:
        case "member_expression":
            if _is_type_or_tag_name(node):
                return None
            return AccessSite(
                node=node,
                object_name=_identifier_name(node.child_by_field_name("object")),
                property_names=(_member_property_name(node.child_by_field_name("property")),),
            )
        case "subscript_expression":
            if _is_type_or_tag_name(node):
                return None
            return AccessSite(
                node=node,
                object_name=_identifier_name(node.child_by_field_name("object")),
                property_names=(_static_key_value(node.child_by_field_name("index")),),
            )
        case node_type if node_type in _DESTRUCTURING_FIELDS:
            pattern_field, source_field = _DESTRUCTURING_FIELDS[node_type]
            return _extract_destructuring(node, pattern_field, source_field)
        case _:
            return None


def _extract_destructuring(node: "TSNode", pattern_field: str, source_field: str) -> AccessSite | None:
    pattern = node.child_by_field_name(pattern_field)
    if pattern is None or pattern.type != "object_pattern":
        return None

    object_name = _identifier_name(node.child_by_field_name(source_field))
    if object_name is None:
        return None

    return AccessSite(
        node=pattern,
        object_name=object_name,
        property_names=pattern_property_names(pattern),
    )


def _is_type_or_tag_name(node: "TSNode") -> bool:
    """
    True for member chains that read nothing at runtime.

    <foo.bar />            JSX tag name
    let x: typeof foo.bar  TypeScript type query
    """
    outer = node
    parent = node.parent
    while parent is not None and parent.type in MEMBER_ACCESS_TYPES and parent.child_by_field_name("object") == outer:
        outer = parent
        parent = outer.parent

    if parent is None:
        return False
    if parent.type == "type_query":
        return True
    return parent.type in _JSX_ELEMENT_TYPES and parent.child_by_field_name("name") == outer


def pattern_property_names(pattern: "TSNode") -> tuple[PropertyName, ...]:
    """
    Property names read by an object pattern, in source order.

    { a }        -> "a"
    { a: b }     -> "a"   (the key, not the binding)
    { a = 1 }    -> "a"
    { [k]: v }   -> UNKNOWN_PROPERTY
    { ...rest }  -> nothing
    """
    names: list[PropertyName] = []

    for child in pattern.named_children:
        match child.type:
            case "shorthand_property_identifier_pattern":
                names.append(_text(child))
            case "pair_pattern":
                names.append(_property_key_name(child.child_by_field_name("key")))
            case "object_assignment_pattern":
                left = child.child_by_field_name("left")
                if left is not None and left.type == "shorthand_property_identifier_pattern":
                    names.append(_text(left))
                else:
                    names.append(UNKNOWN_PROPERTY)
            case _:
                # rest_pattern, comments
                continue

    return tuple(names)


# ============================================================
# Name resolution
# ============================================================


def _identifier_name(node: "TSNode | None") -> str | None:
    """Name of a bare identifier (parentheses ignored), else None."""
    node = _unwrap_parentheses(node)
    if node is None or node.type != "identifier":
        return None
    return _text(node)


def _member_property_name(node: "TSNode | None") -> PropertyName:
    # private_property_identifier (#x) never names a public property
    if node is None or node.type != "property_identifier":
        return UNKNOWN_PROPERTY
    return _text(node)


def _property_key_name(key: "TSNode | None") -> PropertyName:
    """Static name of an object pattern key."""
    if key is None:
        return UNKNOWN_PROPERTY

    match key.type:
        case "property_identifier":
            return _text(key)
        case "computed_property_name":
            inner = key.named_children[0] if key.named_child_count == 1 else None
            return _static_key_value(inner)
        case "string" | "number":
            return _static_key_value(key)
        case _:
            return UNKNOWN_PROPERTY


def _static_key_value(node: "TSNode | None") -> PropertyName:
    """
    Static string value of a computed key expression.

    Strings, numbers and templates without substitutions are static;
    every other expression is UNKNOWN_PROPERTY.
    """
    node = _unwrap_parentheses(node)
    if node is None:
        return UNKNOWN_PROPERTY

    match node.type:
        case "string":
            return _string_value(_text(node)[1:-1])
        case "template_string":
            if any(child.type == "template_substitution" for child in node.named_children):
                return UNKNOWN_PROPERTY
            return _string_value(_text(node)[1:-1])
        case "number":
            return _number_to_string(_text(node))
        case _:
            return UNKNOWN_PROPERTY


def _string_value(raw: str) -> PropertyName:
    """
    Decode the escape sequences of a string literal body, JavaScript style.

    Unknown escapes such as \\d drop the backslash. \\u surrogate pairs are
    joined into one code point. Malformed \\x / \\u escapes are UNKNOWN_PROPERTY.
    """
    if "\\" not in raw:
        return raw

    pieces: list[str] = []
    position = 0
    for escape in _ESCAPE_SEQUENCE.finditer(raw):
        decoded = _decode_escape(escape.group(1))
        if decoded is None:
            return UNKNOWN_PROPERTY
        pieces.append(raw[position : escape.start()])
        pieces.append(decoded)
        position = escape.end()
    pieces.append(raw[position:])

    return _join_surrogates("".join(pieces))


def _decode_escape(sequence: str) -> str | None:
    head = sequence[0]

    if head in "ux":
        if len(sequence) == 1:
            return None
        digits = sequence[2:-1] if sequence[1] == "{" else sequence[1:]
        code_point = int(digits, 16)
        return chr(code_point) if code_point <= 0x10FFFF else None
    if head in "01234567":
        return chr(int(sequence, 8))
    if sequence in _LINE_CONTINUATIONS:
        return ""
    return _SINGLE_CHARACTER_ESCAPES.get(sequence, sequence)


def _join_surrogates(value: str) -> str:
    try:
        return value.encode("utf-16", "surrogatepass").decode("utf-16")
    except UnicodeDecodeError:
        # lone surrogate, kept as written
        return value


def _number_to_string(raw: str) -> PropertyName:
    """Property key a numeric literal stands for, as JavaScript's String(n)."""
    literal = raw.replace("_", "")

    try:
        if literal.endswith("n"):
            # BigInt keys are exact
            return str(int(literal[:-1], 0))
        if literal[:2].lower() in ("0x", "0o", "0b"):
            value = float(int(literal, 0))
        elif _LEGACY_OCTAL.fullmatch(literal):
            value = float(int(literal, 8))
        else:
            value = float(literal)
    except (ValueError, OverflowError):
        return UNKNOWN_PROPERTY

    return _format_number(value)


def _format_number(value: float) -> str:
    """
    Number::toString for a non-negative finite or infinite double.

    >>> [_format_number(v) for v in (1e21, 0.00001, 1e-7, 123.5)]
    ['1e+21', '0.00001', '1e-7', '123.5']
    """
    if math.isinf(value):
        return "Infinity"
    if value == 0:
        return "0"

    # repr gives the shortest digits that round-trip, as ECMAScript requires
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)

    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return "0." + "0" * -n + digits

    e = n - 1
    sign = "+" if e >= 0 else "-"
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{sign}{abs(e)}"


def _unwrap_parentheses(node: "TSNode | None") -> "TSNode | None":
    while node is not None and node.type == "parenthesized_expression":
        node = node.named_children[0] if node.named_child_count == 1 else None
    return node


def _text(node: "TSNode") -> str:
    return node.text.decode("utf-8")
