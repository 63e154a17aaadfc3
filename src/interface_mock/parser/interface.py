"""Interface-definition parser.

Parses a restricted TypeScript-like ``interface Name { field: Type; ... }``
block into a ParsedInterface. Parsing is lenient: entries that do not look
like fields are skipped and unknown types become strings. Only non-string
input raises.
"""

import logging
import re

from interface_mock.errors import InvalidInterfaceInput
from interface_mock.parser.base import ParsedInterface, TypeInfo
from interface_mock.parser.formats import infer_string_format

logger = logging.getLogger(__name__)

FALLBACK_NAME = "UnknownInterface"

# Object literals nested deeper than this parse as objects without fields.
MAX_NESTING_DEPTH = 100

BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
INTERFACE_NAME = re.compile(r"interface\s+(\w+)")
FIELD = re.compile(r"(\w+)(\?)?\s*:\s*(.+?);?$", re.DOTALL)

# Ordered keyword rules; the first one contained in the type wins.
KIND_RULES = [
    ("string", "string"),
    ("number", "number"),
    ("boolean", "boolean"),
    ("date", "Date"),
]

_OPENERS = "{[(<"
_CLOSERS = "}])>"


def parse_interface(source: str) -> ParsedInterface:
    """Parse one interface block into its structural model."""
    if not isinstance(source, str):
        raise InvalidInterfaceInput(source)

    text = LINE_COMMENT.sub("", BLOCK_COMMENT.sub("", source))
    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return ParsedInterface(name=FALLBACK_NAME, properties={})

    match = INTERFACE_NAME.search(lines[0])
    name = match.group(1) if match else FALLBACK_NAME

    body = "\n".join(lines[1:])
    _, brace, rest = lines[0].partition("{")
    if brace:
        body = rest + "\n" + body
    elif body.startswith("{"):
        body = body[1:]

    properties = _parse_fields(_split_top_level(body, ";\n"))
    logger.debug("Parsed interface %s with %d fields", name, len(properties))
    return ParsedInterface(name=name, properties=properties)


def parse_type_info(
    type_expr: str, is_optional: bool = False, field_name: str = "", depth: int = 0
) -> TypeInfo:
    """Classify a type expression such as ``string[]`` or ``{ id: number }``."""
    clean = type_expr.strip()
    if clean.endswith(";"):
        clean = clean[:-1].strip()

    is_array = clean.endswith("[]")
    base = clean[:-2].strip() if is_array else clean

    if base.startswith("{"):
        return _object_type(base, is_array, is_optional, depth)

    for kind, keyword in KIND_RULES:
        if keyword in base:
            string_format = None
            if kind == "string":
                string_format = infer_string_format(f"{field_name} {clean}")
            return TypeInfo(
                kind=kind,
                is_array=is_array,
                is_optional=is_optional,
                string_format=string_format,
            )

    if "{" in base:
        return _object_type(base, is_array, is_optional, depth)

    # Unknown types (aliases, unions of literals, any) fall back to text.
    return TypeInfo(
        kind="string",
        is_array=is_array,
        is_optional=is_optional,
        string_format=infer_string_format(f"{field_name} {clean}"),
    )


def parse_nested_object(object_expr: str, depth: int = 1) -> dict[str, TypeInfo]:
    """Parse the fields between the first ``{`` and its matching ``}``."""
    _, brace, content = object_expr.partition("{")
    if not brace:
        return {}
    return _parse_fields(_split_top_level(content, ",;\n"), depth)


def _object_type(base: str, is_array: bool, is_optional: bool, depth: int) -> TypeInfo:
    return TypeInfo(
        kind="object",
        is_array=is_array,
        is_optional=is_optional,
        properties=parse_nested_object(base, depth + 1),
    )


def _parse_fields(entries: list[str], depth: int = 0) -> dict[str, TypeInfo]:
    properties: dict[str, TypeInfo] = {}
    if depth > MAX_NESTING_DEPTH:
        logger.debug("Skipping fields nested deeper than %d levels", MAX_NESTING_DEPTH)
        return properties
    for entry in entries:
        if entry in ("{", "}"):
            continue
        match = FIELD.search(entry)
        if not match:
            logger.debug("Skipping unrecognized entry: %r", entry)
            continue
        prop_name, optional, type_expr = match.groups()
        properties[prop_name] = parse_type_info(type_expr, bool(optional), prop_name, depth)
    return properties


def _split_top_level(text: str, separators: str) -> list[str]:
    """Split ``text`` on separators outside any bracket pair.

    Scanning stops at the ``}`` that closes the enclosing block, so trailing
    text after an interface or nested object is ignored.
    """
    parts: list[str] = []
    buf: list[str] = []
    depth = 0
    prev = ""
    for ch in text:
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS and not (ch == ">" and prev == "="):
            if depth == 0 and ch == "}":
                break
            depth = max(depth - 1, 0)
        elif depth == 0 and ch in separators:
            parts.append("".join(buf))
            buf = []
            prev = ch
            continue
        buf.append(ch)
        prev = ch
    parts.append("".join(buf))
    return [part.strip() for part in parts if part.strip()]
