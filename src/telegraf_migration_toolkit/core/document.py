"""
TOML document parsing with line information.

tomllib decodes the configuration, but it does not report where anything is
located in the file. A header scanner records the line of every ``[table]``
and ``[[array.of.tables]]`` header so that each table of the resulting tree
knows the line it starts on.
"""

import tomllib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import ConfigParseError

Key = Tuple[str, ...]


@dataclass(frozen=True)
class Header:
    """A table header found in the source text."""

    line: int
    key: Key
    is_array: bool = False


@dataclass
class Table:
    """A table introduced by a header, with its decoded content.

    ``fields`` maps every key either to a ``Table`` (sub-table with its own
    header), a list of ``Table`` (array of tables) or a plain decoded value.
    """

    name: str
    line: int
    fields: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the table content as plain Python data."""
        return {key: _plain(value) for key, value in self.fields.items()}


def _plain(value: Any) -> Any:
    if isinstance(value, Table):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def parse(data: bytes) -> Table:
    """Parse a TOML configuration into a tree of tables.

    Args:
        data: Raw file content

    Returns:
        Table: The root table (empty name, line 0)

    Raises:
        ConfigParseError: If the data is not UTF-8 or not valid TOML
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"configuration is not valid UTF-8: {e}") from e

    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(str(e)) from e

    headers = locate_headers(text)
    return Table(name="", line=0, fields=_build_fields(document, (), headers))


def locate_headers(text: str) -> List[Header]:
    """Find all table headers and the 1-based lines they are on.

    Brackets inside strings, multi-line strings, comments and multi-line
    arrays are not headers.
    """
    headers = []
    multiline = None
    depth = 0

    for lineno, line in enumerate(text.split("\n"), start=1):
        if multiline is None and depth == 0:
            stripped = line.lstrip(" \t")
            if stripped.startswith("["):
                headers.append(_parse_header(stripped, lineno))
                continue
        multiline, depth = _scan_line(line, multiline, depth)

    return headers


def _scan_line(line: str, multiline: Optional[str], depth: int) -> Tuple[Optional[str], int]:
    """Track open multi-line strings and bracket depth across a line."""
    i = 0
    while i < len(line):
        if multiline is not None:
            i = _skip_multiline_string(line, i, multiline)
            if i < 0:
                return multiline, depth
            multiline = None
            continue

        char = line[i]
        if char == "#":
            break
        if line.startswith('"""', i) or line.startswith("'''", i):
            multiline = line[i:i + 3]
            i += 3
        elif char == '"':
            i = _skip_basic_string(line, i + 1)
        elif char == "'":
            end = line.find("'", i + 1)
            i = len(line) if end < 0 else end + 1
        else:
            if char in "[{":
                depth += 1
            elif char in "]}":
                depth -= 1
            i += 1

    return multiline, depth


def _skip_basic_string(line: str, i: int) -> int:
    while i < len(line):
        if line[i] == "\\":
            i += 2
            continue
        if line[i] == '"':
            return i + 1
        i += 1
    return len(line)


def _skip_multiline_string(line: str, i: int, delimiter: str) -> int:
    """Return the index after the closing delimiter, or -1 if the string continues."""
    quote = delimiter[0]
    while i < len(line):
        if quote == '"' and line[i] == "\\":
            i += 2
            continue
        if line.startswith(delimiter, i):
            i += 3
            # Up to two more quotes are still part of the string content
            extra = 0
            while extra < 2 and i < len(line) and line[i] == quote:
                i += 1
                extra += 1
            return i
        i += 1
    return -1


def _parse_header(text: str, lineno: int) -> Header:
    is_array = text.startswith("[[")
    start = 2 if is_array else 1

    i = start
    while i < len(text):
        char = text[i]
        if char == '"':
            i = _skip_basic_string(text, i + 1)
        elif char == "'":
            end = text.find("'", i + 1)
            i = len(text) if end < 0 else end + 1
        elif char == "]":
            return Header(line=lineno, key=_split_key(text[start:i]), is_array=is_array)
        else:
            i += 1

    raise ConfigParseError(f"unterminated table header in line {lineno}")


def _split_key(key_text: str) -> Key:
    """Split a dotted key into its parts, honouring quoted keys."""
    nested: Any = tomllib.loads(f"{key_text} = 0")
    parts = []
    while isinstance(nested, dict):
        part, nested = next(iter(nested.items()))
        parts.append(part)
    return tuple(parts)


def _table_line(key: Key, headers: List[Header]) -> Optional[int]:
    for header in headers:
        if header.key == key and not header.is_array:
            return header.line

    # Implicitly created super-table, e.g. "inputs" from "[[inputs.cpu]]"
    nested = [h.line for h in headers if len(h.key) > len(key) and h.key[:len(key)] == key]
    return min(nested) if nested else None


def _build_fields(values: Dict[str, Any], path: Key, headers: List[Header]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}

    for name, value in values.items():
        key = path + (name,)

        if isinstance(value, dict):
            line = _table_line(key, headers)
            if line is None:
                # Inline table or dotted keys
                fields[name] = value
            else:
                fields[name] = Table(name, line, _build_fields(value, key, headers))

        elif isinstance(value, list) and value and all(isinstance(item, dict) for item in value):
            lines = [h.line for h in headers if h.is_array and h.key == key]
            if len(lines) != len(value):
                # Inline array of inline tables
                fields[name] = value
            else:
                fields[name] = _build_array(name, key, value, lines, headers)

        else:
            fields[name] = value

    return fields


def _build_array(name: str, key: Key, items: List[Dict[str, Any]],
                 lines: List[int], headers: List[Header]) -> List[Table]:
    tables = []
    for index, (item, line) in enumerate(zip(items, lines)):
        following = lines[index + 1] if index + 1 < len(lines) else None
        # Sub-tables of an element are declared between its header and the next one
        span = [h for h in headers if h.line > line and (following is None or h.line < following)]
        tables.append(Table(name, line, _build_fields(item, key, span)))
    return tables
