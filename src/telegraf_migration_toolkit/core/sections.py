"""
Splitting a configuration into sections.

A section is one top-level table (e.g. ``[agent]``) or one plugin instance
(e.g. ``[[inputs.cpu]]``) together with the exact source text belonging to it.
Concatenating the text of all sections in order gives back the original file.
"""

import io
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, List, Optional, Union

from .document import Table
from .errors import MalformedConfigError

# Top-level tables holding repeated plugin instances
CATEGORIES = ("inputs", "outputs", "processors", "aggregators")

HEADER_SECTION = "header"
COMMENT_MARKER = b"#"


@dataclass
class Section:
    name: str
    begin: int
    content: Optional[Table] = None
    raw: bytearray = field(default_factory=bytearray)
    # Comment block directly above the header, also contained in raw
    comment: bytes = b""


@dataclass
class SingleTable:
    name: str
    table: Table


@dataclass
class CategoryOfInstances:
    name: str
    instances: Dict[str, List[Table]]


TopLevelField = Union[SingleTable, CategoryOfInstances]


def _type_name(value) -> str:
    if isinstance(value, list) and value and all(isinstance(item, Table) for item in value):
        return "array of tables"
    if isinstance(value, Table):
        return "table"
    return type(value).__name__


def classify_field(name: str, node) -> TopLevelField:
    """Determine the shape of a top-level field.

    Raises:
        MalformedConfigError: If the field is not a table, or a category
            child is not an array of tables
    """
    if name in CATEGORIES:
        if not isinstance(node, Table):
            raise MalformedConfigError(f"'{name}' is not a table ({_type_name(node)})")

        instances = {}
        for plugin, elements in node.fields.items():
            if not isinstance(elements, list) or not all(isinstance(e, Table) for e in elements):
                raise MalformedConfigError(
                    f"elements of '{name}.{plugin}' is not a list of tables ({_type_name(elements)})"
                )
            instances[plugin] = elements
        return CategoryOfInstances(name=name, instances=instances)

    if not isinstance(node, Table):
        raise MalformedConfigError(f"'{name}' is not a table ({_type_name(node)})")
    return SingleTable(name=name, table=node)


def extract_sections(root: Table) -> List[Section]:
    """Flatten the parsed document into sections ordered by their first line."""
    sections = []

    for name, node in root.fields.items():
        top = classify_field(name, node)
        if isinstance(top, CategoryOfInstances):
            for plugin, tables in top.instances.items():
                for table in tables:
                    sections.append(Section(name=f"{top.name}.{plugin}", begin=table.line, content=table))
        elif isinstance(top, SingleTable):
            sections.append(Section(name=top.name, begin=top.table.line, content=top.table))

    # sorted() is stable, so equal lines keep their discovery order
    return sorted(sections, key=lambda s: s.begin)


def _is_comment(line: bytes) -> bool:
    return line.strip().startswith(COMMENT_MARKER)


def assign_text_to_sections(data: bytes, sections: List[Section]) -> List[Section]:
    """Attach the raw source text to each section.

    Content in front of the first section goes to a synthetic ``header``
    section. A comment block directly in front of a section header, without a
    blank line in between, belongs to that section. Any other comment stays
    with the section it appears in.

    Args:
        data: The original file content
        sections: Sections ordered by ``begin``

    Returns:
        List[Section]: The sections, including the header section if one was needed
    """
    if not sections or sections[0].begin > 1:
        sections = [Section(name=HEADER_SECTION, begin=0)] + list(sections)

    lines = iter(io.BytesIO(data))
    lineno = 0

    for current, following in zip(sections, sections[1:]):
        pending = bytearray()
        while lineno < following.begin - 1:
            line = next(lines, None)
            if line is None:
                break
            lineno += 1

            if _is_comment(line):
                pending += line
                continue

            # Comments followed by a blank line or by content trail the current section
            if pending:
                current.raw += pending
                pending.clear()
            current.raw += line

        # A comment block directly in front of the next header documents it
        if pending:
            following.comment = bytes(pending)
            following.raw += pending

    for line in lines:
        sections[-1].raw += line

    return sections


def render_sections(sections: List[Section]) -> bytes:
    """Concatenate the text of all sections in order."""
    return b"".join(bytes(section.raw) for section in sections)


def write_sections(sections: List[Section], sink: BinaryIO) -> int:
    """Write the text of all sections to a binary stream.

    Returns:
        int: Number of bytes written
    """
    written = 0
    for section in sections:
        written += sink.write(section.raw)
    return written
