from __future__ import annotations

from docwrap.analysis.model import DocNode, NodeKind

INDENT = 5


def text(line: int, column: int, value: str) -> DocNode:
    return DocNode(kind=NodeKind.TEXT, line=line, column=column, text=value)


def newline(line: int, column: int = 0) -> DocNode:
    return DocNode(kind=NodeKind.LINE_BREAK, line=line, column=column, text="\n")


def star(line: int, column: int = INDENT) -> DocNode:
    return DocNode(kind=NodeKind.LEADING_DECORATION, line=line, column=column, text="*")


def tag_name(line: int, column: int, value: str) -> DocNode:
    return DocNode(kind=NodeKind.TAG_NAME, line=line, column=column, text=value)


def parameter_name(line: int, column: int, value: str) -> DocNode:
    return DocNode(kind=NodeKind.PARAMETER_NAME, line=line, column=column, text=value)


def inline(line: int, column: int, name: str, reference: str) -> DocNode:
    """``{@name reference}`` split into leaves the way a parser emits it."""
    parts = ["{@", name, " ", reference, "}"]
    children = []
    offset = column
    for part in parts:
        children.append(DocNode(kind=NodeKind.OTHER, line=line, column=offset, text=part))
        offset += len(part)
    return DocNode(
        kind=NodeKind.INLINE_REFERENCE,
        line=line,
        column=column,
        children=tuple(children),
    )


def html(
    line: int,
    column: int,
    tag: str,
    *,
    closing: bool = False,
    body: str = "",
) -> DocNode:
    """One tag (``<tag>`` or ``</tag>``), optionally followed by body text."""
    opener = "</" if closing else "<"
    marker = DocNode(
        kind=NodeKind.HTML_TAG_END if closing else NodeKind.HTML_TAG_START,
        line=line,
        column=column,
        children=(
            DocNode(kind=NodeKind.OTHER, line=line, column=column, text=opener),
            DocNode(
                kind=NodeKind.TAG_NAME,
                line=line,
                column=column + len(opener),
                text=tag,
            ),
            DocNode(
                kind=NodeKind.OTHER,
                line=line,
                column=column + len(opener) + len(tag),
                text=">",
            ),
        ),
    )
    children = [marker]
    if body:
        children.append(
            text(line, column + len(opener) + len(tag) + 1, body),
        )
    return DocNode(
        kind=NodeKind.HTML_ELEMENT,
        line=line,
        column=column,
        children=tuple(children),
    )


def block_tag(line: int, *children: DocNode) -> DocNode:
    return DocNode(kind=NodeKind.BLOCK_TAG, line=line, column=INDENT + 2, children=children)


def prose(line: int, value: str, column: int = INDENT + 1) -> list[DocNode]:
    """A full comment row: decoration, ``" " + value`` and the line break."""
    return [star(line), text(line, column, " " + value), newline(line)]


def comment(*rows: DocNode | list[DocNode], line: int = 1) -> DocNode:
    children: list[DocNode] = []
    for row in rows:
        if isinstance(row, list):
            children.extend(row)
        else:
            children.append(row)
    return DocNode(kind=NodeKind.OTHER, line=line, column=INDENT - 1, children=tuple(children))


def to_payload(node: DocNode) -> dict[str, object]:
    return {
        "kind": node.kind.value,
        "line": node.line,
        "column": node.column,
        "text": node.text,
        "children": [to_payload(child) for child in node.children],
    }
