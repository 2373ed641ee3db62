"""Render an XmlNode tree to an indented XML string.

Output rules:
- Each nesting level is indented by ``indent`` spaces.
- Elements holding only text (or nothing) are written on one line.
- Empty elements are written as an open/close pair, never self-closed.
- Attributes keep their insertion order.
- Text and attribute values are escaped, CDATA bodies are not.
- Control characters XML 1.0 forbids or discourages are dropped everywhere.
"""

import re

from podfeed.xml.node import CData, XmlNode

DEFAULT_INDENT = 2

_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

# C0 controls other than tab, newline and carriage return, plus DEL
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def strip_control(text: str) -> str:
    """Remove control characters that XML 1.0 forbids or discourages."""
    return _CONTROL_RE.sub("", text)


def escape(text: str) -> str:
    """Escape the five predefined XML entities and drop control characters."""
    text = strip_control(text)
    # & first, otherwise the other replacements get double-escaped
    for char, entity in _ENTITIES:
        text = text.replace(char, entity)
    return text


def _open_tag(node: XmlNode) -> str:
    attrs = "".join(f' {name}="{escape(value)}"' for name, value in node.attributes)
    return f"<{node.tag}{attrs}>"


def _inline_body(node: XmlNode) -> str:
    if isinstance(node.content, CData):
        return f"<![CDATA[{strip_control(node.content.value)}]]>"
    return escape(node.text or "")


def _encode_lines(node: XmlNode, depth: int, indent: int, lines: list[str]) -> None:
    pad = " " * (indent * depth)
    children = node.children

    if not children:
        lines.append(f"{pad}{_open_tag(node)}{_inline_body(node)}</{node.tag}>")
        return

    lines.append(f"{pad}{_open_tag(node)}")
    for child in children:
        _encode_lines(child, depth + 1, indent, lines)
    lines.append(f"{pad}</{node.tag}>")


def encode(node: XmlNode, indent: int = DEFAULT_INDENT) -> str:
    """Encode ``node`` and its descendants.

    Args:
        node: Root element
        indent: Spaces per nesting level

    Returns:
        The XML text, without a trailing newline
    """
    if indent < 0:
        raise ValueError(f"indent must be >= 0, got {indent}")

    lines: list[str] = []
    _encode_lines(node, 0, indent, lines)
    return "\n".join(lines)
