"""Generic XML node passed from the tree builder to the encoder."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Text:
    """Text body, escaped on output."""

    value: str = ""


@dataclass(frozen=True)
class CData:
    """Text body emitted verbatim inside a CDATA section."""

    value: str


Content = Union[Text, CData, tuple["XmlNode", ...]]


@dataclass(frozen=True)
class XmlNode:
    """An element: tag name, ordered attributes, and content.

    ``attributes`` is a tuple of ``(name, value)`` pairs so the node stays
    hashable and keeps insertion order.
    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    content: Content = field(default_factory=Text)

    @property
    def children(self) -> tuple["XmlNode", ...]:
        """Child elements, empty for text or CDATA bodies."""
        if isinstance(self.content, tuple):
            return self.content
        return ()

    @property
    def text(self) -> Optional[str]:
        """Body text, or None when the node holds child elements."""
        if isinstance(self.content, (Text, CData)):
            return self.content.value
        return None

    def get(self, name: str) -> Optional[str]:
        """Return the value of attribute ``name`` if set."""
        for key, value in self.attributes:
            if key == name:
                return value
        return None


def element(
    tag: str,
    attributes: Optional[Mapping[str, Optional[str]]] = None,
    content: Union[str, Text, CData, Iterable[XmlNode], None] = None,
) -> XmlNode:
    """Build an XmlNode, dropping attributes whose value is None.

    Args:
        tag: Element name, prefixed names like ``podcast:person`` included
        attributes: Attribute mapping in output order; None values are omitted
        content: A string (escaped text), Text, CData, or child nodes

    Returns:
        The constructed node
    """
    attrs = tuple(
        (name, value) for name, value in (attributes or {}).items() if value is not None
    )

    body: Content
    if content is None:
        body = Text()
    elif isinstance(content, str):
        body = Text(content)
    elif isinstance(content, (Text, CData)):
        body = content
    else:
        body = tuple(content)

    return XmlNode(tag=tag, attributes=attrs, content=body)
