"""Generic XML tree and encoder."""

from podfeed.xml.encoder import encode, escape, strip_control
from podfeed.xml.node import CData, Text, XmlNode, element

__all__ = ["XmlNode", "Text", "CData", "element", "encode", "escape", "strip_control"]
