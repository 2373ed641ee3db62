"""Generate RSS 2.0 + Podcasting 2.0 XML from a Channel."""

import logging

from podfeed.feeds.builder import build_rss
from podfeed.feeds.models import Channel
from podfeed.xml import encode
from podfeed.xml.encoder import DEFAULT_INDENT

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def generate(
    channel: Channel,
    indent: int = DEFAULT_INDENT,
    xml_declaration: bool = False,
) -> str:
    """Render ``channel`` as an RSS document.

    Args:
        channel: Fully populated feed
        indent: Spaces per nesting level
        xml_declaration: Prepend an XML declaration line

    Returns:
        The document, starting with ``<rss`` unless a declaration is requested
    """
    xml = encode(build_rss(channel), indent=indent)
    if xml_declaration:
        xml = f"{XML_DECLARATION}\n{xml}"

    logger.debug(
        "Generated feed '%s' with %d items (%d chars)",
        channel.title,
        len(channel.items),
        len(xml),
    )
    return xml
