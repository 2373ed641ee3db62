"""Feed models and RSS generation for podfeed."""

from podfeed.feeds.generator import generate
from podfeed.feeds.loader import load_channel, parse_channel
from podfeed.feeds.models import Channel, Item, PubDate, PubDateTime
from podfeed.feeds.sample import sample_channel

__all__ = [
    "Channel",
    "Item",
    "PubDate",
    "PubDateTime",
    "generate",
    "load_channel",
    "parse_channel",
    "sample_channel",
]
