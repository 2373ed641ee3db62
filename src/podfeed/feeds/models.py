"""Data models for a podcast feed.

This module defines immutable Pydantic models for:
- Channel metadata (title, lock, license, value splits, funding, persons)
- Items (episodes) and their Podcasting 2.0 extensions
- The date-or-datetime choice used for ``pubDate``

Models carry data only. How they map to XML is decided by
``podfeed.feeds.builder``.
"""

from datetime import date, datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FeedModel(BaseModel):
    """Base for all feed models: frozen, compared by value.

    Ordered collections are tuples so a built model cannot change; lists
    are accepted as input. Floats must be finite.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class PubDate(FeedModel):
    """A calendar date, rendered at midnight GMT."""

    kind: Literal["date"] = "date"
    value: date


class PubDateTime(FeedModel):
    """An instant, rendered in UTC. Naive values are treated as UTC."""

    kind: Literal["datetime"] = "datetime"
    value: datetime


DateOrTime = Annotated[Union[PubDate, PubDateTime], Field(discriminator="kind")]


class Enclosure(FeedModel):
    """Primary media file of an episode."""

    url: str
    mime_type: str
    length: Optional[int] = Field(None, description="Size in bytes", ge=0)


class AlternateEnclosure(FeedModel):
    """Alternative rendition of the episode media.

    Example:
        >>> AlternateEnclosure(
        ...     mime_type="audio/opus",
        ...     length=3259032,
        ...     title="Low bandwidth",
        ...     sources=["https://example.com/ep1.opus"],
        ... )
    """

    mime_type: str
    length: int = Field(..., ge=0)
    title: str
    sources: tuple[str, ...] = Field(..., min_length=1, description="Source URIs")


class Transcript(FeedModel):
    url: str
    mime_type: str
    rel: Optional[str] = None
    language: Optional[str] = None


class Chapters(FeedModel):
    url: str
    mime_type: str


class Soundbite(FeedModel):
    """Highlight clip defined by its start and duration in seconds."""

    title: str
    start_time: float = Field(..., ge=0)
    duration: float = Field(..., ge=0)


class Season(FeedModel):
    number: int
    name: str


class Episode(FeedModel):
    """Episode number and display label.

    The number is a float so that in-between episodes such as trailers
    (``1.5``) can be expressed.
    """

    number: float
    display: str


class Location(FeedModel):
    name: str
    geo: Optional[str] = None
    osm: Optional[str] = None


class License(FeedModel):
    name: str
    url: str


class ValueRecipient(FeedModel):
    """One payee of a value split.

    Splits are shares chosen by the publisher; they are not required to
    add up to 100.
    """

    name: str
    type: str
    address: str
    split: int = Field(..., ge=0)


class Value(FeedModel):
    type: str = "lightning"
    method: str = "keysend"
    recipients: tuple[ValueRecipient, ...] = Field(default_factory=tuple)


class Person(FeedModel):
    name: str
    role: Optional[str] = None
    group: Optional[str] = None
    img: Optional[str] = None
    href: Optional[str] = None


class Funding(FeedModel):
    url: str
    text: str


class Item(FeedModel):
    """A single episode entry of the feed."""

    title: str
    description: str
    path: str = Field(..., description="Path relative to the channel site URL")
    categories: tuple[str, ...] = Field(default_factory=tuple)
    author: str
    pub_date: DateOrTime
    content: Optional[str] = Field(None, description="Plain text content")
    content_encoded: Optional[str] = Field(
        None, description="HTML content, emitted as CDATA"
    )
    transcripts: tuple[Transcript, ...] = Field(default_factory=tuple)
    chapters: Chapters
    persons: tuple[Person, ...] = Field(default_factory=tuple)
    soundbites: tuple[Soundbite, ...] = Field(default_factory=tuple)
    season: Season
    episode: Episode
    location: Optional[Location] = None
    enclosure: Optional[Enclosure] = None
    alternate_enclosures: tuple[AlternateEnclosure, ...] = Field(default_factory=tuple)


class Channel(FeedModel):
    """Top-level feed metadata and its items.

    Example:
        >>> channel = Channel(
        ...     title="Example Cast",
        ...     description="A show about examples",
        ...     link="https://example.com",
        ...     last_build_date=datetime(2020, 6, 5, tzinfo=timezone.utc),
        ...     site_url="https://example.com/episodes",
        ...     locked=True,
        ...     owner="owner@example.com",
        ...     license=License(name="cc-by-4.0", url="https://..."),
        ...     value=Value(recipients=[...]),
        ... )
    """

    title: str
    description: str
    link: str = Field(..., description="Canonical web URL of the show")
    last_build_date: datetime
    generator: Optional[str] = None
    items: tuple[Item, ...] = Field(default_factory=tuple)
    site_url: str = Field(..., description="Base URL for item links")
    locked: bool = False
    owner: str = Field(..., description="Owner email for podcast:locked")
    funding: tuple[Funding, ...] = Field(default_factory=tuple)
    persons: tuple[Person, ...] = Field(default_factory=tuple)
    location: Optional[Location] = None
    license: License
    value: Value
