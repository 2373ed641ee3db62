"""Map feed models to XML element trees.

Every function here is pure and returns an ``XmlNode``. Child order
inside ``<channel>`` and ``<item>`` is fixed because several podcast
apps read the elements in sequence.
"""

from podfeed.feeds.formatters import (
    cdata,
    format_datetime_rfc2822,
    format_float,
    format_int,
    format_pub_date,
    join_url,
)
from podfeed.feeds.models import (
    AlternateEnclosure,
    Channel,
    Chapters,
    Enclosure,
    Episode,
    Funding,
    Item,
    License,
    Location,
    Person,
    Season,
    Soundbite,
    Transcript,
    Value,
    ValueRecipient,
)
from podfeed.xml import XmlNode, element

NAMESPACES = {
    "dc": "http://purl.org/dc/elements/1.1/",
    "content": "http://purl.org/rss/1.0/modules/content/",
    "atom": "http://www.w3.org/2005/Atom",
    "podcast": "https://podcastindex.org/namespace/1.0",
}

RSS_VERSION = "2.0"

# Enclosure length is written as "0" whatever the model holds.
ENCLOSURE_LENGTH = "0"


def build_funding(funding: Funding) -> XmlNode:
    return element("podcast:funding", {"url": funding.url}, funding.text)


def build_license(feed_license: License) -> XmlNode:
    return element("podcast:license", {"url": feed_license.url}, feed_license.name)


def build_locked(locked: bool, owner: str) -> XmlNode:
    return element("podcast:locked", {"owner": owner}, "yes" if locked else "no")


def build_location(location: Location) -> XmlNode:
    return element(
        "podcast:location",
        {"geo": location.geo, "osm": location.osm},
        location.name,
    )


def build_person(person: Person) -> XmlNode:
    """Person element; each optional attribute is omitted when unset."""
    return element(
        "podcast:person",
        {
            "role": person.role,
            "group": person.group,
            "img": person.img,
            "href": person.href,
        },
        person.name,
    )


def build_value_recipient(recipient: ValueRecipient) -> XmlNode:
    return element(
        "podcast:valueRecipient",
        {
            "name": recipient.name,
            "type": recipient.type,
            "address": recipient.address,
            "split": format_int(recipient.split),
        },
    )


def build_value(value: Value) -> XmlNode:
    return element(
        "podcast:value",
        {"type": value.type, "method": value.method},
        [build_value_recipient(recipient) for recipient in value.recipients],
    )


def build_transcript(transcript: Transcript) -> XmlNode:
    return element(
        "podcast:transcript",
        {
            "url": transcript.url,
            "type": transcript.mime_type,
            "rel": transcript.rel,
            "lang": transcript.language,
        },
    )


def build_soundbite(soundbite: Soundbite) -> XmlNode:
    # endTime carries the clip duration, not an absolute end offset
    return element(
        "podcast:soundbite",
        {
            "startTime": format_float(soundbite.start_time),
            "endTime": format_float(soundbite.duration),
        },
        soundbite.title,
    )


def build_season(season: Season) -> XmlNode:
    return element("podcast:season", {"name": season.name}, format_int(season.number))


def build_episode(episode: Episode) -> XmlNode:
    return element(
        "podcast:episode", {"display": episode.display}, format_float(episode.number)
    )


def build_chapters(chapters: Chapters) -> XmlNode:
    return element("podcast:chapters", {"url": chapters.url, "type": chapters.mime_type})


def build_alternate_enclosure(enclosure: AlternateEnclosure) -> XmlNode:
    return element(
        "podcast:alternateEnclosure",
        {
            "type": enclosure.mime_type,
            "length": format_int(enclosure.length),
            "title": enclosure.title,
        },
        [element("podcast:source", {"uri": uri}) for uri in enclosure.sources],
    )


def build_enclosure(enclosure: Enclosure) -> XmlNode:
    return element(
        "enclosure",
        {
            "url": enclosure.url,
            "length": ENCLOSURE_LENGTH,
            "type": enclosure.mime_type,
        },
    )


def build_category(category: str) -> XmlNode:
    return element("category", content=category)


def build_item(item: Item, site_url: str) -> XmlNode:
    """Build an ``<item>``.

    ``link`` and ``guid`` are both the site URL joined with the item path.

    Args:
        item: Episode to render
        site_url: Base URL of the channel site

    Returns:
        The item element
    """
    url = join_url(site_url, item.path)

    children = [
        element("title", content=item.title),
        element("description", content=item.description),
        element("link", content=url),
        element("guid", content=url),
        element("pubDate", content=format_pub_date(item.pub_date)),
        build_chapters(item.chapters),
        build_season(item.season),
        build_episode(item.episode),
    ]
    children.extend(build_transcript(t) for t in item.transcripts)
    children.extend(build_category(c) for c in item.categories)
    children.extend(build_person(p) for p in item.persons)
    children.extend(build_soundbite(s) for s in item.soundbites)
    children.extend(build_alternate_enclosure(a) for a in item.alternate_enclosures)

    if item.content is not None:
        children.append(element("content", content=item.content))
    if item.content_encoded is not None:
        children.append(element("content:encoded", content=cdata(item.content_encoded)))
    if item.enclosure is not None:
        children.append(build_enclosure(item.enclosure))
    if item.location is not None:
        children.append(build_location(item.location))

    return element("item", content=children)


def build_channel(channel: Channel) -> XmlNode:
    children = [
        element("title", content=channel.title),
        element("description", content=channel.description),
        element("link", content=channel.link),
        element("lastBuildDate", content=format_datetime_rfc2822(channel.last_build_date)),
        build_locked(channel.locked, channel.owner),
        build_license(channel.license),
        build_value(channel.value),
    ]
    if channel.generator is not None:
        children.append(element("generator", content=channel.generator))
    children.extend(build_funding(f) for f in channel.funding)
    children.extend(build_person(p) for p in channel.persons)
    if channel.location is not None:
        children.append(build_location(channel.location))
    children.extend(build_item(item, channel.site_url) for item in channel.items)

    return element("channel", content=children)


def build_rss(channel: Channel) -> XmlNode:
    """Build the ``<rss>`` root with namespace declarations and the channel."""
    attributes = {f"xmlns:{prefix}": uri for prefix, uri in NAMESPACES.items()}
    attributes["version"] = RSS_VERSION
    return element("rss", attributes, [build_channel(channel)])
