"""Built-in demonstration feed.

Exercises every element the generator knows about; used by
``podfeed sample``.
"""

from datetime import date, datetime, timezone

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
    PubDate,
    PubDateTime,
    Season,
    Soundbite,
    Transcript,
    Value,
    ValueRecipient,
)

SITE_URL = "https://podcast.example.com"

HOST = Person(
    name="Jane Doe",
    role="host",
    img="https://podcast.example.com/img/jane.jpg",
    href="https://example.com/jane",
)


def _first_episode() -> Item:
    return Item(
        title="Episode 1: Getting Started",
        description="We talk about why we started this show.",
        path="/episodes/1",
        categories=["Technology", "Podcasting"],
        author="jane@example.com (Jane Doe)",
        pub_date=PubDateTime(value=datetime(2020, 6, 5, 4, 9, 26, tzinfo=timezone.utc)),
        content_encoded="<h1>Getting Started</h1><p>Show notes &amp; links.</p>",
        transcripts=[
            Transcript(
                url=f"{SITE_URL}/episodes/1/transcript.srt",
                mime_type="application/srt",
                rel="captions",
                language="en",
            ),
            Transcript(
                url=f"{SITE_URL}/episodes/1/transcript.html",
                mime_type="text/html",
            ),
        ],
        chapters=Chapters(
            url=f"{SITE_URL}/episodes/1/chapters.json",
            mime_type="application/json+chapters",
        ),
        persons=[
            HOST,
            Person(name="John Smith", role="guest", group="cast"),
        ],
        soundbites=[Soundbite(title="Why podcasts?", start_time=73.0, duration=60.5)],
        season=Season(number=1, name="The Beginning"),
        episode=Episode(number=1.0, display="Ep. 1"),
        location=Location(name="Austin, TX", geo="geo:30.2672,-97.7431", osm="R113314"),
        enclosure=Enclosure(
            url=f"{SITE_URL}/media/ep1.mp3",
            mime_type="audio/mpeg",
            length=24986239,
        ),
        alternate_enclosures=[
            AlternateEnclosure(
                mime_type="audio/opus",
                length=5320120,
                title="Low bandwidth",
                sources=[
                    f"{SITE_URL}/media/ep1.opus",
                    "ipfs://QmdwGqd3d2gFPGeJNLLCshdiPert45fMu84552Y4XHTy4y",
                ],
            )
        ],
    )


def _trailer() -> Item:
    return Item(
        title="Trailer: What's Next",
        description="A short look at the rest of the season.",
        path="episodes/1.5",
        categories=["Technology"],
        author="jane@example.com (Jane Doe)",
        pub_date=PubDate(value=date(2020, 6, 12)),
        content="A short look at the rest of the season.",
        chapters=Chapters(
            url=f"{SITE_URL}/episodes/1.5/chapters.json",
            mime_type="application/json+chapters",
        ),
        persons=[HOST],
        season=Season(number=1, name="The Beginning"),
        episode=Episode(number=1.5, display="Trailer"),
        enclosure=Enclosure(url=f"{SITE_URL}/media/trailer.mp3", mime_type="audio/mpeg"),
    )


def sample_channel() -> Channel:
    """Return the demonstration feed."""
    return Channel(
        title="Example Cast",
        description="A show about building podcasts the open way.",
        link=SITE_URL,
        last_build_date=datetime(2020, 6, 12, 9, 30, tzinfo=timezone.utc),
        generator="podfeed",
        items=[_first_episode(), _trailer()],
        site_url=SITE_URL,
        locked=True,
        owner="jane@example.com",
        funding=[
            Funding(url="https://example.com/donate", text="Support the show!"),
        ],
        persons=[HOST],
        location=Location(name="Austin, TX", geo="geo:30.2672,-97.7431"),
        license=License(
            name="cc-by-4.0",
            url="https://creativecommons.org/licenses/by/4.0/",
        ),
        value=Value(
            type="lightning",
            method="keysend",
            recipients=[
                ValueRecipient(
                    name="Jane Doe",
                    type="node",
                    address="02d5c1bf8b940dc9cadca86d1b0a3c37fbe39cee4c7e839e33bef9174531d27f52",
                    split=90,
                ),
                ValueRecipient(
                    name="Podcast Index",
                    type="node",
                    address="03ae9f91a0cb8ff43840e3c322c4c61f019d8c1c3cea15a25cfc425ac605e61a4a",
                    split=10,
                ),
            ],
        ),
    )
