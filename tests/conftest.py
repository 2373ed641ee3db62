"""Shared pytest fixtures."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from podfeed.feeds.models import (
    Channel,
    Chapters,
    Episode,
    Item,
    License,
    PubDateTime,
    Season,
    Value,
    ValueRecipient,
)
from podfeed.feeds.sample import sample_channel as build_sample_channel


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the real ~/.config."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def minimal_item() -> Item:
    """Item with only required fields populated."""
    return Item(
        title="Episode 1",
        description="First episode",
        path="episodes/1",
        author="host@example.com",
        pub_date=PubDateTime(value=datetime(2020, 6, 5, 4, 9, 26, tzinfo=timezone.utc)),
        chapters=Chapters(url="https://example.com/1/chapters.json", mime_type="application/json"),
        season=Season(number=1, name="One"),
        episode=Episode(number=1.0, display="Ep 1"),
    )


@pytest.fixture
def minimal_channel(minimal_item: Item) -> Channel:
    """Channel with only required fields and a single minimal item."""
    return Channel(
        title="Test Cast",
        description="A test podcast",
        link="https://example.com",
        last_build_date=datetime(2020, 6, 12, 9, 30, tzinfo=timezone.utc),
        items=[minimal_item],
        site_url="https://example.com",
        locked=False,
        owner="owner@example.com",
        license=License(name="cc-by-4.0", url="https://creativecommons.org/licenses/by/4.0/"),
        value=Value(
            recipients=[
                ValueRecipient(name="Host", type="node", address="02abc", split=100),
            ]
        ),
    )


@pytest.fixture
def sample_channel() -> Channel:
    return build_sample_channel()


@pytest.fixture
def sample_feed_dict() -> dict:
    """Feed description as it would be decoded from YAML/JSON."""
    return {
        "title": "Dict Cast",
        "description": "Loaded from a file",
        "link": "https://example.com",
        "last_build_date": "2020-06-12T09:30:00Z",
        "site_url": "https://example.com/",
        "locked": True,
        "owner": "owner@example.com",
        "license": {"name": "cc-by-4.0", "url": "https://creativecommons.org/licenses/by/4.0/"},
        "value": {
            "type": "lightning",
            "method": "keysend",
            "recipients": [
                {"name": "Host", "type": "node", "address": "02abc", "split": 100},
            ],
        },
        "items": [
            {
                "title": "Episode 1",
                "description": "First episode",
                "path": "/episodes/1",
                "author": "host@example.com",
                "pub_date": "2020-06-05",
                "chapters": {"url": "https://example.com/1/chapters.json", "mime_type": "application/json"},
                "season": {"number": 1, "name": "One"},
                "episode": {"number": 1.5, "display": "Trailer"},
            }
        ],
    }
