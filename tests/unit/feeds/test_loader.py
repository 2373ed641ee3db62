"""Tests for loading feed descriptions."""

import json
from datetime import date, datetime, timezone
from pathlib import Path

import pytest
import yaml

from podfeed.feeds.formatters import EPOCH
from podfeed.feeds.loader import load_channel, parse_channel
from podfeed.feeds.models import PubDate, PubDateTime
from podfeed.utils.errors import FeedLoadError, FeedNotFoundError


class TestParseChannel:
    """Tests for parse_channel()."""

    def test_parse_dict(self, sample_feed_dict: dict) -> None:
        channel = parse_channel(sample_feed_dict)
        assert channel.title == "Dict Cast"
        assert channel.last_build_date == datetime(2020, 6, 12, 9, 30, tzinfo=timezone.utc)
        assert channel.items[0].pub_date == PubDate(value=date(2020, 6, 5))
        assert channel.items[0].episode.number == 1.5

    def test_timestamp_pub_date(self, sample_feed_dict: dict) -> None:
        sample_feed_dict["items"][0]["pub_date"] = "2020-06-05T04:09:26Z"
        channel = parse_channel(sample_feed_dict)
        assert channel.items[0].pub_date == PubDateTime(
            value=datetime(2020, 6, 5, 4, 9, 26, tzinfo=timezone.utc)
        )

    def test_tagged_pub_date_passes_through(self, sample_feed_dict: dict) -> None:
        sample_feed_dict["items"][0]["pub_date"] = {"kind": "date", "value": "2020-06-05"}
        channel = parse_channel(sample_feed_dict)
        assert isinstance(channel.items[0].pub_date, PubDate)

    def test_malformed_last_build_date_uses_epoch(self, sample_feed_dict: dict) -> None:
        """Test the epoch fallback for malformed timestamps."""
        sample_feed_dict["last_build_date"] = "Tue, 32 Foo 20x20"
        channel = parse_channel(sample_feed_dict)
        assert channel.last_build_date == EPOCH

    def test_date_last_build_date_at_midnight(self, sample_feed_dict: dict) -> None:
        sample_feed_dict["last_build_date"] = date(2020, 6, 12)
        channel = parse_channel(sample_feed_dict)
        assert channel.last_build_date == datetime(2020, 6, 12, tzinfo=timezone.utc)

    def test_input_not_mutated(self, sample_feed_dict: dict) -> None:
        parse_channel(sample_feed_dict)
        assert sample_feed_dict["items"][0]["pub_date"] == "2020-06-05"

    def test_missing_field_raises(self, sample_feed_dict: dict) -> None:
        del sample_feed_dict["owner"]
        with pytest.raises(FeedLoadError, match="owner"):
            parse_channel(sample_feed_dict)

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(FeedLoadError):
            parse_channel(["not", "a", "mapping"])


class TestLoadChannel:
    """Tests for load_channel()."""

    def test_load_yaml(self, tmp_path: Path, sample_feed_dict: dict) -> None:
        path = tmp_path / "show.yaml"
        path.write_text(yaml.safe_dump(sample_feed_dict))

        channel = load_channel(path)
        assert channel.title == "Dict Cast"

    def test_load_yaml_native_dates(self, tmp_path: Path) -> None:
        """Test that YAML date and timestamp scalars map to the right variant."""
        path = tmp_path / "show.yml"
        path.write_text(
            "\n".join(
                [
                    "title: Native",
                    "description: d",
                    "link: https://example.com",
                    "last_build_date: 2020-06-12T09:30:00Z",
                    "site_url: https://example.com",
                    "owner: o@example.com",
                    "license: {name: cc0, url: https://cc0}",
                    "value: {recipients: []}",
                    "items:",
                    "  - title: A",
                    "    description: a",
                    "    path: a",
                    "    author: x",
                    "    pub_date: 2020-06-05",
                    "    chapters: {url: https://c, mime_type: application/json}",
                    "    season: {number: 1, name: S1}",
                    "    episode: {number: 1, display: E1}",
                    "  - title: B",
                    "    description: b",
                    "    path: b",
                    "    author: x",
                    "    pub_date: 2020-06-05T04:09:26Z",
                    "    chapters: {url: https://c, mime_type: application/json}",
                    "    season: {number: 1, name: S1}",
                    "    episode: {number: 2, display: E2}",
                ]
            )
        )

        channel = load_channel(path)
        assert isinstance(channel.items[0].pub_date, PubDate)
        assert isinstance(channel.items[1].pub_date, PubDateTime)

    def test_load_json(self, tmp_path: Path, sample_feed_dict: dict) -> None:
        path = tmp_path / "show.json"
        path.write_text(json.dumps(sample_feed_dict))

        channel = load_channel(path)
        assert channel.site_url == "https://example.com/"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FeedNotFoundError):
            load_channel(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("title: [unclosed\n")
        with pytest.raises(FeedLoadError):
            load_channel(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(FeedLoadError):
            load_channel(path)
