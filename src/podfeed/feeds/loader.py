"""Load a Channel from a YAML or JSON feed description."""

import json
import logging
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from podfeed.feeds.formatters import parse_timestamp
from podfeed.feeds.models import Channel
from podfeed.utils.errors import FeedLoadError, FeedNotFoundError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _coerce_pub_date(value: Any) -> Any:
    """Turn a bare date, datetime or timestamp string into a tagged pub date."""
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return {"kind": "datetime", "value": value}
    if isinstance(value, date):
        return {"kind": "date", "value": value}
    if isinstance(value, str):
        try:
            return {"kind": "date", "value": date.fromisoformat(value.strip())}
        except ValueError:
            return {"kind": "datetime", "value": parse_timestamp(value)}
    return value


def _prepare(data: dict[str, Any]) -> dict[str, Any]:
    """Apply input conveniences before validation."""
    data = dict(data)

    last_build = data.get("last_build_date")
    if isinstance(last_build, str):
        data["last_build_date"] = parse_timestamp(last_build)
    elif isinstance(last_build, date) and not isinstance(last_build, datetime):
        data["last_build_date"] = datetime.combine(last_build, time(), tzinfo=timezone.utc)

    items = data.get("items")
    if isinstance(items, list):
        prepared = []
        for item in items:
            if isinstance(item, dict) and "pub_date" in item:
                item = {**item, "pub_date": _coerce_pub_date(item["pub_date"])}
            prepared.append(item)
        data["items"] = prepared

    return data


def parse_channel(data: Any, source: str = "<data>") -> Channel:
    """Validate already-decoded feed data into a Channel.

    Raises:
        FeedLoadError: If the data is not a mapping or fails validation
    """
    if not isinstance(data, dict):
        raise FeedLoadError(f"Feed description in {source} must be a mapping")

    try:
        return Channel.model_validate(_prepare(data))
    except ValidationError as e:
        raise FeedLoadError(f"Invalid feed description in {source}: {e}") from e


def load_channel(path: Path) -> Channel:
    """Read and validate a feed description file.

    Args:
        path: ``.yaml``/``.yml`` or ``.json`` file

    Returns:
        Validated Channel

    Raises:
        FeedNotFoundError: If the file doesn't exist
        FeedLoadError: If the file can't be parsed or validated
    """
    if not path.exists():
        raise FeedNotFoundError(f"Feed description not found: {path}")

    logger.debug("Loading feed description from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise FeedLoadError(f"Could not read {path}: {e}") from e

    return parse_channel(data, source=str(path))
