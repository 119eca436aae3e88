"""Loading posts from disk and preparing analysis results for export."""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, List

from ..core.constants import FileConstants
from ..core.models import Post, AnalysisResult

logger = logging.getLogger(__name__)


class PostLoadError(Exception):
    """Raised when a posts file cannot be read or has an unknown shape."""


def _epoch_to_iso(seconds: Any) -> str:
    # bool is an int subclass but never a valid epoch
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise PostLoadError(f"creation_timestamp must be a number, got {seconds!r}")
    try:
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise PostLoadError(f"creation_timestamp out of range: {seconds!r}") from e
    return moment.isoformat().replace("+00:00", "Z")


def _posts_from_export_media(entries: List[Any]) -> List[Post]:
    """Instagram data export entries carry the caption in "title"."""
    posts = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise PostLoadError(f"Export entry must be an object, got {type(entry).__name__}")
        title = entry.get("title") or ""
        if not isinstance(title, str):
            raise PostLoadError(f"Export title must be a string, got {type(title).__name__}")
        if not title.strip():
            continue
        created = entry.get("creation_timestamp")
        timestamp = _epoch_to_iso(created) if created is not None else ""
        posts.append(Post(caption=title, timestamp=timestamp))
    return posts


def _post_from_dict(entry: Dict[str, Any]) -> Post:
    caption = entry.get("caption") or ""
    timestamp = entry.get("timestamp") or ""
    if not isinstance(caption, str) or not isinstance(timestamp, str):
        raise PostLoadError("Post caption and timestamp must be strings")
    return Post(caption=caption, timestamp=timestamp)


def posts_from_data(data: Any) -> List[Post]:
    """Convert decoded JSON into posts.

    Accepts a plain list of {caption, timestamp} objects, an Instagram export
    posts.json list, or an Instagram export reels.json object.
    """
    if isinstance(data, dict) and FileConstants.REELS_KEY in data:
        reels = data[FileConstants.REELS_KEY]
        if not isinstance(reels, list):
            raise PostLoadError(f"{FileConstants.REELS_KEY} must be a list")
        media = []
        for reel in reels:
            if not isinstance(reel, dict):
                raise PostLoadError("Reel entries must be objects")
            reel_media = reel.get("media")
            if reel_media is None:
                continue
            if not isinstance(reel_media, list):
                raise PostLoadError("Reel media must be a list")
            if reel_media:
                media.append(reel_media[0])
        posts = _posts_from_export_media(media)
    elif isinstance(data, list) and all(isinstance(d, dict) for d in data):
        if any("caption" in d for d in data):
            # Caller's order is kept for plain post lists
            return [_post_from_dict(d) for d in data]
        posts = _posts_from_export_media(data)
    else:
        raise PostLoadError("Expected a list of posts or an Instagram reels export")

    # Newest first; the generated ISO-8601 UTC strings sort chronologically
    posts.sort(key=lambda p: p.timestamp, reverse=True)
    return posts


def load_posts(path: str) -> List[Post]:
    """Read posts from a JSON file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise PostLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PostLoadError(f"Invalid JSON in {path}: {e}") from e

    posts = posts_from_data(data)
    logger.info(f"Loaded {len(posts)} posts from {path}")
    return posts


def prepare_export(result: AnalysisResult) -> Dict[str, Any]:
    """Prepare an analysis result for JSON export."""
    export_data = result.to_dict()
    export_data["metadata"] = {
        "export_timestamp": None,  # Will be set by export_to_json
        "version": FileConstants.EXPORT_VERSION,
    }
    return export_data


def stamp_export(data: Dict[str, Any]) -> Dict[str, Any]:
    """Set the export timestamp in the metadata block."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.now().isoformat()
    return data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    stamp_export(data)

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
