"""Caption parsing: turns a free-text review caption into a ParsedReview.

Each extraction rule is a small pure function over the caption string so it
can be tested on its own. ``parse_review`` composes them in a fixed order;
later steps strip fragments found by earlier ones, so every step shares the
compiled patterns defined at module level.
"""

import logging
import re
from typing import List, Optional

from .config import settings
from .constants import ParserConstants
from .models import ParsedReview

logger = logging.getLogger(__name__)

_DASH = "[" + ParserConstants.DASHES + "]"
_POSTCODE = r"[A-Z]{1,2}[0-9]{1,2}[A-Z]?"

HANDLE_RE = re.compile(r"@([a-zA-Z0-9._]+)")
RATING_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)\s*/\s*10")

# "RG1 9.3/10" or "WD24 – 8.8/10"; the trailing digit keeps it off the rating itself
POSTCODE_LOCATION_RE = re.compile("(" + _POSTCODE + r")\s+" + _DASH + r"?\s*[0-9]")
POSTCODE_TOKEN_RE = re.compile(_POSTCODE + r"\s+")

# "@handle Southampton - 9.5/10"
CITY_LOCATION_RE = re.compile(r"@[a-zA-Z0-9._]+\s+([A-Za-z\s]+?)\s+" + _DASH + r"\s+[0-9]")

_ITEM_MARKERS = "|".join(
    re.escape(m) for m in ParserConstants.ITEM_EMOJI + ParserConstants.ITEM_BULLETS
)
ITEM_RE = re.compile(r"(?:" + _ITEM_MARKERS + r")\s*(.+?)" + _DASH + r"\s*(.+)")

APPROVAL_MARKER_RE = re.compile(r"APPROVED\s*✅*", re.IGNORECASE)
INVITE_RE = re.compile(r"\binvite\b", re.IGNORECASE)
DASH_RE = re.compile(_DASH)
PUNCTUATION_RE = re.compile(r"[^A-Za-z0-9_\s]")


def extract_handle(caption: str) -> Optional[str]:
    """Return the first @mention in the caption, without the @."""
    match = HANDLE_RE.search(caption)
    return match.group(1) if match else None


def extract_rating(caption: str) -> Optional[float]:
    """Return the "N/10" rating, or None when missing or out of range."""
    match = RATING_RE.search(caption)
    if not match:
        return None
    rating = float(match.group(1))
    if rating < ParserConstants.MIN_RATING or rating > ParserConstants.MAX_RATING:
        return None
    return rating


def extract_location(caption: str) -> Optional[str]:
    """Postcode district first, then a city name written after the handle."""
    match = POSTCODE_LOCATION_RE.search(caption)
    if match:
        return match.group(1)
    match = CITY_LOCATION_RE.search(caption)
    if match:
        return match.group(1).strip()
    return None


def extract_name(caption: str, handle: Optional[str] = None) -> str:
    """Pick a display name for the restaurant.

    The handle wins when there is one. Otherwise the first line of the
    caption is cleaned of mentions, the rating, postcodes, dashes, the word
    "invite" and punctuation, and used if it is a plausible length.
    """
    name = handle or settings.unknown_restaurant_name

    first_line = caption.split("\n")[0]
    cleaned = HANDLE_RE.sub("", first_line)
    cleaned = RATING_RE.sub("", cleaned)
    cleaned = POSTCODE_TOKEN_RE.sub("", cleaned)
    cleaned = DASH_RE.sub("", cleaned)
    cleaned = INVITE_RE.sub("", cleaned)
    cleaned = PUNCTUATION_RE.sub("", cleaned).strip()

    if (
        not handle
        and ParserConstants.MIN_NAME_LENGTH < len(cleaned) < ParserConstants.MAX_NAME_LENGTH
    ):
        name = cleaned
    return name


def extract_items(caption: str) -> List[str]:
    """Dish lines such as "🔥 The corn dogs – cheese pull" as "dish: description"."""
    return [
        f"{m.group(1).strip()}: {m.group(2).strip()}"
        for m in ITEM_RE.finditer(caption)
    ]


def is_approved(caption: str, reviewer_handle: Optional[str] = None) -> bool:
    """True when the reviewer's own handle is followed by APPROVED."""
    handle = reviewer_handle or settings.reviewer_handle
    pattern = re.compile(r"@" + re.escape(handle) + r"\s+APPROVED", re.IGNORECASE)
    return bool(pattern.search(caption))


def clean_review_text(caption: str) -> str:
    """Caption with mentions, rating, postcodes, approval and dish lines removed."""
    text = HANDLE_RE.sub("", caption)
    text = RATING_RE.sub("", text)
    text = POSTCODE_TOKEN_RE.sub("", text)
    text = APPROVAL_MARKER_RE.sub("", text)
    text = ITEM_RE.sub("", text)
    text = re.sub(r"\n+", " ", text)
    return text.strip()


def parse_review(
    caption: str,
    timestamp: Optional[str] = None,
    reviewer_handle: Optional[str] = None,
) -> Optional[ParsedReview]:
    """Parse one caption; returns None when the caption carries no rating."""
    if not isinstance(caption, str):
        return None
    if not isinstance(timestamp, str):
        timestamp = ""

    handle = extract_handle(caption)
    rating = extract_rating(caption)
    if rating is None:
        logger.debug(f"Skipping caption without a valid rating: {caption[:40]!r}")
        return None

    return ParsedReview(
        restaurant_name=extract_name(caption, handle),
        restaurant_handle=handle,
        rating=rating,
        location=extract_location(caption),
        review_text=clean_review_text(caption),
        items=extract_items(caption),
        timestamp=timestamp,
        is_approved=is_approved(caption, reviewer_handle),
        raw_caption=caption,
    )
