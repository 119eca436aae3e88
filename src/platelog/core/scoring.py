"""Scoring and aggregation over parsed reviews."""

import logging
import math
import re
from collections import Counter, defaultdict
from datetime import datetime
from typing import List, Dict, Optional

from .categories import categories_for_text, review_content
from .constants import StatsConstants
from .lexicon import word_sentiment
from .models import (
    ParsedReview, RatingStats, RestaurantStats, WordFrequency,
    CategoryStats, CategoryRestaurant, PostingTimeline, AdvancedStats,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = StatsConstants.DISPLAY_PRECISION) -> float:
    """Round halves up (8.125 -> 8.13) instead of to even."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def _mean(values: List[float]) -> float:
    return sum(values) / len(values)


def calculate_rating_stats(reviews: List[ParsedReview]) -> RatingStats:
    """Average, median, mode, std-dev and histogram of the ratings.

    Mode is taken over ratings rounded to one decimal; when several values
    share the highest count the lowest rating wins.
    """
    if not reviews:
        return RatingStats()

    ratings = sorted(r.rating for r in reviews)
    n = len(ratings)

    average = _mean(ratings)

    mid = n // 2
    if n % 2 == 0:
        median = (ratings[mid - 1] + ratings[mid]) / 2
    else:
        median = ratings[mid]

    # Keys are inserted in ascending order since ratings are sorted
    distribution: Dict[float, int] = {}
    for rating in ratings:
        key = round_half_up(rating, StatsConstants.HISTOGRAM_PRECISION)
        distribution[key] = distribution.get(key, 0) + 1

    mode, best = 0.0, 0
    for key, count in distribution.items():
        if count > best:
            mode, best = key, count

    variance = sum((r - average) ** 2 for r in ratings) / n
    std_dev = math.sqrt(variance)

    return RatingStats(
        average=round_half_up(average),
        median=round_half_up(median),
        mode=mode,
        std_dev=round_half_up(std_dev),
        distribution=distribution,
        total_reviews=n,
    )


def calculate_restaurant_stats(reviews: List[ParsedReview]) -> List[RestaurantStats]:
    """Group reviews per restaurant and rank by average rating.

    Restaurants are keyed by handle, falling back to the parsed name. Ties in
    average keep the order in which restaurants were first seen.
    """
    groups: Dict[str, dict] = {}

    for review in reviews:
        key = review.restaurant_handle or review.restaurant_name
        if key not in groups:
            display_name = (
                f"@{review.restaurant_handle}" if review.restaurant_handle
                else review.restaurant_name
            )
            groups[key] = {
                "name": display_name,
                "handle": review.restaurant_handle,
                "ratings": [],
                "locations": {},  # dict as an ordered set
            }
        group = groups[key]
        group["ratings"].append(review.rating)
        if review.location:
            group["locations"][review.location] = None

    stats = []
    for group in groups.values():
        avg = _mean(group["ratings"])
        stats.append(RestaurantStats(
            name=group["name"],
            handle=group["handle"],
            ratings=group["ratings"],
            average_rating=round_half_up(avg),
            weighted_average=round_half_up(avg / 2),
            visit_count=len(group["ratings"]),
            locations=list(group["locations"]),
        ))

    stats.sort(key=lambda s: -s.average_rating)
    for rank, stat in enumerate(stats, 1):
        stat.rank = rank

    return stats


def tokenize(text: str) -> List[str]:
    """Lowercase words longer than three characters, punctuation removed."""
    cleaned = re.sub(r"[^a-z0-9_\s]", " ", text.lower())
    return [w for w in cleaned.split() if len(w) >= StatsConstants.MIN_WORD_LENGTH]


def analyze_word_frequency(reviews: List[ParsedReview], min_count: int = 2) -> List[WordFrequency]:
    """Count words across review text and dish lines, tagged with sentiment."""
    all_text = " ".join(r.review_text + " " + " ".join(r.items) for r in reviews)
    counts = Counter(tokenize(all_text))

    frequencies = [
        WordFrequency(word=word, count=count, sentiment=word_sentiment(word))
        for word, count in counts.items()
        if count >= min_count
    ]
    frequencies.sort(key=lambda f: -f.count)
    return frequencies


def calculate_adjusted_score(rating: float, stats: RatingStats) -> float:
    """Re-centre a rating on 5 using its z-score against the population."""
    if stats.std_dev == 0:
        return rating

    z_score = (rating - stats.average) / stats.std_dev
    adjusted = StatsConstants.ADJUSTED_CENTER + z_score * StatsConstants.ADJUSTED_SPREAD
    return max(0.0, min(10.0, round_half_up(adjusted)))


def detect_food_categories(reviews: List[ParsedReview]) -> List[CategoryStats]:
    """Break reviews down by food category.

    A review can land in several categories. Within a category the first
    review of a restaurant fixes that restaurant's rating; later visits only
    add to the category average.
    """
    buckets: Dict[str, dict] = {}

    for review in reviews:
        text = review_content(review)
        for category in categories_for_text(text):
            data = buckets.setdefault(category, {
                "ratings": [],
                "restaurants": {},
                "words": Counter(),
            })
            data["ratings"].append(review.rating)

            if review.restaurant_name not in data["restaurants"]:
                data["restaurants"][review.restaurant_name] = CategoryRestaurant(
                    name=review.restaurant_name,
                    handle=review.restaurant_handle,
                    rating=review.rating,
                )

            data["words"].update(
                w for w in text.split()
                if len(w) >= StatsConstants.MIN_WORD_LENGTH
                and w not in StatsConstants.CATEGORY_STOP_WORDS
            )

    out = []
    for category, data in buckets.items():
        top_restaurants = sorted(
            data["restaurants"].values(), key=lambda r: -r.rating
        )[:StatsConstants.MAX_CATEGORY_RESTAURANTS]
        top_keywords = [
            word for word, _ in data["words"].most_common(StatsConstants.MAX_CATEGORY_KEYWORDS)
        ]
        out.append(CategoryStats(
            category=category,
            count=len(data["ratings"]),
            average_rating=round_half_up(_mean(data["ratings"])),
            top_restaurants=top_restaurants,
            top_keywords=top_keywords,
        ))

    out.sort(key=lambda c: -c.count)
    return out


def month_key(timestamp: str) -> Optional[str]:
    """Month key ("YYYY-MM") of an ISO-8601 timestamp, None if it does not parse."""
    if not timestamp:
        return None
    try:
        moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable timestamp left out of timeline: {timestamp!r}")
        return None
    return f"{moment.year}-{moment.month:02d}"


def calculate_advanced_stats(reviews: List[ParsedReview]) -> AdvancedStats:
    """Monthly timeline, category breakdown and approval figures."""
    if not reviews:
        return AdvancedStats()

    months = defaultdict(list)
    for review in reviews:
        key = month_key(review.timestamp)
        if key is not None:
            months[key].append(review.rating)

    timeline = [
        PostingTimeline(month=month, count=len(ratings), average_rating=round_half_up(_mean(ratings)))
        for month, ratings in sorted(months.items())
    ]

    total = len(reviews)
    approved = sum(1 for r in reviews if r.is_approved)
    total_length = sum(len(r.review_text) for r in reviews)

    return AdvancedStats(
        timeline=timeline,
        categories=detect_food_categories(reviews),
        approval_rate=int(round_half_up(approved / total * 100, 0)),
        average_review_length=int(round_half_up(total_length / total, 0)),
        total_approved=approved,
        total_reviews=total,
    )
