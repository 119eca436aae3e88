"""End-to-end analysis of a batch of posts."""

import logging
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Union

from .config import settings
from .models import Post, ParsedReview, AnalysisResult
from .parser import parse_review
from .scoring import (
    calculate_rating_stats,
    calculate_restaurant_stats,
    analyze_word_frequency,
    calculate_adjusted_score,
    calculate_advanced_stats,
)

logger = logging.getLogger(__name__)

PostLike = Union[Post, Mapping[str, Any]]


def _caption_and_timestamp(post: PostLike):
    if isinstance(post, Post):
        return post.caption, post.timestamp
    return post.get("caption"), post.get("timestamp")


def parse_posts(posts: Iterable[PostLike]) -> List[ParsedReview]:
    """Parse every post and keep only the ones that are reviews."""
    reviews = []
    skipped = 0
    for post in posts:
        caption, timestamp = _caption_and_timestamp(post)
        if not isinstance(caption, str) or not caption:
            skipped += 1
            continue
        review = parse_review(caption, timestamp)
        if review is None:
            skipped += 1
            continue
        reviews.append(review)

    logger.info(f"Parsed {len(reviews)} reviews, skipped {skipped} posts")
    return reviews


def analyze_reviews(reviews: List[ParsedReview], min_word_count: Optional[int] = None) -> AnalysisResult:
    """Compute every statistic for already-parsed reviews."""
    if min_word_count is None:
        min_word_count = settings.min_word_count

    rating_stats = calculate_rating_stats(reviews)
    restaurants = calculate_restaurant_stats(reviews)
    words = analyze_word_frequency(reviews, min_word_count)
    advanced = calculate_advanced_stats(reviews)

    scored = [
        replace(review, adjusted_score=calculate_adjusted_score(review.rating, rating_stats))
        for review in reviews
    ]

    logger.info(
        f"Analysis: {rating_stats.total_reviews} reviews, "
        f"{len(restaurants)} restaurants, {len(words)} frequent words"
    )
    return AnalysisResult(
        reviews=scored,
        ratings=rating_stats,
        restaurants=restaurants,
        words=words,
        advanced=advanced,
    )


def analyze_posts(posts: Iterable[PostLike], min_word_count: Optional[int] = None) -> AnalysisResult:
    """Parse posts then analyze the resulting reviews."""
    return analyze_reviews(parse_posts(posts), min_word_count)
