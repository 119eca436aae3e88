"""Core modules for PlateLog."""

from .models import *
from .config import settings
from .parser import parse_review
from .scoring import *
from .analysis import parse_posts, analyze_posts, analyze_reviews

__all__ = [
    "settings",
    "Post",
    "ParsedReview",
    "RatingStats",
    "RestaurantStats",
    "WordFrequency",
    "CategoryStats",
    "AdvancedStats",
    "AnalysisResult",
    "parse_review",
    "parse_posts",
    "analyze_posts",
    "analyze_reviews",
]
