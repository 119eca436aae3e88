"""PlateLog - restaurant review captions turned into ratings analytics."""

__version__ = "1.0.0"
__author__ = "PlateLog Team"

from .core.models import *
from .core.config import settings
from .core.parser import parse_review
from .core.analysis import analyze_posts, parse_posts

__all__ = [
    "settings",
    "parse_review",
    "parse_posts",
    "analyze_posts",
]
