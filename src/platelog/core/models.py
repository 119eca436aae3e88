"""Data models for PlateLog."""

from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any


@dataclass
class Post:
    """A raw social post as handed over by the caption source."""
    caption: str
    timestamp: str = ""


@dataclass
class ParsedReview:
    """One social post interpreted as a restaurant review."""
    restaurant_name: str
    rating: float
    review_text: str
    timestamp: str
    is_approved: bool
    raw_caption: str
    restaurant_handle: Optional[str] = None
    location: Optional[str] = None
    items: List[str] = field(default_factory=list)
    adjusted_score: Optional[float] = None


@dataclass
class RatingStats:
    """Descriptive statistics over a set of ratings."""
    average: float = 0.0
    median: float = 0.0
    mode: float = 0.0
    std_dev: float = 0.0
    distribution: Dict[float, int] = field(default_factory=dict)
    total_reviews: int = 0


@dataclass
class RestaurantStats:
    """Rating summary for a single restaurant."""
    name: str
    ratings: List[float]
    average_rating: float
    weighted_average: float  # out of 5
    visit_count: int
    locations: List[str]
    handle: Optional[str] = None
    rank: int = 0  # 1 = best


@dataclass
class WordFrequency:
    """A word, how often it appears and its sentiment."""
    word: str
    count: int
    sentiment: str  # "positive", "negative" or "neutral"


@dataclass
class CategoryRestaurant:
    """Restaurant entry within a food category."""
    name: str
    rating: float
    handle: Optional[str] = None


@dataclass
class CategoryStats:
    """Per food category breakdown."""
    category: str
    count: int
    average_rating: float
    top_restaurants: List[CategoryRestaurant]
    top_keywords: List[str]


@dataclass
class PostingTimeline:
    """Posting activity for one month."""
    month: str  # YYYY-MM
    count: int
    average_rating: float


@dataclass
class AdvancedStats:
    """Timeline, categories and approval figures."""
    timeline: List[PostingTimeline] = field(default_factory=list)
    categories: List[CategoryStats] = field(default_factory=list)
    approval_rate: int = 0
    average_review_length: int = 0
    total_approved: int = 0
    total_reviews: int = 0


@dataclass
class AnalysisResult:
    """Everything computed from one batch of posts."""
    reviews: List[ParsedReview]
    ratings: RatingStats
    restaurants: List[RestaurantStats]
    words: List[WordFrequency]
    advanced: AdvancedStats

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-serialisable representation."""
        data = asdict(self)
        # JSON object keys must be strings
        data["ratings"]["distribution"] = {
            str(k): v for k, v in self.ratings.distribution.items()
        }
        return data
