"""Food category taxonomy used to tag reviews."""

from typing import Dict, List

from .models import ParsedReview


# Keywords are matched as lowercase substrings: "burger" also hits "cheeseburger"
FOOD_CATEGORIES: Dict[str, List[str]] = {
    "Burgers": ["burger", "smash", "patty", "bun"],
    "Asian": ["asian", "sushi", "ramen", "noodle", "rice", "thai", "chinese", "korean", "japanese"],
    "Desserts": ["dessert", "cake", "brownie", "ice cream", "chocolate", "sweet", "waffle"],
    "Chicken": ["chicken", "wings", "tenders", "fried chicken", "nashville"],
    "Drinks/Chai": ["chai", "tea", "coffee", "drink", "matcha", "smoothie", "milkshake"],
    "Steaks": ["steak", "ribeye", "beef", "t-bone", "sirloin"],
    "Middle Eastern": ["shawarma", "kebab", "halal", "turkish", "lebanese", "pita"],
}


def review_content(review: ParsedReview) -> str:
    """Review text plus dish lines, lowercased."""
    return (review.review_text + " " + " ".join(review.items)).lower()


def categories_for_text(text: str) -> List[str]:
    """All categories with at least one keyword contained in the text."""
    lowered = text.lower()
    return [
        category for category, keywords in FOOD_CATEGORIES.items()
        if any(kw in lowered for kw in keywords)
    ]
