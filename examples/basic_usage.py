"""Basic usage examples for PlateLog."""

from platelog import parse_review, analyze_posts
from platelog.core.scoring import calculate_rating_stats, calculate_adjusted_score

POSTS = [
    {
        "caption": "@bobabloom_ RG1 9.3/10 🤩🔥\n\n"
                   "🔥 The corn dogs – dangerous levels of cheese pull.\n"
                   "🍌 Banana Pudding – hands down one of the BEST.\n\n"
                   "@diningwithtaha APPROVED ✅✅✅",
        "timestamp": "2024-12-15T14:30:00Z",
    },
    {
        "caption": "@five_guys RG2 9.1/10 🍔\n\n"
                   "🍔 Cheeseburger – perfectly cooked, juicy patties\n"
                   "🍟 Cajun Fries – seasoned to perfection, addictive",
        "timestamp": "2024-11-28T19:15:00Z",
    },
    {
        "caption": "@wagamama OX1 7.2/10\n\n🍜 Chicken Ramen – decent but not amazing",
        "timestamp": "2024-12-05T12:20:00Z",
    },
]


def example_parse_caption():
    """Example: parse a single caption."""
    review = parse_review(POSTS[0]["caption"], POSTS[0]["timestamp"])
    print(f"🍽️  {review.restaurant_name} ({review.location}) rated {review.rating}/10")
    print(f"✅ Approved: {review.is_approved}")
    for item in review.items:
        print(f"  - {item}")


def example_full_analysis():
    """Example: analyze a batch of posts."""
    result = analyze_posts(POSTS)

    print(f"\n📊 {result.ratings.total_reviews} reviews, average {result.ratings.average}/10")
    print("🏆 Ranking:")
    for item in result.restaurants:
        print(f"  {item.rank}. {item.name}: {item.average_rating}/10 ({item.weighted_average}/5)")

    print("🗂️  Categories:")
    for category in result.advanced.categories:
        print(f"  {category.category}: {category.count} reviews")


def example_adjusted_scores():
    """Example: compare ratings against the reviewer's own distribution."""
    result = analyze_posts(POSTS)
    stats = calculate_rating_stats(result.reviews)
    for review in result.reviews:
        adjusted = calculate_adjusted_score(review.rating, stats)
        print(f"  {review.restaurant_name}: {review.rating} -> {adjusted}")


if __name__ == "__main__":
    example_parse_caption()
    example_full_analysis()
    example_adjusted_scores()
