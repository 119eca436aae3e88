"""Tests for caption parsing."""

import pytest
from platelog.core.parser import (
    parse_review,
    extract_handle,
    extract_rating,
    extract_location,
    extract_name,
    extract_items,
    is_approved,
    clean_review_text,
)


BOBA_CAPTION = (
    "@bobabloom_ RG1 9.3/10 🤩🔥\n\n"
    "Banana Pudding...\n"
    "@diningwithtaha APPROVED ✅✅✅"
)

FULL_CAPTION = """@bobabloom_ RG1 9.3/10 🤩🔥

Does Reading secretly have the best banana pudding in the UK? 👀

🔥 The corn dogs – dangerous levels of cheese pull.
🍓 Strawberry Matcha – earthy, sweet, addictive.
⚡️ Red Bull Mocktail – if you love Red Bull, this is a problem.

If you're in Reading, this is a MUST.

@diningwithtaha APPROVED ✅✅✅"""


class TestParseReview:
    """End-to-end parsing of captions."""

    def test_round_trip_caption(self):
        review = parse_review(BOBA_CAPTION, "2024-12-15T14:30:00Z")

        assert review is not None
        assert review.restaurant_handle == "bobabloom_"
        assert review.restaurant_name == "bobabloom_"
        assert review.rating == 9.3
        assert review.location == "RG1"
        assert review.is_approved is True
        assert review.timestamp == "2024-12-15T14:30:00Z"
        assert review.raw_caption == BOBA_CAPTION

    def test_review_text_is_stripped(self):
        review = parse_review(BOBA_CAPTION, "2024-12-15T14:30:00Z")

        assert "Banana Pudding" in review.review_text
        assert "@" not in review.review_text
        assert "9.3/10" not in review.review_text
        assert "RG1" not in review.review_text
        assert "APPROVED" not in review.review_text
        assert "✅" not in review.review_text
        assert "\n" not in review.review_text

    def test_full_caption_items(self):
        review = parse_review(FULL_CAPTION, "2024-12-15T14:30:00Z")

        assert review.items == [
            "The corn dogs: dangerous levels of cheese pull.",
            "Strawberry Matcha: earthy, sweet, addictive.",
            "Red Bull Mocktail: if you love Red Bull, this is a problem.",
        ]
        assert "corn dogs" not in review.review_text
        assert "Does Reading secretly" in review.review_text

    def test_no_rating_is_not_a_review(self):
        assert parse_review("Great day out today!", "2024-01-01T00:00:00Z") is None
        assert parse_review("@dishoom what a night", "2024-01-01T00:00:00Z") is None

    def test_out_of_range_rating_rejected(self):
        assert parse_review("@hype 11/10 unreal", "2024-01-01T00:00:00Z") is None

    @pytest.mark.parametrize("rating", [0, 2.5, 7, 9.9, 10])
    def test_rating_in_plain_caption(self, rating):
        review = parse_review(f"{rating}/10", "2024-01-01T00:00:00Z")
        assert review is not None
        assert review.rating == rating

    def test_empty_and_missing_inputs(self):
        assert parse_review("", "") is None
        assert parse_review(None, None) is None

        review = parse_review("@cafe 8/10", None)
        assert review.timestamp == ""

    @pytest.mark.parametrize("caption", [123, 8.5, ["@cafe 8/10"], {"caption": "@cafe 8/10"}])
    def test_non_string_caption(self, caption):
        assert parse_review(caption, "2024-01-01T00:00:00Z") is None

    def test_non_string_timestamp(self):
        assert parse_review("@cafe 8/10", 1700000000).timestamp == ""

    def test_fallback_name_without_handle(self):
        review = parse_review("8/10", "2024-01-01T00:00:00Z")
        assert review.restaurant_name == "Unknown Restaurant"
        assert review.restaurant_handle is None

    def test_name_from_first_line(self):
        review = parse_review("Burger Shack RG2 8.5/10\nGreat burger", "2024-01-01T00:00:00Z")
        assert review.restaurant_name == "Burger Shack"
        assert review.location == "RG2"

    def test_only_first_mention_is_handle(self):
        review = parse_review("@first @second 7/10", "2024-01-01T00:00:00Z")
        assert review.restaurant_handle == "first"


class TestExtractionRules:
    """Each extraction rule on its own."""

    def test_extract_handle(self):
        assert extract_handle("Lunch at @five_guys.uk today") == "five_guys.uk"
        assert extract_handle("no mentions here") is None

    def test_extract_rating_with_spaces(self):
        assert extract_rating("solid 9.5 / 10 from me") == 9.5
        assert extract_rating("10/10") == 10.0
        assert extract_rating("0/10") == 0.0
        assert extract_rating("five out of ten") is None

    @pytest.mark.parametrize("caption", ["\u0669/10", "\uff19/10", "\u0968/10"])
    def test_extract_rating_ascii_digits_only(self, caption):
        assert extract_rating(caption) is None

    def test_postcode_location(self):
        assert extract_location("@dishoom WD24 – 8.8/10") == "WD24"
        assert extract_location("@bobabloom_ RG1 9.3/10") == "RG1"

    def test_city_location(self):
        assert extract_location("@pizzaplace Southampton - 9.5/10") == "Southampton"

    def test_postcode_takes_precedence_over_city(self):
        caption = "@grill Reading - 8/10\nAlso near RG1 9 minutes away"
        assert extract_location(caption) == "RG1"

    def test_no_location(self):
        assert extract_location("@cafe 7/10 nice") is None

    def test_extract_name_strips_invite_and_punctuation(self):
        assert extract_name("Pizza Place invite - 7/10!") == "Pizza Place"

    def test_extract_name_rejects_long_first_line(self):
        caption = "A" * 60 + " 7/10"
        assert extract_name(caption) == "Unknown Restaurant"

    def test_extract_name_prefers_handle(self):
        assert extract_name("@nandos Some Long Name 7/10", "nandos") == "nandos"

    def test_extract_items_bullets_and_dashes(self):
        caption = "@wings 8/10\n• Wings – crispy and hot\n- Fries - salty"
        assert extract_items(caption) == ["Wings: crispy and hot", "Fries: salty"]

    def test_extract_items_none(self):
        assert extract_items("@cafe 8/10\nJust coffee today") == []

    def test_is_approved(self):
        assert is_approved("@diningwithtaha approved ✅")
        assert not is_approved("@someoneelse APPROVED")
        assert not is_approved("APPROVED")

    def test_is_approved_custom_reviewer(self):
        assert is_approved("@foodie_sam APPROVED", reviewer_handle="foodie_sam")
        assert not is_approved("@diningwithtaha APPROVED", reviewer_handle="foodie_sam")

    def test_clean_review_text_collapses_newlines(self):
        text = clean_review_text("@cafe 8/10\n\nLovely spot\nWould return")
        assert text == "Lovely spot Would return"
