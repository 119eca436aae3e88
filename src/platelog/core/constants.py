"""Constants and configuration values for PlateLog."""

# Caption Parsing Constants
class ParserConstants:
    """Constants related to caption parsing."""

    # Rating scale
    MIN_RATING = 0.0
    MAX_RATING = 10.0

    # Restaurant name taken from the first caption line
    MIN_NAME_LENGTH = 2  # exclusive
    MAX_NAME_LENGTH = 50  # exclusive

    # Emoji that open a dish line, alongside the bullet and dash markers
    ITEM_EMOJI = [
        "🔥", "🍓", "⚡️", "🧋", "🍌", "🍕", "🍔", "🍟",
        "🌮", "🍜", "🍣", "🍱", "🥗", "🥙", "🌯",
    ]
    ITEM_BULLETS = ["•", "-"]

    # Hyphen, en dash, em dash
    DASHES = "–\\-—"

# Statistics Constants
class StatsConstants:
    """Constants for statistics and aggregation."""

    DISPLAY_PRECISION = 2  # decimals for averages, medians, std-dev
    HISTOGRAM_PRECISION = 1  # decimals for histogram keys and mode

    MIN_WORD_LENGTH = 4  # words of 3 chars or fewer are dropped

    MAX_CATEGORY_RESTAURANTS = 5  # top restaurants per category
    MAX_CATEGORY_KEYWORDS = 5  # top keywords per category
    CATEGORY_STOP_WORDS = frozenset(["with", "that", "this", "from", "were", "have", "been"])

    # Adjusted score: z-score re-centred on 5 with a spread of 2 per std-dev
    ADJUSTED_CENTER = 5.0
    ADJUSTED_SPREAD = 2.0

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    EXPORT_VERSION = "1.0.0"  # version stamped into exports
    EXPORT_SUFFIX = "_analysis.json"  # default export file name suffix
    REELS_KEY = "ig_reels_media"  # top-level key of an Instagram reels export
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
