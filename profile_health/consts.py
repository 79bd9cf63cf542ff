# Default window for "recent" reviews and posts
DEFAULT_RECENCY_WINDOW_DAYS = 30

# Photo categories as reported by the directory API
PHOTO_CATEGORY_COVER = "COVER"
PHOTO_LOGO_CATEGORIES = frozenset({"LOGO", "PROFILE"})  # The API uses both labels for the logo

# Q&A answer author type for the business owner
OWNER_AUTHOR_TYPE = "MERCHANT"

# Attribute keys that earn the "key attributes" point
ATTRIBUTE_PAYMENT = "payment"
ATTRIBUTE_ACCESSIBILITY = "accessibility"
ATTRIBUTE_AMENITIES = "amenities"

# Score band colors for terminal output, highest band first
SCORE_COLOR_BANDS = [
    (80, "green"),
    (60, "blue"),
    (40, "yellow"),
]
SCORE_COLOR_FLOOR = "red"

STATUS_COLORS = {
    "excellent": "green",
    "good": "blue",
    "needs_work": "yellow",
    "poor": "red",
}
