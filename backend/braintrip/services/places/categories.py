"""Place-type → category mapping and generic-name blocklist."""

from braintrip.models import Category

# Checked in order; the first matching row wins.
TYPE_CATEGORY_PRIORITY: list[tuple[frozenset[str], Category]] = [
    (frozenset({"museum", "art_gallery"}), Category.CULTURE),
    (frozenset({"restaurant", "cafe", "bakery", "bar", "meal_takeaway"}), Category.FOOD),
    (frozenset({"park", "natural_feature", "campground"}), Category.NATURE),
    (
        frozenset({"shopping_mall", "store", "clothing_store", "department_store"}),
        Category.SHOPPING,
    ),
    (
        frozenset({"amusement_park", "stadium", "movie_theater", "night_club"}),
        Category.ENTERTAINMENT,
    ),
    (
        frozenset({"church", "hindu_temple", "mosque", "synagogue", "place_of_worship"}),
        Category.LANDMARK,
    ),
    (
        frozenset({"tourist_attraction", "point_of_interest", "establishment"}),
        Category.LANDMARK,
    ),
]

# Names too vague to be a suggestion on their own.
GENERIC_NAMES = frozenset({
    "city center",
    "main park",
    "central park",
    "downtown",
    "town square",
    "main street",
    "high street",
    "market",
    "the park",
    "the mall",
    "church",
    "old town",
    "bus station",
    "train station",
    "airport",
})


def map_category(types: list[str]) -> Category:
    """Map provider type tags to a :class:`Category`; unmatched → Landmark."""
    tags = set(types)
    for group, category in TYPE_CATEGORY_PRIORITY:
        if tags & group:
            return category
    return Category.LANDMARK


def is_generic_name(name: str) -> bool:
    return name.lower().strip() in GENERIC_NAMES
