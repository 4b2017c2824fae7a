"""Place search: city resolution, POI context and suggestion pools."""

from .categories import GENERIC_NAMES, is_generic_name, map_category
from .service import (
    GooglePlacesService,
    PlaceResult,
    merge_context_pois,
    merge_pool,
    parse_resolved_city,
)

__all__ = [
    "GENERIC_NAMES",
    "GooglePlacesService",
    "PlaceResult",
    "is_generic_name",
    "map_category",
    "merge_context_pois",
    "merge_pool",
    "parse_resolved_city",
]
