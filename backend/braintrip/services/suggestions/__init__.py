"""Ranked place suggestions."""

from .ranking import RankedPOI, decile_buckets, popularity_score, rank_pool, select_batch
from .service import SuggestionBatch, SuggestionService

__all__ = [
    "RankedPOI",
    "SuggestionBatch",
    "SuggestionService",
    "decile_buckets",
    "popularity_score",
    "rank_pool",
    "select_batch",
]
