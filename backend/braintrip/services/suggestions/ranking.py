"""Popularity/distance ranking for the suggestions pool.

``popularity = rating * log10(rating_count + 1)`` rewards places that are
both well rated and widely reviewed. Scores are coarsened into deciles
over the current pool so that, within a band of similar popularity, the
place nearest the hotel comes first.
"""

import math
from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Optional

from braintrip.models import Coordinates, PoolPOI
from braintrip.utils.geo import haversine_distance

MAX_HOTEL_DISTANCE_KM = 100.0
BATCH_SIZE = 5


@dataclass
class RankedPOI:
    """A pool POI with its ranking inputs."""
    poi: PoolPOI
    distance_km: Optional[float]
    popularity_score: float
    bucket: int = 0


def popularity_score(rating: float, rating_count: int) -> float:
    return (rating or 0.0) * math.log10((rating_count or 0) + 1)


def decile_buckets(scores: list[float]) -> list[int]:
    """Bucket 0-9 per score: where it would insert into the sorted scores.

    Equal scores share the bucket of their first occurrence.
    """
    if not scores:
        return []
    ordered = sorted(scores)
    n = len(ordered)
    return [math.floor(bisect_left(ordered, s) / n * 10) for s in scores]


def rank_pool(pool: Iterable[PoolPOI], hotel: Optional[Coordinates] = None) -> list[RankedPOI]:
    """Score, distance-filter and order the pool for presentation.

    Highest decile first; within a decile, nearest to the hotel first.
    Without a hotel every distance is ``None`` and the sort is stable.
    """
    ranked = []
    for poi in pool:
        distance = (
            haversine_distance(hotel.lat, hotel.lng, poi.lat, poi.lng) if hotel else None
        )
        ranked.append(RankedPOI(
            poi=poi,
            distance_km=distance,
            popularity_score=popularity_score(poi.rating, poi.rating_count),
        ))

    if hotel:
        ranked = [
            r for r in ranked
            if r.distance_km is None or r.distance_km <= MAX_HOTEL_DISTANCE_KM
        ]

    for r, bucket in zip(ranked, decile_buckets([r.popularity_score for r in ranked])):
        r.bucket = bucket

    ranked.sort(key=lambda r: (-r.bucket, r.distance_km if r.distance_km is not None else 0.0))
    return ranked


def select_batch(
    ranked: list[RankedPOI],
    exclude_titles: Iterable[str] = (),
    exclude_place_ids: Iterable[str] = (),
    limit: int = BATCH_SIZE,
) -> list[RankedPOI]:
    """First ``limit`` ranked POIs the caller has not seen yet."""
    titles = {t.lower().strip() for t in exclude_titles}
    place_ids = {p for p in exclude_place_ids if p}
    available = [
        r for r in ranked
        if r.poi.title.lower().strip() not in titles
        and not (r.poi.external_id and r.poi.external_id in place_ids)
    ]
    return available[:limit]
