"""API routes for BrainTrip's content pipeline.

- ``/quiz/generate``: POI-grounded trivia with cross-session dedup
- ``/suggestions/generate``: ranked places, enriched in the background
- ``/suggestions/enrich-poi``: description + fun fact for one place
- ``/geocode``: Nominatim lookup

The generation endpoints always answer with something useful; upstream
problems degrade to cached or curated content. The only hard failures are
invalid input (400) and a quiz grounded on an explicit place id that
produced nothing (503).
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from braintrip.models import (
    EnrichPOIRequest,
    EnrichPOIResponse,
    ErrorCode,
    GeocodeRequest,
    GeocodeResponse,
    QuizRequest,
    QuizResponse,
    SuggestionsRequest,
    SuggestionsResponse,
    TriviaSource,
)
from braintrip.services import AppServices, GeocodingTimeout, QuizUnavailableError
from braintrip.services.enrichment import default_description

from .deps import get_services
from .errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter()

QUIZ_UNAVAILABLE_MESSAGE = "Quiz generation temporarily unavailable. Please try again."


def _quiz_unavailable():
    body = QuizResponse(source=TriviaSource.ERROR).model_dump(
        mode="json", by_alias=True, include={"questions", "question_ids", "pool_exhausted", "source"}
    )
    return error_response(503, ErrorCode.GENERATION_UNAVAILABLE, QUIZ_UNAVAILABLE_MESSAGE, **body)


@router.post("/quiz/generate", response_model=QuizResponse, response_model_exclude_none=True)
async def generate_quiz(request: QuizRequest, services: AppServices = Depends(get_services)):
    """Generate a quiz for a city, skipping questions the caller has seen."""
    try:
        return await services.trivia.generate(request)
    except QuizUnavailableError as e:
        logger.info(f"[TRIVIA] {e}")
        return _quiz_unavailable()
    except Exception:
        logger.exception("[TRIVIA] Quiz generation error")
        if request.city_place_id:
            return _quiz_unavailable()
        return services.trivia.fallback_response(request.city)


@router.post("/suggestions/generate", response_model=SuggestionsResponse)
async def generate_suggestions(
    request: SuggestionsRequest,
    background_tasks: BackgroundTasks,
    services: AppServices = Depends(get_services),
) -> SuggestionsResponse:
    """Next page of up to five suggestions; unenriched ones are enriched after responding."""
    try:
        batch = await services.suggestions.generate(request)
    except Exception:
        logger.exception("[POOL] Suggestions generation error")
        return SuggestionsResponse(
            suggestions=services.suggestions.curated(
                request.city, request.exclude, request.exclude_place_ids
            )
        )

    if batch.pending and services.ai is not None:
        background_tasks.add_task(services.enrichment.warm, request.city, batch.pending)
    return SuggestionsResponse(suggestions=batch.suggestions)


@router.post("/suggestions/enrich-poi", response_model=EnrichPOIResponse)
async def enrich_poi(
    request: EnrichPOIRequest, services: AppServices = Depends(get_services)
) -> EnrichPOIResponse:
    """Description and fun fact for one place. Always 200 with best-effort content."""
    try:
        record = await services.enrichment.enrich(
            request.city, request.name, request.category, request.address, request.place_id
        )
        description, fun_fact = record.description, record.fun_fact
    except Exception:
        logger.exception("[ENRICH] POI enrichment error")
        description, fun_fact = default_description(request.category, request.city), ""
    return EnrichPOIResponse(
        name=request.name,
        place_id=request.place_id or "",
        description=description,
        fun_fact=fun_fact,
    )


@router.post("/geocode", response_model=GeocodeResponse)
async def geocode(request: GeocodeRequest, services: AppServices = Depends(get_services)):
    """Geocode a free-text address with Nominatim."""
    try:
        coords = await services.geocoder.lookup(request.address)
    except GeocodingTimeout:
        return error_response(504, ErrorCode.UPSTREAM_TIMEOUT, "Geocoding timed out")
    except Exception:
        logger.exception("[GEOCODE] Geocode error")
        return error_response(500, ErrorCode.API_ERROR, "Geocoding failed")
    if coords is None:
        return error_response(404, ErrorCode.NOT_FOUND, "Location not found")
    return GeocodeResponse(lat=coords.lat, lng=coords.lng)
