"""BrainTrip services.

Service layer components:
- Cache: per-domain TTL caches in memory, optionally backed by Redis
- Places: Google Places city resolver, POI context and suggestions pool
- Geocoding: Nominatim lookups for hotels and the geocode endpoint
- AI Reasoning: OpenAI-compatible (primary), Groq, Gemini
- Content Validator: trivia, fun-fact and suggestion quality gates
- Trivia / Suggestions / Enrichment: the request-level flows
- Fallback: curated content for major cities
"""

from .cache import CacheRegistry, CacheService, DomainCache, RedisCacheService
from .places import GooglePlacesService
from .geocoding import GeocodingTimeout, NominatimGeocodingService
from .ai_reasoning import AIReasoningService, create_ai_service
from .enrichment import EnrichmentService
from .trivia import QuizUnavailableError, TriviaService
from .suggestions import SuggestionBatch, SuggestionService
from .container import AppServices

__all__ = [
    # Cache
    "CacheRegistry",
    "CacheService",
    "DomainCache",
    "RedisCacheService",
    # Providers
    "GeocodingTimeout",
    "GooglePlacesService",
    "NominatimGeocodingService",
    "AIReasoningService",
    "create_ai_service",
    # Flows
    "EnrichmentService",
    "QuizUnavailableError",
    "SuggestionBatch",
    "SuggestionService",
    "TriviaService",
    "AppServices",
]
