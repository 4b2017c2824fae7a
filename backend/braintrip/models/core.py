"""Core data models for BrainTrip.

Domain values produced by the POI-grounding and content-generation
pipeline: resolved cities, points of interest (POIs), trivia questions,
suggestions and enrichment records.

All models serialise with camelCase aliases because that is what the
client speaks; Python code uses the snake_case field names.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Difficulty(str, Enum):
    """Quiz difficulty levels."""

    STANDARD = "standard"
    CHALLENGE = "challenge"


class Category(str, Enum):
    """Suggestion categories shown to the traveller."""

    CULTURE = "Culture"
    FOOD = "Food"
    NATURE = "Nature"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    LANDMARK = "Landmark"


class TriviaSource(str, Enum):
    """Where the questions of a quiz response came from.

    ``openai`` marks live language-model generation whichever provider
    served it; the value is part of the client contract.
    """

    OPENAI = "openai"
    CACHE = "cache"
    FALLBACK = "fallback"
    ERROR = "error"


class Coordinates(CamelModel):
    """Geographic coordinates with validation."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class ResolvedCity(CamelModel):
    """Canonical place for a free-text city input."""

    model_config = ConfigDict(frozen=True)

    label: str
    external_id: str
    lat: float = 0.0
    lng: float = 0.0
    country: str = ""
    region: str = ""


class ContextPOI(CamelModel):
    """A notable place used to ground trivia questions."""

    model_config = ConfigDict(frozen=True)

    external_id: str
    name: str
    types: list[str] = Field(default_factory=list)
    rating: float = 0.0
    rating_count: int = 0


class CityContext(CamelModel):
    """Bounded set of real POIs for one resolved city."""

    label: str
    external_id: str
    pois: list[ContextPOI] = Field(default_factory=list, max_length=20)

    @property
    def poi_names(self) -> list[str]:
        return [p.name for p in self.pois]


class PoolPOI(CamelModel):
    """A categorised place from the suggestions pool."""

    model_config = ConfigDict(frozen=True)

    external_id: str
    title: str
    lat: float = 0.0
    lng: float = 0.0
    category: Category = Category.LANDMARK
    address: str = ""
    rating: float = 0.0
    rating_count: int = 0


class TriviaQuestion(CamelModel):
    """A validated multiple-choice question.

    ``options`` always holds exactly four answers and
    ``options[correct_index]`` is the right one.
    """

    question: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=4, max_length=4)
    correct_index: int = Field(..., ge=0, le=3)
    fun_fact: str

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]


class EnrichmentRecord(CamelModel):
    """Generated description and fun fact for one POI."""

    description: str
    fun_fact: str = ""


class Suggestion(CamelModel):
    """A place suggestion for the itinerary builder.

    Description and fun fact start as placeholders and are filled in by
    :meth:`apply_enrichment` once an enrichment record exists.
    """

    title: str
    description: str
    category: str
    fun_fact: str = ""
    address: Optional[str] = None
    place_id: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    image_url: Optional[str] = None
    distance_km: Optional[float] = None
    popularity_score: Optional[float] = None
    enriched: bool = False

    def apply_enrichment(self, record: EnrichmentRecord) -> "Suggestion":
        """Merge enrichment fields in place, leaving all others untouched."""
        self.description = record.description
        self.fun_fact = record.fun_fact
        self.enriched = True
        return self
