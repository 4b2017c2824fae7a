"""Request and response models for the HTTP API."""

from typing import Optional

from pydantic import Field

from .core import CamelModel, Difficulty, Suggestion, TriviaQuestion, TriviaSource


class QuizRequest(CamelModel):
    city: str = Field(..., min_length=1, description="Free-text city name")
    difficulty: Difficulty = Difficulty.STANDARD
    count: int = Field(default=8, ge=1)
    exclude_question_ids: list[str] = Field(default_factory=list)
    city_place_id: Optional[str] = None
    city_label: Optional[str] = None


class QuizResponse(CamelModel):
    questions: list[TriviaQuestion] = Field(default_factory=list)
    question_ids: list[str] = Field(default_factory=list)
    city_label: str = ""
    city_place_id: Optional[str] = None
    pool_exhausted: bool = False
    source: TriviaSource
    error: Optional[str] = None


class SuggestionsRequest(CamelModel):
    city: str = Field(..., min_length=1)
    hotel_location: Optional[str] = None
    exclude: list[str] = Field(default_factory=list, description="Titles already shown")
    exclude_place_ids: list[str] = Field(default_factory=list)


class SuggestionsResponse(CamelModel):
    suggestions: list[Suggestion] = Field(default_factory=list)


class EnrichPOIRequest(CamelModel):
    city: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    address: Optional[str] = None
    place_id: Optional[str] = None


class EnrichPOIResponse(CamelModel):
    name: str
    place_id: str = ""
    description: str
    fun_fact: str = ""


class GeocodeRequest(CamelModel):
    address: str = Field(..., min_length=1)


class GeocodeResponse(CamelModel):
    lat: float
    lng: float
