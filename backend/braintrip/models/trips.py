"""Trip and saved-spot schemas for the trips API."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .core import CamelModel


class SpotInput(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    category: str = "Other"
    image_url: Optional[str] = None
    fun_fact: Optional[str] = None
    address: Optional[str] = None
    place_id: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    sort_order: Optional[int] = None


class TripCreate(CamelModel):
    city: str = Field(..., min_length=1)
    city_label: Optional[str] = None
    city_place_id: Optional[str] = None
    hotel_location: Optional[str] = None
    mode: str = "quiz"
    difficulty: str = "standard"
    score: Optional[int] = None
    total_questions: Optional[int] = None
    spots: list[SpotInput] = Field(default_factory=list)


class TripPatch(CamelModel):
    """Only fields present in the request body are applied."""

    score: Optional[int] = None
    total_questions: Optional[int] = None
    hotel_location: Optional[str] = None


class AddSpotsRequest(CamelModel):
    spots: list[SpotInput] = Field(default_factory=list)


class TripSpotOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trip_id: int
    title: str
    description: str
    category: str
    image_url: Optional[str] = None
    fun_fact: Optional[str] = None
    address: Optional[str] = None
    place_id: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    sort_order: int


class TripOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    city: str
    city_label: Optional[str] = None
    city_place_id: Optional[str] = None
    hotel_location: Optional[str] = None
    mode: str
    difficulty: str
    score: Optional[int] = None
    total_questions: Optional[int] = None
    created_at: datetime


class TripDetail(TripOut):
    spots: list[TripSpotOut] = Field(default_factory=list)


class AddSpotsResponse(CamelModel):
    added: int
    spots: list[TripSpotOut] = Field(default_factory=list)
