"""Trips API: saved itineraries and their spots (thin CRUD)."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from braintrip.models import ErrorCode
from braintrip.models.trips import (
    AddSpotsRequest,
    AddSpotsResponse,
    TripCreate,
    TripDetail,
    TripOut,
    TripPatch,
    TripSpotOut,
)
from braintrip.repositories import TripsRepository

from .deps import get_session, get_trips_repo
from .errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])

PATCHABLE_FIELDS = {"score", "total_questions", "hotel_location"}


def _trip_not_found():
    return error_response(404, ErrorCode.NOT_FOUND, "Trip not found")


def _detail(repo: TripsRepository, session: Session, trip) -> TripDetail:
    detail = TripDetail.model_validate(TripOut.model_validate(trip).model_dump())
    detail.spots = [TripSpotOut.model_validate(s) for s in repo.get_spots(session, trip.id)]
    return detail


@router.get("", response_model=List[TripOut])
def list_trips(
    session: Session = Depends(get_session),
    repo: TripsRepository = Depends(get_trips_repo),
):
    """All saved trips, newest first."""
    return [TripOut.model_validate(t) for t in repo.list_trips(session)]


@router.get("/{trip_id}", response_model=TripDetail)
def get_trip(
    trip_id: int,
    session: Session = Depends(get_session),
    repo: TripsRepository = Depends(get_trips_repo),
):
    trip = repo.get_trip(session, trip_id)
    if not trip:
        return _trip_not_found()
    return _detail(repo, session, trip)


@router.post("", response_model=TripDetail, status_code=201)
def create_trip(
    data: TripCreate,
    session: Session = Depends(get_session),
    repo: TripsRepository = Depends(get_trips_repo),
):
    trip = repo.create_trip(session, data)
    logger.info(f"[TRIPS] Created trip {trip.id} for {trip.city} with {len(data.spots)} spots")
    return _detail(repo, session, trip)


@router.post("/{trip_id}/spots", response_model=AddSpotsResponse)
def add_spots(
    trip_id: int,
    data: AddSpotsRequest,
    session: Session = Depends(get_session),
    repo: TripsRepository = Depends(get_trips_repo),
):
    """Append spots, skipping titles the trip already has."""
    if not repo.get_trip(session, trip_id):
        return _trip_not_found()
    if not data.spots:
        return error_response(400, ErrorCode.VALIDATION_ERROR, "Spots array is required")
    added = repo.add_spots(session, trip_id, data.spots)
    spots = [TripSpotOut.model_validate(s) for s in repo.get_spots(session, trip_id)]
    return AddSpotsResponse(added=added, spots=spots)


@router.patch("/{trip_id}", response_model=TripDetail)
def update_trip(
    trip_id: int,
    data: TripPatch,
    session: Session = Depends(get_session),
    repo: TripsRepository = Depends(get_trips_repo),
):
    """Update score, totalQuestions and/or hotelLocation."""
    trip = repo.get_trip(session, trip_id)
    if not trip:
        return _trip_not_found()
    updates = {f: getattr(data, f) for f in data.model_fields_set & PATCHABLE_FIELDS}
    if updates:
        trip = repo.update_trip(session, trip, updates)
    return _detail(repo, session, trip)


@router.delete("/{trip_id}/spots/{spot_id}", status_code=204)
def delete_spot(
    trip_id: int,
    spot_id: int,
    session: Session = Depends(get_session),
    repo: TripsRepository = Depends(get_trips_repo),
):
    repo.delete_spot(session, trip_id, spot_id)
    return Response(status_code=204)


@router.delete("/{trip_id}", status_code=204)
def delete_trip(
    trip_id: int,
    session: Session = Depends(get_session),
    repo: TripsRepository = Depends(get_trips_repo),
):
    repo.delete_trip(session, trip_id)
    logger.info(f"[TRIPS] Deleted trip {trip_id}")
    return Response(status_code=204)
