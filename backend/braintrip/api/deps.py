"""FastAPI dependencies: the service container and database sessions."""

from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from braintrip.repositories import TripsRepository
from braintrip.services import AppServices

_trips_repo = TripsRepository()


def get_services(request: Request) -> AppServices:
    return request.app.state.services


def get_session(request: Request) -> Iterator[Session]:
    yield from request.app.state.db.session()


def get_trips_repo() -> TripsRepository:
    return _trips_repo
