"""
Trip repository backed by SQLAlchemy.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from braintrip.models.trips import SpotInput, TripCreate
from braintrip.repositories.models import TripORM, TripSpotORM


def _spot_orm(trip_id: int, spot: SpotInput, sort_order: int) -> TripSpotORM:
    return TripSpotORM(
        trip_id=trip_id,
        title=spot.title,
        description=spot.description or "",
        category=spot.category or "Other",
        image_url=spot.image_url or None,
        fun_fact=spot.fun_fact or None,
        address=spot.address or None,
        place_id=spot.place_id or None,
        lat=spot.lat,
        lng=spot.lng,
        sort_order=sort_order,
    )


class TripsRepository:
    """CRUD operations for trips and their spots."""

    def list_trips(self, session: Session) -> List[TripORM]:
        """All trips, newest first."""
        return (
            session.query(TripORM)
            .order_by(TripORM.created_at.desc(), TripORM.id.desc())
            .all()
        )

    def get_trip(self, session: Session, trip_id: int) -> Optional[TripORM]:
        return session.get(TripORM, trip_id)

    def get_spots(self, session: Session, trip_id: int) -> List[TripSpotORM]:
        return (
            session.query(TripSpotORM)
            .filter(TripSpotORM.trip_id == trip_id)
            .order_by(TripSpotORM.sort_order.asc(), TripSpotORM.id.asc())
            .all()
        )

    def create_trip(self, session: Session, data: TripCreate) -> TripORM:
        """Insert a trip and its spots; spots default to their list position."""
        orm = TripORM(
            city=data.city,
            city_label=data.city_label or None,
            city_place_id=data.city_place_id or None,
            hotel_location=data.hotel_location or None,
            mode=data.mode or "quiz",
            difficulty=data.difficulty or "standard",
            score=data.score,
            total_questions=data.total_questions,
        )
        session.add(orm)
        session.flush()
        for idx, spot in enumerate(data.spots):
            order = spot.sort_order if spot.sort_order is not None else idx
            session.add(_spot_orm(orm.id, spot, order))
        session.commit()
        session.refresh(orm)
        return orm

    def add_spots(self, session: Session, trip_id: int, spots: List[SpotInput]) -> int:
        """Append spots after the current last one, skipping titles already saved.

        Returns how many spots were added.
        """
        existing = self.get_spots(session, trip_id)
        titles = {s.title.lower().strip() for s in existing}
        next_order = max((s.sort_order for s in existing), default=-1) + 1

        added = 0
        for spot in spots:
            key = spot.title.lower().strip()
            if key in titles:
                continue
            titles.add(key)
            session.add(_spot_orm(trip_id, spot, next_order + added))
            added += 1
        if added:
            session.commit()
        return added

    def update_trip(self, session: Session, trip: TripORM, updates: dict) -> TripORM:
        for field, value in updates.items():
            setattr(trip, field, value)
        session.commit()
        session.refresh(trip)
        return trip

    def delete_spot(self, session: Session, trip_id: int, spot_id: int) -> None:
        session.query(TripSpotORM).filter(
            TripSpotORM.id == spot_id, TripSpotORM.trip_id == trip_id
        ).delete(synchronize_session=False)
        session.commit()

    def delete_trip(self, session: Session, trip_id: int) -> None:
        """Delete a trip and its spots; unknown ids are a no-op."""
        session.query(TripSpotORM).filter(TripSpotORM.trip_id == trip_id).delete(
            synchronize_session=False
        )
        session.query(TripORM).filter(TripORM.id == trip_id).delete(synchronize_session=False)
        session.commit()
