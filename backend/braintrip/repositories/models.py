"""
SQLAlchemy ORM models for trips and their saved spots.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from braintrip.db import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TripORM(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    city = Column(Text, nullable=False)
    city_label = Column(Text, nullable=True)
    city_place_id = Column(Text, nullable=True)
    hotel_location = Column(Text, nullable=True)
    mode = Column(String(32), nullable=False, default="quiz")
    difficulty = Column(String(32), nullable=False, default="standard")
    score = Column(Integer, nullable=True)
    total_questions = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    spots = relationship(
        "TripSpotORM",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="TripSpotORM.sort_order",
    )


class TripSpotORM(Base):
    __tablename__ = "trip_spots"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(64), nullable=False, default="Other")
    image_url = Column(Text, nullable=True)
    fun_fact = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    place_id = Column(Text, nullable=True)
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)

    trip = relationship("TripORM", back_populates="spots")
