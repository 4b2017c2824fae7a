from .trips import TripsRepository
from . import models

__all__ = ["TripsRepository", "models"]
