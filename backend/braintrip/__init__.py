"""BrainTrip backend: POI-grounded travel trivia and suggestions."""

__version__ = "0.1.0"
