"""Fallback store: curated content when live generation falls short.

Lookups normalise the city name (lowercase, trimmed) and match a curated
key when either string contains the other, so ``"Paris, France"`` and
``"par"`` both find Paris. Returned models are copies; callers may shuffle
or enrich them freely.
"""

from braintrip.models import Suggestion, TriviaQuestion

from .data import CURATED_PLACES, CURATED_QUESTIONS


def _match(city: str, table: dict) -> list | None:
    key = city.lower().strip()
    if not key:
        return None
    for name, items in table.items():
        if name in key or key in name:
            return items
    return None


def generic_questions(city: str) -> list[TriviaQuestion]:
    """City-parameterised questions that fit anywhere."""
    return [
        TriviaQuestion(
            question=f"What is a common way to explore {city}?",
            options=["Walking tour", "Submarine ride", "Private helicopter", "Hot air balloon"],
            correct_index=0,
            fun_fact="Walking tours are one of the best ways to discover hidden gems in any city.",
        ),
        TriviaQuestion(
            question=f"What should travelers try when visiting {city}?",
            options=["Local cuisine", "Only chain restaurants", "Only hotel food", "Packaged snacks"],
            correct_index=0,
            fun_fact="Trying local food is often the highlight of any trip.",
        ),
        TriviaQuestion(
            question=f"Which is the best way to learn about {city}'s culture?",
            options=["Visit local museums", "Stay at the hotel", "Only read guidebooks", "Watch TV"],
            correct_index=0,
            fun_fact="Museums offer fascinating insights into a city's culture and heritage.",
        ),
        TriviaQuestion(
            question=f"What makes {city} a popular travel destination?",
            options=["Rich history and culture", "Free hotels", "No other cities nearby", "Mandatory visits"],
            correct_index=0,
            fun_fact="Cities with diverse cultural offerings tend to attract the most visitors.",
        ),
        TriviaQuestion(
            question=f"What is often found in {city}'s historic districts?",
            options=["Traditional architecture", "Only modern buildings", "Empty lots", "Parking garages"],
            correct_index=0,
            fun_fact="Historic districts preserve the architectural heritage that tells a city's story.",
        ),
    ]


def get_fallback_questions(city: str) -> list[TriviaQuestion]:
    """Curated questions for ``city``, else the generic template. Never empty."""
    curated = _match(city, CURATED_QUESTIONS)
    if curated is None:
        return generic_questions(city)
    return [q.model_copy(deep=True) for q in curated]


def get_curated_places(city: str) -> list[Suggestion]:
    """Curated suggestions for ``city``; ``[]`` for unknown cities."""
    curated = _match(city, CURATED_PLACES)
    if curated is None:
        return []
    return [s.model_copy(deep=True) for s in curated]
