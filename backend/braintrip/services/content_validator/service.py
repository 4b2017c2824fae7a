"""Content validator: the quality gate between the model and the client.

- Trivia: structural checks (4 distinct options, index in range, a real
  fun fact), a generic-knowledge filter that forces questions to be
  about *this* city, and a uniform option shuffle that removes any
  positional bias in the model's answers.
- Fun facts: marketing-tone and shape checks for enrichment output.
- Suggestions: required fields, per-batch title dedup and caller
  exclusions.

Malformed candidates are dropped silently; nothing here raises on bad
model output.
"""

import logging
import random
import re
from typing import Any, Iterable, Optional

from braintrip.models import Suggestion, TriviaQuestion

logger = logging.getLogger(__name__)

OPTION_COUNT = 4
MIN_FUNFACT_CHARS = 5

GENERIC_PATTERNS = [
    re.compile(r"what is the capital", re.IGNORECASE),
    re.compile(r"which currency", re.IGNORECASE),
    re.compile(r"what language.*spoken", re.IGNORECASE),
    re.compile(r"what continent", re.IGNORECASE),
    re.compile(r"what is the population", re.IGNORECASE),
    re.compile(r"which country.*located", re.IGNORECASE),
]

BANNED_FUNFACT_PHRASES = (
    "popular spot",
    "notable",
    "destination",
    "must-visit",
    "must visit",
    "perfect for",
    "great place",
    "visitors",
    "atmosphere",
    "a popular",
    "well-known",
    "well known",
    "famous for being",
    "worth a visit",
    "must-see",
    "must see",
)

MIN_ENRICHMENT_FUNFACT_CHARS = 10
# Enrichment prompts ask for 12-25 words; 8 still lets terse concrete facts through.
MIN_FUNFACT_WORDS = 8
MAX_FUNFACT_WORDS = 25

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NUMBER_RE = re.compile(r"\b\d+")
_YEAR_RE = re.compile(r"\b(1[0-9]{3}|2[0-9]{3})\b")
_MEASUREMENT_RE = re.compile(
    r"\b\d+[\s-]?(meter|metre|foot|feet|ton|kilo|mile|acre|year|centur|inch|pound|hectare|square|cubic)",
    re.IGNORECASE,
)
_PROPER_NOUN_RE = re.compile(r"\b[A-Z][a-z]{2,}\b")


def _normalize(text: str) -> str:
    return text.lower().strip()


# ── Trivia ────────────────────────────────────────────────────────────

def is_generic_question(question: str) -> bool:
    """True for questions that could be asked about any city."""
    return any(p.search(question) for p in GENERIC_PATTERNS)


def parse_trivia_candidate(raw: Any) -> Optional[TriviaQuestion]:
    """Validate one raw model candidate; ``None`` when it fails any check."""
    if not isinstance(raw, dict):
        return None
    question = raw.get("question")
    options = raw.get("options")
    correct_index = raw.get("correctIndex", raw.get("correct_index"))
    fun_fact = raw.get("funFact", raw.get("fun_fact"))

    if not isinstance(question, str) or not question.strip():
        return None
    if not isinstance(options, list) or len(options) != OPTION_COUNT:
        return None
    if not all(isinstance(o, str) for o in options):
        return None
    if len({_normalize(o) for o in options}) != OPTION_COUNT:
        return None
    if isinstance(correct_index, bool) or not isinstance(correct_index, int):
        return None
    if not 0 <= correct_index < OPTION_COUNT:
        return None
    if not isinstance(fun_fact, str) or len(fun_fact.strip()) < MIN_FUNFACT_CHARS:
        return None
    if is_generic_question(question):
        return None

    return TriviaQuestion(
        question=question,
        options=options,
        correct_index=correct_index,
        fun_fact=fun_fact,
    )


def shuffle_options(
    question: TriviaQuestion, rng: random.Random | None = None
) -> TriviaQuestion:
    """Return a copy with options in a uniformly random order.

    Fisher–Yates over the indices; ``correct_index`` follows the right
    answer to its new position.
    """
    r = rng or random
    order = list(range(OPTION_COUNT))
    for i in range(OPTION_COUNT - 1, 0, -1):
        j = r.randrange(i + 1)
        order[i], order[j] = order[j], order[i]
    return question.model_copy(update={
        "options": [question.options[i] for i in order],
        "correct_index": order.index(question.correct_index),
    })


def validate_trivia_questions(
    candidates: Iterable[Any], rng: random.Random | None = None
) -> list[TriviaQuestion]:
    """Keep valid, non-generic, non-duplicate candidates, each shuffled."""
    accepted: list[TriviaQuestion] = []
    seen: set[str] = set()
    dropped = 0
    for raw in candidates:
        q = parse_trivia_candidate(raw)
        if q is None or _normalize(q.question) in seen:
            dropped += 1
            continue
        seen.add(_normalize(q.question))
        accepted.append(shuffle_options(q, rng))
    if dropped:
        logger.info(f"[TRIVIA] Validator dropped {dropped} candidate(s), kept {len(accepted)}")
    return accepted


def has_degenerate_distribution(questions: list[TriviaQuestion]) -> bool:
    """True when a batch of 4+ questions has every answer in position 0."""
    if len(questions) < 4:
        return False
    return all(q.correct_index == 0 for q in questions)


def enforce_answer_distribution(
    questions: list[TriviaQuestion], rng: random.Random | None = None
) -> list[TriviaQuestion]:
    """Reshuffle the whole batch once if its answer positions are degenerate."""
    if not has_degenerate_distribution(questions):
        return questions
    logger.error(
        f"[TRIVIA] All {len(questions)} questions have correctIndex=0; reshuffling batch"
    )
    return [shuffle_options(q, rng) for q in questions]


def count_poi_references(questions: list[TriviaQuestion], poi_names: list[str]) -> int:
    """How many questions mention a POI name in the question or options."""
    names = [n.lower() for n in poi_names if n]
    count = 0
    for q in questions:
        text = " ".join([q.question, *q.options]).lower()
        if any(name in text for name in names):
            count += 1
    return count


# ── Enrichment fun facts ─────────────────────────────────────────────

def is_valid_fun_fact(fact: Optional[str]) -> bool:
    """Accept a single factual sentence with at least one concrete signal.

    Rejects marketing phrasing, multi-sentence text and facts outside the
    word window. A fact must contain a number, a year, a measurement or a
    capitalised proper noun after its first word.
    """
    if not fact or len(fact) < MIN_ENRICHMENT_FUNFACT_CHARS:
        return False
    lower = fact.lower()
    if any(phrase in lower for phrase in BANNED_FUNFACT_PHRASES):
        return False
    words = fact.split()
    if not MIN_FUNFACT_WORDS <= len(words) <= MAX_FUNFACT_WORDS:
        return False
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(fact) if s.strip()]
    if len(sentences) > 1:
        return False

    after_first_word = fact.split(" ", 1)[1] if " " in fact else fact
    return bool(
        _NUMBER_RE.search(fact)
        or _YEAR_RE.search(fact)
        or _MEASUREMENT_RE.search(fact)
        or _PROPER_NOUN_RE.search(after_first_word)
    )


# ── Suggestions ───────────────────────────────────────────────────────

def validate_suggestions(
    suggestions: Iterable[Suggestion],
    exclude_titles: Iterable[str] = (),
    exclude_place_ids: Iterable[str] = (),
) -> list[Suggestion]:
    """Drop incomplete, duplicate or excluded suggestions, keeping order."""
    titles = {_normalize(t) for t in exclude_titles}
    place_ids = {p for p in exclude_place_ids if p}
    seen: set[str] = set()
    kept: list[Suggestion] = []
    for s in suggestions:
        if not s.title or not s.description or not s.category:
            continue
        key = _normalize(s.title)
        if key in titles or key in seen:
            continue
        if s.place_id and s.place_id in place_ids:
            continue
        seen.add(key)
        kept.append(s)
    return kept
