"""Stable identifiers for generated trivia questions.

Question ids let clients remember what they have already seen across
sessions, so they must not depend on the interpreter's hash seed.
"""

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def rolling_hash32(text: str) -> int:
    """32-bit signed ``h = h * 31 + unit`` hash over UTF-16 code units."""
    data = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def question_id(place_id: str, difficulty: str, question_text: str) -> str:
    """Deterministic id for ``place_id|difficulty|question_text``.

    Only the question text takes part, so reworded options keep the id.

    Example:
        >>> question_id("ChIJ123", "standard", "Q?") == question_id("ChIJ123", "standard", "Q?")
        True
    """
    return _to_base36(abs(rolling_hash32(f"{place_id}|{difficulty}|{question_text}")))
