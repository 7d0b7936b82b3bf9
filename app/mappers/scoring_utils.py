import math

MAX_REASONS = 4


def clamp_score(score: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, score)))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def unique_reasons(reasons: list[str], limit: int = MAX_REASONS) -> list[str]:
    """Drop repeats (first occurrence kept) and cap the list."""
    return list(dict.fromkeys(reasons))[:limit]


def label_for(score: int, thresholds: tuple[tuple[int, str], ...], default: str) -> str:
    """Return the first label whose cut point the score reaches."""
    for cut, label in thresholds:
        if score >= cut:
            return label
    return default


def text_of(*parts: str | None) -> str:
    return " ".join(p for p in parts if p).lower()
