# career_match/utils.py
import math
from typing import Any, Dict, Iterable, List, Optional


def normalize_key(text: Optional[str]) -> str:
    """Trimmed, lowercased comparison key. Missing text becomes an empty string."""
    if not text:
        return ""
    return str(text).strip().lower()


def unique_lower(items: Optional[Iterable[str]]) -> List[str]:
    out = []
    seen = set()
    for x in items or []:
        k = normalize_key(x)
        if k and k not in seen:
            seen.add(k)
            out.append(k)
    return out


def round_half_up(x: float) -> int:
    # round() is banker's rounding; 26.5 must become 27
    return int(math.floor(x + 0.5))


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def paginate(page: int, limit: int, total: int) -> Dict[str, Any]:
    """
    Pagination metadata in the platform's envelope shape.
    """
    current_page = max(1, int(page))
    per_page = max(1, int(limit))
    total_pages = math.ceil(total / per_page) if total else 0
    return {
        "current_page": current_page,
        "per_page": per_page,
        "total": total,
        "total_pages": total_pages,
        "has_next_page": current_page < total_pages,
        "has_prev_page": current_page > 1,
    }
