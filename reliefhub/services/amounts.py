# reliefhub/services/amounts.py
import math
from typing import Any, Optional


def positive_number(value: Any) -> Optional[float]:
    """Return ``value`` if it is a finite JSON number above zero, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def as_amount(value: Any) -> float:
    """Stored accumulators that are missing or non-numeric count as zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value
