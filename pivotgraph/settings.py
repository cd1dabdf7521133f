"""
Pivot Shaping Settings

Environment-driven defaults for the shaping pipeline. Callers that need
different values per pivot build a ShapeContext directly instead.
"""

from __future__ import annotations

import os
from typing import List

DEFAULT_PROPAGATED_LABELS = ["index", "product", "vendor", "searchLink"]


def _bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _list_env(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


EVENT_ID_FIELD = os.getenv("PIVOT_EVENT_ID_FIELD", "EventID")
PROPAGATED_LABELS = _list_env("PIVOT_PROPAGATED_LABELS", DEFAULT_PROPAGATED_LABELS)
INFERENCE_ENABLED = _bool_env("PIVOT_INFERENCE_ENABLED", True)

# Wildcard token in a pivot's connections list
STAR = "*"
