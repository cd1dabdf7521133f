"""
Categorical Point Encodings

Icon and color lookup tables keyed by canonical entity type. Types without
a fixed mapping fall into the "other" bucket.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional


@dataclass(frozen=True)
class CategoricalEncoding:
    """Fixed per-type values with a fallback for unmapped types."""
    fixed: Dict[str, str] = field(default_factory=dict)
    other: str = ""

    def lookup(self, canonical_type: Optional[str]) -> str:
        if canonical_type is None:
            return self.other
        return self.fixed.get(canonical_type) or self.other

    def encoder(
        self,
        attribute: str,
        canonical_type: Optional[Callable[[Any], Optional[str]]] = None,
    ):
        """Point encoding that writes the looked-up value onto a node.

        Template encodings run before normalization, so nodes carry only their
        raw field `type`. Pass the normalizer's `canonical_type` to look up the
        same key the summary will use; without it the raw type is looked up.
        """
        def encode(node: Dict[str, Any]) -> None:
            type_name = node.get("canonicalType")
            if type_name is None:
                raw_type = node.get("type")
                type_name = canonical_type(raw_type) if canonical_type else raw_type
            node[attribute] = self.lookup(type_name)
        encode.__name__ = f"encode_{attribute}"
        return encode


POINT_ICON_ENCODING = CategoricalEncoding(
    fixed={
        "event": "bolt",
        "alert": "exclamation-triangle",
        "ip": "laptop",
        "mac": "ethernet",
        "host": "server",
        "domain": "globe",
        "url": "link",
        "user": "user",
        "email": "envelope",
        "file": "file",
        "hash": "hashtag",
        "process": "cogs",
        "port": "plug",
        "index": "database",
        "product": "cube",
        "vendor": "building",
    },
    other="question",
)

POINT_COLOR_ENCODING = CategoricalEncoding(
    fixed={
        "event": "#1f77b4",
        "alert": "#d62728",
        "ip": "#ff7f0e",
        "mac": "#ffbb78",
        "host": "#2ca02c",
        "domain": "#98df8a",
        "url": "#17becf",
        "user": "#9467bd",
        "email": "#c5b0d5",
        "file": "#8c564b",
        "hash": "#c49c94",
        "process": "#e377c2",
        "port": "#f7b6d2",
        "index": "#7f7f7f",
        "product": "#bcbd22",
        "vendor": "#dbdb8d",
    },
    other="#aec7e8",
)
