"""
Fixed vocabularies shared by the normalizer, the filter and the scorer.
"""
from __future__ import annotations

from typing import Dict, Tuple

SKIN_TONES: Tuple[str, ...] = ("fair", "light", "medium", "tan", "deep", "dark")

# Anything else is a raw tag: matched exactly, never scored
OCCASIONS: Tuple[str, ...] = (
    "casual", "formal", "business", "party", "wedding", "sports", "beach", "other",
)

GENDERS: Tuple[str, ...] = ("male", "female", "unisex")

# Garment gender values that place no constraint on the consumer
UNCONSTRAINED_GENDERS = {"unisex"}

VISIBILITY_PUBLIC = "public"

GENDER_ALIASES: Dict[str, str] = {
    "man": "male",
    "men": "male",
    "m": "male",
    "woman": "female",
    "women": "female",
    "f": "female",
}
