"""
Attribute normalization for consumer queries and garment tag sets.

Unknown values never fail a request: an unrecognised skin tone or gender is
treated as unspecified, and an unrecognised occasion is kept verbatim as a
raw tag that can only be matched exactly.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional, Tuple

from .records import Garment, Occasion
from .vocabulary import (
    GENDER_ALIASES,
    GENDERS,
    OCCASIONS,
    SKIN_TONES,
    UNCONSTRAINED_GENDERS,
)


@dataclass(frozen=True)
class NormalizedContext:
    skin_tone: Optional[str] = None
    gender: Optional[str] = None
    occasion: Optional[str] = None
    # Unknown occasion label; exact-match filtering only
    occasion_tag: Optional[str] = None
    occasion_id: Any = None
    occasion_title: Optional[str] = None

    @property
    def has_attributes(self) -> bool:
        """True when at least one attribute can contribute to the score."""
        return bool(self.skin_tone or self.gender or self.occasion)

    @property
    def occasion_filter(self) -> Optional[str]:
        return self.occasion or self.occasion_tag


def clean(value: Any) -> Optional[str]:
    """Lower-case and trim; blank or non-string values become None."""
    if not isinstance(value, str):
        return None
    value = " ".join(value.strip().lower().split())
    return value or None


def normalize_skin_tone(raw: Any) -> Optional[str]:
    value = clean(raw)
    return value if value in SKIN_TONES else None


def normalize_gender(raw: Any) -> Optional[str]:
    value = clean(raw)
    if value is None:
        return None
    value = GENDER_ALIASES.get(value, value)
    return value if value in GENDERS else None


def canonical_occasion(raw: Any) -> Optional[str]:
    """The occasion if it is part of the vocabulary, else None."""
    value = clean(raw)
    return value if value in OCCASIONS else None


def normalize_occasion(raw: Any) -> Tuple[Optional[str], Optional[str]]:
    """Return (canonical occasion, raw tag); at most one of them is set."""
    value = clean(raw)
    if value is None:
        return None, None
    canonical = canonical_occasion(value)
    if canonical:
        return canonical, None
    return None, value


def normalize(
    raw_skin_tone: Any = None,
    raw_gender: Any = None,
    raw_occasion: Any = None,
) -> NormalizedContext:
    """Build the consumer context for an ad-hoc request."""
    occasion, occasion_tag = normalize_occasion(raw_occasion)
    return NormalizedContext(
        skin_tone=normalize_skin_tone(raw_skin_tone),
        gender=normalize_gender(raw_gender),
        occasion=occasion,
        occasion_tag=occasion_tag,
    )


def context_from_occasion(
    occasion: Occasion,
    raw_skin_tone: Any = None,
    raw_gender: Any = None,
) -> NormalizedContext:
    """Build the consumer context for a saved occasion.

    The occasion type drives scoring; when the type is unknown or "other", the
    dress code gets a chance to name a known occasion instead. A skin tone
    stored on the occasion overrides the one on the request.
    """
    occasion_label, occasion_tag = normalize_occasion(occasion.type)
    if occasion_label in (None, "other"):
        from_dress_code = canonical_occasion(occasion.dress_code)
        if from_dress_code and from_dress_code != "other":
            occasion_label, occasion_tag = from_dress_code, None

    skin_tone = normalize_skin_tone(occasion.skin_tone) or normalize_skin_tone(raw_skin_tone)
    return NormalizedContext(
        skin_tone=skin_tone,
        gender=normalize_gender(raw_gender),
        occasion=occasion_label,
        occasion_tag=occasion_tag,
        occasion_id=occasion.id,
        occasion_title=occasion.title,
    )


def normalize_skin_tone_set(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """Canonical skin tones in first-seen order; unknown values are dropped."""
    seen = []
    for value in values or ():
        tone = normalize_skin_tone(value)
        if tone and tone not in seen:
            seen.append(tone)
    return tuple(seen)


def normalize_occasion_set(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """Canonical occasions in first-seen order; unknown tags are kept verbatim."""
    seen = []
    for value in values or ():
        canonical, tag = normalize_occasion(value)
        label = canonical or tag
        if label and label not in seen:
            seen.append(label)
    return tuple(seen)


def normalize_garment(garment: Garment) -> Garment:
    """Return a copy of the garment with its attributes in the shared vocabulary."""
    gender = clean(garment.gender)
    if gender is not None:
        gender = GENDER_ALIASES.get(gender, gender)
        if gender in UNCONSTRAINED_GENDERS:
            gender = None
    return replace(
        garment,
        category=clean(garment.category) or "",
        color=clean(garment.color) or "",
        suitable_skin_tones=normalize_skin_tone_set(garment.suitable_skin_tones),
        occasion_tags=normalize_occasion_set(garment.occasion_tags),
        gender=gender,
    )
