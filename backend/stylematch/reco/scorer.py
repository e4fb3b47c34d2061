"""
Match scoring and ranking for suggestion candidates.

Each attribute present in the consumer context adds points when the garment
accepts it. A garment whose tags explicitly rule out the consumer's skin tone
or occasion is excluded rather than ranked low.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple

from .normalizer import NormalizedContext
from .records import Garment

WEIGHTS = {
    "skin_tone": 3,
    "occasion": 2,
    "gender": 1,
}

REASON_SEPARATOR = " • "
DEFAULT_FALLBACK_REASON = "Popular pick"


class Match(NamedTuple):
    score: int
    # Attributes matched by an explicit tag rather than an empty "any" set
    exact: int
    fragments: List[str]


@dataclass(frozen=True)
class ScoredGarment:
    garment: Garment
    score: int
    match_reason: str
    exact: int = 0


def score_garment(garment: Garment, context: NormalizedContext) -> Optional[Match]:
    """
    Score one candidate against the context.

    Returns:
        Match(score, exact, fragments), or None when the garment is excluded
    """
    score = 0
    exact = 0
    fragments: List[str] = []

    if context.skin_tone:
        if not garment.suitable_skin_tones:
            fragments.append("Universally flattering")
        elif context.skin_tone in garment.suitable_skin_tones:
            fragments.append(f"Suits your {context.skin_tone} skin tone")
            exact += 1
        else:
            return None
        score += WEIGHTS["skin_tone"]

    if context.occasion:
        if garment.occasion_tags and context.occasion not in garment.occasion_tags:
            return None
        if garment.occasion_tags:
            exact += 1
        score += WEIGHTS["occasion"]
        fragments.append(f"Great for {context.occasion} occasions")

    # Gender only affects ranking; it is never shown as a reason
    if context.gender and (not garment.gender or garment.gender == context.gender):
        score += WEIGHTS["gender"]

    if context.has_attributes and score == 0:
        return None
    return Match(score, exact, fragments)


def build_match_reason(fragments: List[str], fallback: str = DEFAULT_FALLBACK_REASON) -> str:
    reason = REASON_SEPARATOR.join(f for f in fragments if f)
    return reason or fallback or DEFAULT_FALLBACK_REASON


def _listed_at(value: Any) -> datetime:
    """Comparable listing time: naive UTC, undated garments last."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.min


def _id_key(value: Any) -> Tuple[int, Any]:
    # Numeric ids sort numerically and ahead of string ids
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return 0, value
    return 1, str(value)


def rank(scored: Iterable[ScoredGarment]) -> List[ScoredGarment]:
    """Order by score desc, exact matches desc, newest first, then id asc."""
    ordered = sorted(scored, key=lambda s: _id_key(s.garment.id))
    # Stable sort keeps the id order among otherwise equal entries
    ordered.sort(key=lambda s: (s.score, s.exact, _listed_at(s.garment.created_at)), reverse=True)
    return ordered


def score_candidates(
    candidates: Iterable[Garment],
    context: NormalizedContext,
    fallback_reason: str = DEFAULT_FALLBACK_REASON,
) -> List[ScoredGarment]:
    """Score, drop excluded garments and rank what remains."""
    scored = []
    for garment in candidates:
        match = score_garment(garment, context)
        if match is None:
            continue
        scored.append(ScoredGarment(
            garment=garment,
            score=match.score,
            match_reason=build_match_reason(match.fragments, fallback_reason),
            exact=match.exact,
        ))
    return rank(scored)
