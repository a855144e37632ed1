# services/disc_engine/scorer.py
# Scoring and classification for the DISC assessment: Likert normalization,
# dominant/secondary resolution, wheel mapping, bipolar indicators and the
# natural-vs-adapted comparison.

import logging
import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .definitions import (
    DIMENSIONS,
    SECONDARY_THRESHOLD,
    ADAPTIVE_THRESHOLD,
    BLEND_THRESHOLD,
    LIKERT_MIN,
    LIKERT_MAX,
    WHEEL_ARCHETYPES,
    WHEEL_SIZE,
    ARCHETYPES_BY_POSITION,
    DISC_BIPOLAR_AXES,
    DELTA_LEVELS,
    DELTA_DEAD_ZONE,
    DELTA_TEXTS,
    DELTA_STABLE_TEXT,
)
from .models import (
    BipolarIndicator,
    ClassificationResult,
    DeltaInterpretation,
    DimensionScore,
    ForcedChoiceAnswer,
    ForcedChoiceGroup,
    InvalidSubmissionError,
    LikertQuestion,
    Locale,
    Scores,
    WheelArchetype,
)

logger = logging.getLogger(__name__)

# --- Helpers ---

def round_half_away(value: float) -> int:
    """Rounds to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded if value >= 0 else -rounded)

def sort_dimensions(scores: Scores) -> List[DimensionScore]:
    """Dimensions by descending score. Python's sort is stable, so ties keep D > I > S > C."""
    ranked = sorted(DIMENSIONS, key=lambda dim: scores.get(dim), reverse=True)
    return [DimensionScore(dimension=dim, score=scores.get(dim)) for dim in ranked]

# --- Dimension Scores ---

def calculate_scores(
    answers: Mapping[int, int],
    questions: Sequence[LikertQuestion],
    secondary_threshold: int = SECONDARY_THRESHOLD,
) -> ClassificationResult:
    """
    Aggregates Likert answers into raw and normalized dimension scores.

    Args:
        answers: Question id -> Likert value (1-5).
        questions: The questions actually administered. Core and adaptive sets
            can be mixed freely, each dimension is normalized by its own count.
        secondary_threshold: Maximum gap (exclusive) for reporting a secondary dimension.

    Returns:
        The classification result for the answer set.

    Raises:
        InvalidSubmissionError: If an answered value is outside 1-5.
    """
    raw = {dim: 0 for dim in DIMENSIONS}
    counts = {dim: 0 for dim in DIMENSIONS}

    for question in questions:
        if question.id not in answers:
            continue
        value = answers[question.id]
        if isinstance(value, bool) or not isinstance(value, int) or not LIKERT_MIN <= value <= LIKERT_MAX:
            raise InvalidSubmissionError(
                f"Invalid Likert value '{value}' for question {question.id}. Expected {LIKERT_MIN}-{LIKERT_MAX}."
            )
        raw[question.dimension] += value
        counts[question.dimension] += 1

    normalized = {}
    for dim in DIMENSIONS:
        count = counts[dim]
        if count == 0:
            logger.debug(f"No answers for dimension {dim}, normalized score defaults to 0")
            normalized[dim] = 0
            continue
        normalized[dim] = round_half_away(((raw[dim] - count) / (count * 4)) * 100)

    raw_scores = Scores(**raw)
    normalized_scores = Scores(**normalized)
    dominant, secondary = resolve_classification(normalized_scores, secondary_threshold)

    logger.debug(f"Calculated DISC scores: raw={raw}, normalized={normalized}, counts={counts}")
    return ClassificationResult(
        raw_scores=raw_scores,
        normalized_scores=normalized_scores,
        dominant=dominant,
        secondary=secondary,
    )

# --- Classification ---

def resolve_classification(
    scores: Scores,
    secondary_threshold: int = SECONDARY_THRESHOLD,
) -> Tuple[str, Optional[str]]:
    """Returns (dominant, secondary); secondary is None when the gap reaches the threshold."""
    ranked = sort_dimensions(scores)
    top, runner_up = ranked[0], ranked[1]
    secondary = runner_up.dimension if (top.score - runner_up.score) < secondary_threshold else None
    return top.dimension, secondary

def result_from_scores(
    scores: Scores,
    secondary_threshold: int = SECONDARY_THRESHOLD,
) -> ClassificationResult:
    """Rebuilds a classification from an already normalized score set (e.g. a share code)."""
    dominant, secondary = resolve_classification(scores, secondary_threshold)
    return ClassificationResult(
        raw_scores=scores,
        normalized_scores=scores,
        dominant=dominant,
        secondary=secondary,
    )

def needs_adaptive(
    scores: Scores,
    threshold: int = ADAPTIVE_THRESHOLD,
) -> Optional[Tuple[str, str]]:
    """Returns the two leading dimensions when they are too close to call, else None."""
    ranked = sort_dimensions(scores)
    if ranked[0].score - ranked[1].score < threshold:
        return ranked[0].dimension, ranked[1].dimension
    return None

def _pure_archetype(dimension: str) -> WheelArchetype:
    for archetype in WHEEL_ARCHETYPES:
        if archetype.primary == dimension and archetype.secondary is None:
            return archetype
    # The table holds one pure entry per dimension; keep a defined answer regardless
    logger.warning(f"No pure archetype for dimension {dimension}, using first matching primary")
    return next(a for a in WHEEL_ARCHETYPES if a.primary == dimension)

def classify_wheel(
    scores: Scores,
    blend_threshold: int = BLEND_THRESHOLD,
) -> WheelArchetype:
    """
    Maps scores onto one of the eight wheel archetypes.

    When the two leading dimensions are within the blend threshold, the first
    blended archetype built on that pair (in either order) wins. Otherwise, or
    when the pair has no blend (D+S, I+C), the dominant's pure archetype is used.
    """
    ranked = sort_dimensions(scores)
    dominant, candidate = ranked[0], ranked[1]

    if dominant.score - candidate.score < blend_threshold:
        pair = {dominant.dimension, candidate.dimension}
        for archetype in WHEEL_ARCHETYPES:
            if archetype.is_blend and {archetype.primary, archetype.secondary} == pair:
                return archetype
        logger.debug(f"No blended archetype for {dominant.dimension}+{candidate.dimension}, using pure type")

    return _pure_archetype(dominant.dimension)

def opposite_position(position: int) -> int:
    """Diametrically opposite wheel position (always 4 apart modulo 8)."""
    return ((position - 1 + WHEEL_SIZE // 2) % WHEEL_SIZE) + 1

def opposite_archetype(archetype: WheelArchetype) -> WheelArchetype:
    return ARCHETYPES_BY_POSITION[opposite_position(archetype.position)]

# --- Bipolar Indicators ---

def bipolar(left: float, right: float) -> int:
    """Signed ratio in [-100, 100]: negative leans left, positive leans right. 0 when both are 0."""
    total = left + right
    if total == 0:
        return 0
    return round_half_away(((right - left) / total) * 100)

def _weighted_sum(base: Mapping[str, float], weights: Mapping[str, float]) -> float:
    return sum(base[key] * weight for key, weight in weights.items())

def calculate_bipolar_indicators(scores: Scores) -> List[BipolarIndicator]:
    """Computes the eight fixed DISC axes."""
    base = scores.as_dict()
    indicators = []
    for axis in DISC_BIPOLAR_AXES:
        left = _weighted_sum(base, axis['left'])
        right = _weighted_sum(base, axis['right'])
        indicators.append(BipolarIndicator(
            id=axis['id'],
            left_label=axis['left_label'],
            right_label=axis['right_label'],
            value=bipolar(left, right),
        ))
    return indicators

# --- Natural vs Adapted ---

def calculate_natural_scores(
    answers: Mapping[int, ForcedChoiceAnswer],
    groups: Sequence[ForcedChoiceGroup],
) -> Scores:
    """
    Derives "natural" scores from most/least-like-me picks.

    Each dimension maps (most - least) from [-total, +total] onto [0, 100],
    where total is the number of answered groups.

    Raises:
        InvalidSubmissionError: If a pick points outside the group's adjectives.
    """
    most_counts = {dim: 0 for dim in DIMENSIONS}
    least_counts = {dim: 0 for dim in DIMENSIONS}
    total = 0

    for group in groups:
        answer = answers.get(group.id)
        if answer is None:
            continue
        if isinstance(answer, dict):
            answer = ForcedChoiceAnswer.model_validate(answer)
        size = len(group.adjectives)
        if answer.most >= size or answer.least >= size:
            raise InvalidSubmissionError(
                f"Invalid pick for group {group.id}: most={answer.most}, least={answer.least}, group has {size} adjectives."
            )
        most_counts[group.adjectives[answer.most].dimension] += 1
        least_counts[group.adjectives[answer.least].dimension] += 1
        total += 1

    if total == 0:
        logger.debug("No forced-choice groups answered, natural scores default to 0")
        return Scores()

    natural = {
        dim: round_half_away(((most_counts[dim] - least_counts[dim] + total) / (total * 2)) * 100)
        for dim in DIMENSIONS
    }
    logger.debug(f"Calculated natural scores over {total} groups: {natural}")
    return Scores(**natural)

def delta_level(delta: int) -> str:
    magnitude = abs(delta)
    for bound, level in DELTA_LEVELS:
        if magnitude > bound:
            return level
    return 'low'

def delta_direction(delta: int) -> str:
    if delta > DELTA_DEAD_ZONE:
        return 'increase'
    if delta < -DELTA_DEAD_ZONE:
        return 'decrease'
    return 'stable'

def calculate_deltas(
    adapted: Scores,
    natural: Scores,
    locale: Locale = 'fr',
) -> List[DeltaInterpretation]:
    """Per-dimension adapted - natural gap with its severity, direction and interpretation."""
    interpretations = []
    for dim in DIMENSIONS:
        delta = adapted.get(dim) - natural.get(dim)
        direction = delta_direction(delta)
        text = DELTA_TEXTS.get((dim, direction), DELTA_STABLE_TEXT)
        interpretations.append(DeltaInterpretation(
            dimension=dim,
            adapted=adapted.get(dim),
            natural=natural.get(dim),
            delta=delta,
            level=delta_level(delta),
            direction=direction,
            text=text.get(locale),
        ))
    return interpretations
