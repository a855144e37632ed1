# services/disc_engine/results_generator.py
# Assembles the final report structure from a classification result and the
# optional natural scores and values result.

import logging
from typing import Optional

from .definitions import BLEND_THRESHOLD, PERCEPTION_ADJECTIVES, PERCEPTION_SLICE
from .models import (
    ClassificationResult,
    Locale,
    Perceptions,
    Report,
    Scores,
    ValuesResult,
)
from .scorer import (
    calculate_bipolar_indicators,
    calculate_deltas,
    classify_wheel,
    opposite_archetype,
    sort_dimensions,
)

logger = logging.getLogger(__name__)


def build_perceptions(result: ClassificationResult, locale: Locale) -> Perceptions:
    """
    Picks three adjectives from the dominant bank and three from the secondary
    bank, for both the self-image and the under-stress framing. A result with
    no secondary borrows the second-ranked dimension.
    """
    secondary = result.secondary
    if secondary is None:
        secondary = sort_dimensions(result.normalized_scores)[1].dimension

    self_positive = []
    others_stress = []
    for dimension in (result.dominant, secondary):
        bank = PERCEPTION_ADJECTIVES[dimension]
        self_positive.extend(adj.get(locale) for adj in bank['self_positive'][:PERCEPTION_SLICE])
        others_stress.extend(adj.get(locale) for adj in bank['others_stress'][:PERCEPTION_SLICE])

    return Perceptions(self_positive=tuple(self_positive), others_stress=tuple(others_stress))


def generate_report(
    result: ClassificationResult,
    locale: Locale = 'fr',
    natural_scores: Optional[Scores] = None,
    values_result: Optional[ValuesResult] = None,
    blend_threshold: int = BLEND_THRESHOLD,
) -> Report:
    """
    Composes every derived section of the report.

    Args:
        result: Classification of the Likert ("adapted") answers.
        locale: Language of the attached text. Numbers do not depend on it.
        natural_scores: Forced-choice scores; adds the natural-vs-adapted deltas.
        values_result: Spranger values result, attached as-is.
        blend_threshold: Maximum gap (exclusive) for a blended wheel archetype.

    Returns:
        A new, frozen Report.
    """
    scores = result.normalized_scores
    archetype = classify_wheel(scores, blend_threshold)
    opposite = opposite_archetype(archetype)

    deltas = None
    if natural_scores is not None:
        deltas = tuple(calculate_deltas(scores, natural_scores, locale))

    report = Report(
        locale=locale,
        result=result,
        wheel_type=archetype.id,
        wheel_position=archetype.position,
        wheel_label=archetype.label.get(locale),
        opposite_type=opposite.id,
        opposite_position=opposite.position,
        opposite_label=opposite.label.get(locale),
        indicators=tuple(calculate_bipolar_indicators(scores)),
        perceptions=build_perceptions(result, locale),
        sorted_dimensions=tuple(sort_dimensions(scores)),
        natural_scores=natural_scores,
        deltas=deltas,
        values=values_result,
    )
    logger.info(
        f"Generated report: wheel={archetype.id} (position {archetype.position}), "
        f"dominant={result.dominant}, secondary={result.secondary}, "
        f"natural={'yes' if natural_scores is not None else 'no'}, values={'yes' if values_result is not None else 'no'}"
    )
    return report
