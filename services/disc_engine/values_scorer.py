# services/disc_engine/values_scorer.py
# Scores the Spranger values questionnaire (binary paired choices).

import logging
from typing import Mapping, Sequence

from .definitions import VALUE_CATEGORIES, VALUE_CATEGORY_LABELS, VALUES_BIPOLAR_AXES
from .models import (
    BipolarIndicator,
    InvalidSubmissionError,
    ValuePair,
    ValueScore,
    ValuesResult,
)
from .scorer import bipolar, round_half_away

logger = logging.getLogger(__name__)


def calculate_spranger_scores(
    answers: Mapping[int, int],
    pairs: Sequence[ValuePair],
) -> ValuesResult:
    """
    Calculates motivation scores from paired-choice answers.

    A category's score is the share of its appearances in which it was picked.
    Categories appear in an unequal number of pairs, so every category carries
    its own denominator.

    Args:
        answers: Pair id -> 0 (first option) or 1 (second option).
        pairs: The value pairs that were administered.

    Returns:
        Six category scores, three bipolar value indicators and the ranking.

    Raises:
        InvalidSubmissionError: If an answer is neither 0 nor 1.
    """
    chosen = {category: 0 for category in VALUE_CATEGORIES}
    appeared = {category: 0 for category in VALUE_CATEGORIES}

    for pair in pairs:
        if pair.id not in answers:
            continue
        selector = answers[pair.id]
        if isinstance(selector, bool) or not isinstance(selector, int) or selector not in (0, 1):
            raise InvalidSubmissionError(f"Invalid choice '{selector}' for value pair {pair.id}. Expected 0 or 1.")
        for option in pair.options:
            appeared[option.category] += 1
        chosen[pair.options[selector].category] += 1

    scores = {
        category: round_half_away((chosen[category] / max(appeared[category], 1)) * 100)
        for category in VALUE_CATEGORIES
    }

    # Stable sort keeps enumeration order among equal scores
    ranking = tuple(
        ValueScore(
            category=category,
            score=scores[category],
            times_chosen=chosen[category],
            times_appeared=appeared[category],
        )
        for category in sorted(VALUE_CATEGORIES, key=lambda c: scores[c], reverse=True)
    )

    indicators = tuple(
        BipolarIndicator(
            id=axis['id'],
            left_label=VALUE_CATEGORY_LABELS[axis['left']],
            right_label=VALUE_CATEGORY_LABELS[axis['right']],
            value=bipolar(scores[axis['left']], scores[axis['right']]),
        )
        for axis in VALUES_BIPOLAR_AXES
    )

    logger.debug(f"Calculated value scores: {scores}")
    return ValuesResult(scores=scores, indicators=indicators, ranking=ranking)
