import pytest
from services.disc_engine.values_scorer import calculate_spranger_scores
from services.disc_engine.definitions import VALUE_CATEGORIES
from services.disc_engine.models import InvalidSubmissionError, LocalizedText, ValueOption, ValuePair


def make_pair(pair_id, category_a, category_b):
    return ValuePair(
        id=pair_id,
        option_a=ValueOption(category=category_a, text=LocalizedText(fr=category_a, en=category_a)),
        option_b=ValueOption(category=category_b, text=LocalizedText(fr=category_b, en=category_b)),
    )


@pytest.fixture
def pairs():
    return [
        make_pair(1, 'cognitive', 'aesthetic'),
        make_pair(2, 'utilitarian', 'cognitive'),
        make_pair(3, 'cognitive', 'altruistic'),
        make_pair(4, 'individual', 'traditional'),
    ]

# --- Test Cases ---

def test_category_chosen_two_of_three_times(pairs):
    """Cognitive appears in three pairs and wins two of them: round(2/3 * 100) = 67."""
    result = calculate_spranger_scores({1: 0, 2: 1, 3: 1}, pairs)
    assert result.scores['cognitive'] == 67
    assert result.scores['altruistic'] == 100
    assert result.scores['aesthetic'] == 0
    assert result.scores['utilitarian'] == 0

def test_never_presented_category_scores_zero(pairs):
    """Unanswered pairs do not count as appearances."""
    result = calculate_spranger_scores({1: 0}, pairs)
    assert result.scores['individual'] == 0
    assert result.scores['traditional'] == 0
    ranking = {entry.category: entry for entry in result.ranking}
    assert ranking['individual'].times_appeared == 0
    assert ranking['cognitive'].times_appeared == 1

def test_six_scores_and_full_ranking(pairs):
    result = calculate_spranger_scores({1: 0, 2: 1, 3: 1, 4: 1}, pairs)
    assert set(result.scores) == set(VALUE_CATEGORIES)
    assert len(result.ranking) == 6
    scores = [entry.score for entry in result.ranking]
    assert scores == sorted(scores, reverse=True)

def test_ranking_ties_keep_category_order(pairs):
    """altruistic and traditional both score 100; altruistic comes first in enumeration order."""
    result = calculate_spranger_scores({1: 0, 2: 1, 3: 1, 4: 1}, pairs)
    assert [entry.category for entry in result.ranking[:2]] == ['altruistic', 'traditional']
    assert result.ranking[2].category == 'cognitive'
    # Zero scores keep enumeration order too
    assert [entry.category for entry in result.ranking[3:]] == ['aesthetic', 'utilitarian', 'individual']

def test_value_indicators(pairs):
    result = calculate_spranger_scores({1: 0, 2: 1, 3: 1, 4: 1}, pairs)
    indicators = {indicator.id: indicator.value for indicator in result.indicators}
    # cognitive 67 vs utilitarian 0
    assert indicators['knowledge-vs-return'] == -100
    # aesthetic 0 vs traditional 100
    assert indicators['harmony-vs-order'] == 100
    # individual 0 vs altruistic 100
    assert indicators['self-vs-others'] == 100
    assert len(result.indicators) == 3

def test_value_indicators_all_zero():
    result = calculate_spranger_scores({}, [])
    assert all(indicator.value == 0 for indicator in result.indicators)
    assert all(score == 0 for score in result.scores.values())

@pytest.mark.parametrize("bad_choice", [2, -1, True, "0", 1.0, 0.0])
def test_invalid_choice_rejected(pairs, bad_choice):
    with pytest.raises(InvalidSubmissionError):
        calculate_spranger_scores({1: bad_choice}, pairs)

def test_shipped_pairs_have_unequal_appearances(engine):
    """Every pair answered with the first option: appearance counts follow the bank."""
    answers = {pair_id: 0 for pair_id in engine.value_pairs}
    result = calculate_spranger_scores(answers, engine.bank.value_pairs)
    appeared = {entry.category: entry.times_appeared for entry in result.ranking}
    assert appeared['cognitive'] == 7
    assert appeared['traditional'] == 5
    assert sum(appeared.values()) == 2 * len(engine.bank.value_pairs)
