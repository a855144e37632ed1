import pytest
from services.disc_engine.scorer import bipolar, calculate_bipolar_indicators
from services.disc_engine.definitions import DISC_BIPOLAR_AXES
from services.disc_engine.models import Scores

AXIS_IDS = ['pace', 'orientation', 'assertion', 'method', 'tempo', 'spontaneity', 'stance', 'expression']


def _by_id(indicators):
    return {indicator.id: indicator.value for indicator in indicators}


def test_bipolar_basic():
    """Negative leans left, positive leans right."""
    assert bipolar(75, 25) == -50
    assert bipolar(25, 75) == 50
    assert bipolar(40, 40) == 0

def test_bipolar_zero_total():
    """Both poles at zero is defined as perfect balance."""
    assert bipolar(0, 0) == 0

def test_bipolar_extremes():
    assert bipolar(0, 10) == 100
    assert bipolar(10, 0) == -100

def test_eight_fixed_axes():
    indicators = calculate_bipolar_indicators(Scores(D=70, I=65, S=20, C=10))
    assert [i.id for i in indicators] == AXIS_IDS
    assert len(DISC_BIPOLAR_AXES) == 8

def test_balanced_profile_yields_all_zero():
    """All four dimensions at 50: every axis sits at 0."""
    indicators = calculate_bipolar_indicators(Scores(D=50, I=50, S=50, C=50))
    assert all(i.value == 0 for i in indicators)

def test_all_zero_scores_do_not_divide_by_zero():
    indicators = calculate_bipolar_indicators(Scores())
    assert all(i.value == 0 for i in indicators)

def test_known_values():
    """D=70, I=65, S=20, C=10 against hand-computed ratios."""
    values = _by_id(calculate_bipolar_indicators(Scores(D=70, I=65, S=20, C=10)))
    # S+C = 30 vs D+I = 135 -> 105 / 165 = 63.6
    assert values['pace'] == 64
    # D+C = 80 vs I+S = 85 -> 5 / 165 = 3.03
    assert values['orientation'] == 3
    # D = 70 vs I = 65 -> -5 / 135 = -3.7
    assert values['assertion'] == -4
    # S = 20 vs C = 10 -> -10 / 30 = -33.3
    assert values['method'] == -33
    # D + I/2 = 102.5 vs S + C/2 = 25 -> -77.5 / 127.5 = -60.8
    assert values['tempo'] == -61

def test_swapping_poles_negates_value():
    """Exchanging the two single-dimension poles flips the sign and keeps the magnitude."""
    original = _by_id(calculate_bipolar_indicators(Scores(D=70, I=35, S=20, C=90)))
    swapped = _by_id(calculate_bipolar_indicators(Scores(D=35, I=70, S=90, C=20)))
    assert swapped['assertion'] == -original['assertion']
    assert swapped['method'] == -original['method']

@pytest.mark.parametrize("scores", [
    Scores(D=100, I=0, S=0, C=0),
    Scores(D=0, I=0, S=0, C=100),
    Scores(D=33, I=77, S=12, C=91),
])
def test_values_stay_in_range(scores):
    assert all(-100 <= i.value <= 100 for i in calculate_bipolar_indicators(scores))

def test_labels_are_localized():
    indicator = calculate_bipolar_indicators(Scores(D=50, I=50, S=50, C=50))[0]
    assert indicator.left_label.fr and indicator.left_label.en
    assert indicator.right_label.get('en') == indicator.right_label.en
