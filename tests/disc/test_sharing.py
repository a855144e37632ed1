import base64

import pytest
from services.disc_engine.sharing import (
    TeamMember,
    average_scores,
    decode_results,
    decode_team,
    encode_results,
    encode_team,
    result_from_share,
    team_report,
)
from services.disc_engine.results_generator import generate_report
from services.disc_engine.scorer import result_from_scores
from services.disc_engine.models import InvalidShareDataError, Scores


def _b64(text: str) -> str:
    return base64.b64encode(text.encode('ascii')).decode('ascii')

# --- Share codes ---

def test_encode_results_format():
    assert encode_results(Scores(D=75, I=25, S=25, C=25)) == _b64('75-25-25-25')

@pytest.mark.parametrize("scores", [
    Scores(D=0, I=0, S=0, C=0),
    Scores(D=100, I=100, S=100, C=100),
    Scores(D=70, I=65, S=20, C=10),
    Scores(D=3, I=97, S=50, C=1),
])
def test_share_code_reconstructs_same_report(scores):
    """Decoding a code gives back the scores, and the same classification and report."""
    code = encode_results(scores)
    assert decode_results(code) == scores
    original = result_from_scores(scores)
    restored = result_from_share(code)
    assert restored == original
    assert generate_report(restored, 'fr') == generate_report(original, 'fr')

@pytest.mark.parametrize("payload", [
    '75-25-25',          # three parts
    '75-25-25-25-10',    # five parts
    '75-abc-25-25',      # not a number
    '75--25-25',         # empty part
    '101-25-25-25',      # above range
    '75-2.5-25-25',      # not an integer
])
def test_decode_rejects_malformed_payload(payload):
    with pytest.raises(InvalidShareDataError):
        decode_results(_b64(payload))

def test_decode_rejects_negative_value():
    with pytest.raises(InvalidShareDataError):
        decode_results(_b64('-5-25-25-25'))

def test_decode_rejects_non_base64():
    with pytest.raises(InvalidShareDataError):
        decode_results('not base64 at all!')

def test_decode_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode_results(_b64('x'))

# --- Team codes and aggregation ---

@pytest.fixture
def members():
    return [
        TeamMember(name='Alice', scores=Scores(D=80, I=40, S=20, C=30)),
        TeamMember(name='Bruno', scores=Scores(D=60, I=70, S=35, C=20)),
        TeamMember(name='Chloé', scores=Scores(D=25, I=55, S=80, C=60)),
    ]

def test_team_code_round_trip(members):
    code = encode_team(members)
    assert decode_team(code) == members

def test_decode_team_rejects_stray_characters(members):
    """Characters outside the URL-safe alphabet are an error, not silently dropped."""
    code = encode_team(members)
    with pytest.raises(InvalidShareDataError):
        decode_team(code[:8] + "!" + code[8:])

def test_team_code_is_url_safe(members):
    code = encode_team(members)
    assert '+' not in code and '/' not in code

@pytest.mark.parametrize("raw", [
    b'{"n": "x"}',                      # not a list
    b'[{"n": "x", "s": [1, 2, 3]}]',    # three scores
    b'[{"n": "x", "s": [1, 2, 3, 200]}]',
    b'[{"n": "x", "s": [1, 2, 3, "4"]}]',
    b'not json',
])
def test_decode_team_rejects_malformed_code(raw):
    with pytest.raises(InvalidShareDataError):
        decode_team(base64.urlsafe_b64encode(raw).decode('ascii'))

def test_average_scores(members):
    """Means: D 55, I 55, S 45, C 36.67 -> 37."""
    assert average_scores(members) == Scores(D=55, I=55, S=45, C=37)

def test_average_scores_half_rounds_up():
    team = [
        TeamMember(name='a', scores=Scores(D=10, I=0, S=0, C=0)),
        TeamMember(name='b', scores=Scores(D=15, I=0, S=0, C=0)),
    ]
    assert average_scores(team).D == 13

def test_average_scores_empty_team():
    assert average_scores([]) is None
    assert team_report([]) is None

def test_team_report(members):
    result = team_report(members)
    assert result.dominant == 'D'
    assert result.secondary == 'I'
