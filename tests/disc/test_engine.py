import pytest
from services.disc_engine.config import EngineSettings
from services.disc_engine.engine import DiscEngine
from services.disc_engine.loader import SpecValidationError
from services.disc_engine.models import InvalidSubmissionError, Scores

# --- Helper Functions ---
def core_answers(engine, values_by_dimension: dict) -> dict:
    return {q.id: values_by_dimension[q.dimension] for q in engine.core_questions}

def forced_choice_answers(engine, most: str, least: str) -> dict:
    """Picks the `most` dimension's adjective as most like me and `least` as least, in every group."""
    answers = {}
    for group in engine.bank.forced_choice_groups:
        dims = [adj.dimension for adj in group.adjectives]
        answers[str(group.id)] = {'most': dims.index(most), 'least': dims.index(least)}
    return answers

# --- Test Cases ---

def test_engine_loads_default_bank(engine):
    assert len(engine.core_questions) == 24
    assert len(engine.extra_questions) == 8
    assert set(engine.likert_questions) == set(range(1, 33))

def test_engine_missing_bank(tmp_path):
    with pytest.raises(SpecValidationError):
        DiscEngine(EngineSettings(), question_bank_path=str(tmp_path / 'nope.yml'))

def test_score_core_clear_profile(engine):
    result = engine.score_core(core_answers(engine, {'D': 5, 'I': 2, 'S': 1, 'C': 2}))
    assert result.normalized_scores == Scores(D=100, I=25, S=0, C=25)
    assert result.dominant == 'D'
    assert engine.adaptive_questions(result) == []

def test_string_keys_are_accepted(engine):
    answers = {str(k): v for k, v in core_answers(engine, {'D': 3, 'I': 3, 'S': 3, 'C': 3}).items()}
    assert engine.score_core(answers).normalized_scores == Scores(D=50, I=50, S=50, C=50)

def test_non_integer_key_rejected(engine):
    with pytest.raises(InvalidSubmissionError):
        engine.score_core({'first': 3})

def test_adaptive_round(engine):
    """Close D and I scores bring in the four D/I adaptive statements."""
    answers = core_answers(engine, {'D': 4, 'I': 4, 'S': 2, 'C': 1})
    first_round = engine.score_core(answers)
    extra = engine.adaptive_questions(first_round)
    assert sorted(q.id for q in extra) == [25, 26, 27, 28]

    answers.update({25: 5, 26: 5, 27: 2, 28: 2})
    final = engine.score(answers)
    # D: (24 + 10 - 8) / 32 = 81.25 ; I: (24 + 4 - 8) / 32 = 62.5
    assert final.normalized_scores.D == 81
    assert final.normalized_scores.I == 63
    assert final.dominant == 'D'
    assert final.secondary is None

def test_score_ignores_unasked_adaptive_questions(engine):
    answers = core_answers(engine, {'D': 3, 'I': 3, 'S': 3, 'C': 3})
    assert engine.score(answers) == engine.score_core(answers)

def test_natural_scores(engine):
    natural = engine.natural_scores(forced_choice_answers(engine, most='S', least='D'))
    assert natural == Scores(D=0, I=50, S=100, C=50)

def test_values(engine):
    answers = {str(pair_id): 1 for pair_id in engine.value_pairs}
    result = engine.values(answers)
    assert len(result.ranking) == 6
    assert all(0 <= score <= 100 for score in result.scores.values())

def test_report_uses_settings(engine):
    result = engine.score_core(core_answers(engine, {'D': 4, 'I': 4, 'S': 1, 'C': 1}))
    report = engine.report(result)
    assert report.locale == 'fr'
    assert report.wheel_type == 'PROMOUVANT'

def test_custom_settings_change_thresholds():
    settings = EngineSettings(secondary_threshold=30, blend_threshold=5, default_locale='en')
    engine = DiscEngine(settings)
    answers = {q.id: {'D': 5, 'I': 4, 'S': 1, 'C': 1}[q.dimension] for q in engine.core_questions}
    result = engine.score_core(answers)
    assert result.secondary == 'I'  # gap 25 < 30
    report = engine.report(result)
    assert report.locale == 'en'
    assert report.wheel_type == 'DIRECTIF'  # gap 25 >= 5

def test_assess_full_submission(engine):
    submission = {
        'likert': {str(k): v for k, v in core_answers(engine, {'D': 2, 'I': 3, 'S': 5, 'C': 5}).items()},
        'forced_choice': forced_choice_answers(engine, most='S', least='I'),
        'values': {str(pair_id): 0 for pair_id in engine.value_pairs},
    }
    report = engine.assess(submission, locale='en')
    assert report.result.dominant == 'S'
    assert report.wheel_type == 'COORDONNANT'
    assert report.natural_scores.S == 100
    assert len(report.deltas) == 4
    assert report.values is not None

def test_assess_requires_likert(engine):
    with pytest.raises(InvalidSubmissionError):
        engine.assess({'values': {}})

def test_content_for_report(engine):
    result = engine.score_core(core_answers(engine, {'D': 5, 'I': 1, 'S': 1, 'C': 1}))
    content = engine.content(engine.report(result, locale='en'))
    assert content['wheel_type_label'] == 'Directive'
    assert content['talents']

@pytest.mark.parametrize("section", ['likert', 'forced_choice', 'values'])
def test_answer_section_must_be_a_mapping(engine, section):
    """A list where an id-keyed object is expected is rejected as an invalid submission."""
    submission = {'likert': {'1': 4}}
    submission[section] = [4, 4]
    with pytest.raises(InvalidSubmissionError, match="object keyed by id"):
        engine.assess(submission)

def test_submission_must_be_a_mapping(engine):
    with pytest.raises(InvalidSubmissionError):
        engine.assess([{'likert': {'1': 4}}])

def test_unknown_forced_choice_groups_skip_natural_scores(engine):
    """Answers naming no group of the bank leave the report without natural scores or deltas."""
    assert engine.natural_scores({'999': {'most': 0, 'least': 1}}) is None
    report = engine.assess({
        'likert': {'1': 4},
        'forced_choice': {'999': {'most': 0, 'least': 1}},
    })
    assert report.natural_scores is None
    assert report.deltas is None
