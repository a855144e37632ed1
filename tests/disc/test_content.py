import pytest
from services.disc_engine.content import (
    ContentItem,
    NARRATIVE_DESCRIPTIONS,
    OPPOSITE_DESCRIPTIONS,
    SECTION_LIMITS,
    TALENTS,
    high,
    low,
    moderate,
    select_items,
    very_high,
    very_low,
    get_report_content,
)
from services.disc_engine.definitions import ARCHETYPES_BY_ID
from services.disc_engine.models import Scores

SECTIONS = ['talents', 'environment', 'communication_do', 'communication_dont', 'motivation_keys', 'improvement_areas']


@pytest.fixture
def items():
    return [
        ContentItem('a-fr', 'a-en', lambda s: high(s.D), lambda s: 10),
        ContentItem('b-fr', 'b-en', lambda s: True, lambda s: 50),
        ContentItem('c-fr', 'c-en', lambda s: high(s.C), lambda s: 99),
        ContentItem('d-fr', 'd-en', lambda s: True, lambda s: 10),
    ]

# --- Predicates ---

@pytest.mark.parametrize("predicate, score, expected", [
    (high, 61, True), (high, 60, False),
    (very_high, 76, True), (very_high, 75, False),
    (moderate, 35, True), (moderate, 65, True), (moderate, 66, False), (moderate, 34, False),
    (low, 39, True), (low, 40, False),
    (very_low, 24, True), (very_low, 25, False),
])
def test_score_predicates(predicate, score, expected):
    assert predicate(score) is expected

# --- select_items ---

def test_select_items_filters_and_orders(items):
    """Matching items come highest priority first; equal priorities keep bank order."""
    selected = select_items(items, Scores(D=80, I=10, S=10, C=10), 'en', limit=10)
    assert selected == ['b-en', 'a-en', 'd-en']

def test_select_items_limit(items):
    assert select_items(items, Scores(D=80, I=10, S=10, C=80), 'fr', limit=2) == ['c-fr', 'b-fr']

def test_select_items_nothing_matches():
    only_high_d = [ContentItem('x', 'x', lambda s: high(s.D), lambda s: 1)]
    assert select_items(only_high_d, Scores(), 'fr', limit=5) == []

# --- get_report_content ---

def test_report_content_dominance_profile():
    content = get_report_content(Scores(D=90, I=20, S=20, C=20), 'en', 'DIRECTIF')
    assert content['talents'][:2] == [
        'Makes decisions quickly and confidently',
        'Drives projects with determination and energy',
    ]
    assert content['wheel_type_label'] == 'Directive'
    assert content['narrative'].startswith('You are a person resolutely focused on action')
    assert content['opposite']

def test_report_content_respects_section_limits():
    content = get_report_content(Scores(D=50, I=50, S=50, C=50), 'fr', 'COOPERATIF')
    for section in SECTIONS:
        assert len(content[section]) <= SECTION_LIMITS[section]

def test_universal_fallbacks_fill_talents():
    """Even a flat-zero profile gets talents from the always-matching items."""
    content = get_report_content(Scores(), 'fr', 'DIRECTIF')
    assert len(content['talents']) > 0
    assert all(isinstance(t, str) for t in content['talents'])

def test_report_content_locale_switch():
    scores = Scores(D=30, I=80, S=65, C=20)
    fr = get_report_content(scores, 'fr', 'FACILITANT')
    en = get_report_content(scores, 'en', 'FACILITANT')
    for section in SECTIONS:
        assert len(fr[section]) == len(en[section])
    assert fr['narrative'] != en['narrative']

def test_unknown_wheel_type():
    content = get_report_content(Scores(D=90), 'fr', 'INCONNU')
    assert content['narrative'] == ''
    assert content['opposite'] == ''
    assert content['wheel_type_label'] == 'INCONNU'

def test_narratives_cover_every_archetype():
    assert set(NARRATIVE_DESCRIPTIONS) == set(ARCHETYPES_BY_ID)
    assert set(OPPOSITE_DESCRIPTIONS) == set(ARCHETYPES_BY_ID)

def test_bank_items_are_bilingual():
    assert all(item.fr and item.en for item in TALENTS)
