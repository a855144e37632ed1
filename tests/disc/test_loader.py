import copy

import pytest
import yaml
from pathlib import Path
from pydantic import ValidationError

from services.disc_engine.loader import (
    SpecValidationError,
    load_question_bank_data,
    load_question_bank_from_file,
)
from services.disc_engine.models import QuestionBank

QUESTION_BANK_PATH = "assets/disc_questions.yml"

# Helper function to create temporary YAML files for testing
def create_temp_yaml(tmp_path: Path, filename: str, content) -> str:
    """Creates a temporary YAML file in the specified path."""
    filepath = tmp_path / filename
    with open(filepath, 'w', encoding='utf-8') as f:
        yaml.dump(content, f, allow_unicode=True)
    return str(filepath)

def _text(label: str) -> dict:
    return {'fr': label, 'en': label}

# --- Fixtures ---

@pytest.fixture
def minimal_bank():
    """A minimal but structurally valid question bank dictionary."""
    return {
        'version': '0.1.0',
        'released_at': '2024-01-01',
        'likert_questions': [
            {'id': i + 1, 'dimension': dim, 'text': _text(f'q{i + 1}')}
            for i, dim in enumerate('DISC')
        ],
        'forced_choice_groups': [
            {'id': 1, 'adjectives': [{'dimension': dim, 'text': _text(dim)} for dim in 'DISC']},
        ],
        'value_pairs': [
            {'id': 1, 'option_a': {'category': 'cognitive', 'text': _text('a')},
             'option_b': {'category': 'aesthetic', 'text': _text('b')}},
        ],
    }

# --- Test Cases ---

def test_load_minimal_bank(minimal_bank):
    bank = load_question_bank_data(minimal_bank)
    assert isinstance(bank, QuestionBank)
    assert len(bank.core_questions) == 4
    assert bank.extra_questions == []

def test_duplicate_question_id(minimal_bank):
    minimal_bank['likert_questions'][1]['id'] = 1
    with pytest.raises(SpecValidationError, match="Duplicate Likert question ID"):
        load_question_bank_data(minimal_bank)

def test_missing_core_dimension(minimal_bank):
    """A dimension covered only by adaptive questions is rejected."""
    minimal_bank['likert_questions'][3]['adaptive'] = True
    with pytest.raises(SpecValidationError, match="dimension"):
        load_question_bank_data(minimal_bank)

def test_duplicate_group_id(minimal_bank):
    minimal_bank['forced_choice_groups'].append(copy.deepcopy(minimal_bank['forced_choice_groups'][0]))
    with pytest.raises(SpecValidationError, match="Duplicate forced-choice group ID"):
        load_question_bank_data(minimal_bank)

def test_group_needs_one_adjective_per_dimension(minimal_bank):
    minimal_bank['forced_choice_groups'][0]['adjectives'][3]['dimension'] = 'D'
    with pytest.raises(SpecValidationError, match="one adjective per dimension"):
        load_question_bank_data(minimal_bank)

def test_group_with_three_adjectives_fails_schema(minimal_bank):
    minimal_bank['forced_choice_groups'][0]['adjectives'].pop()
    with pytest.raises(ValidationError):
        load_question_bank_data(minimal_bank)

def test_duplicate_pair_id(minimal_bank):
    minimal_bank['value_pairs'].append(copy.deepcopy(minimal_bank['value_pairs'][0]))
    with pytest.raises(SpecValidationError, match="Duplicate value pair ID"):
        load_question_bank_data(minimal_bank)

def test_pair_with_same_category(minimal_bank):
    minimal_bank['value_pairs'][0]['option_b']['category'] = 'cognitive'
    with pytest.raises(SpecValidationError):
        load_question_bank_data(minimal_bank)

def test_unknown_dimension_fails_schema(minimal_bank):
    minimal_bank['likert_questions'][0]['dimension'] = 'X'
    with pytest.raises(ValidationError):
        load_question_bank_data(minimal_bank)

def test_unknown_value_category_fails_schema(minimal_bank):
    minimal_bank['value_pairs'][0]['option_a']['category'] = 'spiritual'
    with pytest.raises(ValidationError):
        load_question_bank_data(minimal_bank)

# File loading
def test_load_from_file(tmp_path, minimal_bank):
    path = create_temp_yaml(tmp_path, 'bank.yml', minimal_bank)
    assert load_question_bank_from_file(path).version == '0.1.0'

def test_load_missing_file(tmp_path):
    with pytest.raises(SpecValidationError, match="File not found"):
        load_question_bank_from_file(str(tmp_path / 'missing.yml'))

def test_load_invalid_yaml(tmp_path):
    path = tmp_path / 'broken.yml'
    path.write_text("version: [unclosed", encoding='utf-8')
    with pytest.raises(SpecValidationError, match="Error parsing YAML"):
        load_question_bank_from_file(str(path))

def test_load_empty_file(tmp_path):
    path = tmp_path / 'empty.yml'
    path.write_text("", encoding='utf-8')
    with pytest.raises(SpecValidationError, match="empty"):
        load_question_bank_from_file(str(path))

# Shipped bank
def test_shipped_question_bank():
    """24 core and 8 adaptive statements, ids 1-32, two adaptive per dimension."""
    bank = load_question_bank_from_file(QUESTION_BANK_PATH)
    assert len(bank.core_questions) == 24
    assert len(bank.extra_questions) == 8
    assert sorted(q.id for q in bank.likert_questions) == list(range(1, 33))
    for dim in 'DISC':
        assert len([q for q in bank.core_questions if q.dimension == dim]) == 6
        assert len([q for q in bank.extra_questions if q.dimension == dim]) == 2
    assert len(bank.forced_choice_groups) == 10
    assert len(bank.value_pairs) == 18
