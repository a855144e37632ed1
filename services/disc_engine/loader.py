import yaml
from pydantic import ValidationError
from typing import Dict, Any

from services.disc_engine.definitions import DIMENSIONS
from services.disc_engine.models import QuestionBank

class SpecValidationError(ValueError):
    """Custom exception for question bank validation errors not covered by Pydantic."""
    pass

def load_question_bank_data(data: Dict[str, Any]) -> QuestionBank:
    """
    Validates the raw dictionary data against the QuestionBank model
    and performs additional custom validations.
    """
    try:
        bank = QuestionBank.model_validate(data)
    except ValidationError as e:
        # Schema issues surface as Pydantic's own error
        raise e

    question_ids = set()
    for question in bank.likert_questions:
        if question.id in question_ids:
            raise SpecValidationError(f"Duplicate Likert question ID found: {question.id}")
        question_ids.add(question.id)

    # Every dimension needs at least one core question, otherwise its score is meaningless
    core_dimensions = {q.dimension for q in bank.core_questions}
    missing = [dim for dim in DIMENSIONS if dim not in core_dimensions]
    if missing:
        raise SpecValidationError(f"No core Likert question for dimension(s): {', '.join(missing)}")

    group_ids = set()
    for group in bank.forced_choice_groups:
        if group.id in group_ids:
            raise SpecValidationError(f"Duplicate forced-choice group ID found: {group.id}")
        group_ids.add(group.id)

        group_dimensions = sorted(adj.dimension for adj in group.adjectives)
        if group_dimensions != sorted(DIMENSIONS):
            raise SpecValidationError(
                f"Forced-choice group '{group.id}' must hold one adjective per dimension, got {group_dimensions}"
            )

    pair_ids = set()
    for pair in bank.value_pairs:
        if pair.id in pair_ids:
            raise SpecValidationError(f"Duplicate value pair ID found: {pair.id}")
        pair_ids.add(pair.id)

        if pair.option_a.category == pair.option_b.category:
            raise SpecValidationError(f"Value pair '{pair.id}' opposes category '{pair.option_a.category}' to itself")

    return bank

def load_question_bank_from_file(file_path: str) -> QuestionBank:
    """
    Loads a question bank from a YAML file, validates it,
    and returns a QuestionBank object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SpecValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise SpecValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise SpecValidationError(f"YAML file is empty or invalid: {file_path}")

    return load_question_bank_data(data)
