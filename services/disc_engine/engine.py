import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .config import EngineSettings
from .content import get_report_content
from .loader import load_question_bank_from_file
from .models import (
    ClassificationResult,
    ForcedChoiceAnswer,
    InvalidSubmissionError,
    LikertQuestion,
    Locale,
    Report,
    Scores,
    ValuesResult,
)
from .results_generator import generate_report
from .scorer import calculate_natural_scores, calculate_scores, needs_adaptive
from .values_scorer import calculate_spranger_scores

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _int_keys(answers: Mapping[Any, Any], section: str) -> Dict[int, Any]:
    """JSON objects only have string keys; answer maps are keyed by integer ids."""
    if not isinstance(answers, Mapping):
        raise InvalidSubmissionError(f"'{section}' answers must be an object keyed by id")
    converted = {}
    for key, value in answers.items():
        try:
            converted[int(key)] = value
        except (TypeError, ValueError):
            raise InvalidSubmissionError(f"Invalid {section} id '{key}'. Expected an integer.")
    return converted


class DiscEngine:
    """
    Handles loading the question bank and running the assessment flow:
    core Likert scoring, the optional adaptive round, the forced-choice and
    values questionnaires, and report assembly.
    """
    def __init__(self, settings: Optional[EngineSettings] = None, question_bank_path: Optional[str] = None):
        """
        Initializes the engine by loading and validating the question bank.

        Args:
            settings: Engine settings; read from the environment when omitted.
            question_bank_path: Overrides settings.question_bank_path. Relative
                paths that do not exist from the working directory are looked
                up from the project root.
        """
        self.settings = settings or EngineSettings()
        path = Path(question_bank_path or self.settings.question_bank_path)
        if not path.is_absolute() and not path.is_file():
            path = PROJECT_ROOT / path
        self.question_bank_path = path

        self.bank = load_question_bank_from_file(str(path))
        self._build_lookup_maps()
        logger.info(
            f"Loaded question bank version {self.bank.version} from {path}: "
            f"{len(self.core_questions)} core, {len(self.extra_questions)} adaptive, "
            f"{len(self.bank.forced_choice_groups)} forced-choice groups, {len(self.bank.value_pairs)} value pairs"
        )

    def _build_lookup_maps(self):
        """Builds dictionaries for quick lookup of questions, groups and pairs."""
        self.likert_questions = {q.id: q for q in self.bank.likert_questions}
        self.core_questions = self.bank.core_questions
        self.extra_questions = self.bank.extra_questions
        self.forced_choice_groups = {g.id: g for g in self.bank.forced_choice_groups}
        self.value_pairs = {p.id: p for p in self.bank.value_pairs}

    def score_core(self, answers: Mapping[Any, int]) -> ClassificationResult:
        """Scores the core questions only (the first round)."""
        return calculate_scores(
            _int_keys(answers, 'question'),
            self.core_questions,
            secondary_threshold=self.settings.secondary_threshold,
        )

    def adaptive_questions(self, result: ClassificationResult) -> List[LikertQuestion]:
        """
        Extra questions to administer after the first round: those of the two
        leading dimensions when their scores are too close, else none.
        """
        close = needs_adaptive(result.normalized_scores, self.settings.adaptive_threshold)
        if close is None:
            return []
        logger.info(f"Top dimensions {close[0]} and {close[1]} are within {self.settings.adaptive_threshold} points, adding adaptive questions")
        return [q for q in self.extra_questions if q.dimension in close]

    def score(self, answers: Mapping[Any, int]) -> ClassificationResult:
        """Scores every answered Likert question, core and adaptive alike."""
        return calculate_scores(
            _int_keys(answers, 'question'),
            self.bank.likert_questions,
            secondary_threshold=self.settings.secondary_threshold,
        )

    def natural_scores(self, answers: Mapping[Any, Any]) -> Optional[Scores]:
        """Natural scores, or None when no answer names a group of the bank."""
        converted = {
            group_id: answer if isinstance(answer, ForcedChoiceAnswer) else ForcedChoiceAnswer.model_validate(answer)
            for group_id, answer in _int_keys(answers, 'group').items()
        }
        if not any(group_id in self.forced_choice_groups for group_id in converted):
            logger.warning("No forced-choice answer matches a known group, natural scores skipped")
            return None
        return calculate_natural_scores(converted, self.bank.forced_choice_groups)

    def values(self, answers: Mapping[Any, int]) -> ValuesResult:
        return calculate_spranger_scores(_int_keys(answers, 'value pair'), self.bank.value_pairs)

    def report(
        self,
        result: ClassificationResult,
        locale: Optional[Locale] = None,
        natural_scores: Optional[Scores] = None,
        values_result: Optional[ValuesResult] = None,
    ) -> Report:
        return generate_report(
            result,
            locale=locale or self.settings.default_locale,
            natural_scores=natural_scores,
            values_result=values_result,
            blend_threshold=self.settings.blend_threshold,
        )

    def content(self, report: Report) -> Dict[str, Any]:
        """Narrative sections matching a report's scores and wheel type."""
        return get_report_content(report.result.normalized_scores, report.locale, report.wheel_type)

    def assess(self, submission: Mapping[str, Any], locale: Optional[Locale] = None) -> Report:
        """
        Runs the whole flow on a complete submission.

        Args:
            submission: {"likert": {id: 1-5}, "forced_choice": {id: {"most": i, "least": j}},
                "values": {id: 0|1}}. Only "likert" is required.
            locale: Report language; defaults to the configured locale.
        """
        if not isinstance(submission, Mapping):
            raise InvalidSubmissionError("Submission must be an object with a 'likert' section")
        if 'likert' not in submission:
            raise InvalidSubmissionError("Submission has no 'likert' answers")

        result = self.score(submission['likert'])
        natural = None
        if submission.get('forced_choice'):
            natural = self.natural_scores(submission['forced_choice'])
        values_result = None
        if submission.get('values'):
            values_result = self.values(submission['values'])
        return self.report(result, locale=locale, natural_scores=natural, values_result=values_result)
