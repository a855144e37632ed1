# This file makes the 'disc_engine' directory a Python package.

from .engine import DiscEngine
from .models import ClassificationResult, Report, Scores, InvalidSubmissionError, InvalidShareDataError
from .scorer import calculate_scores, calculate_natural_scores, calculate_bipolar_indicators, classify_wheel
from .values_scorer import calculate_spranger_scores
from .results_generator import generate_report
from .sharing import encode_results, decode_results, result_from_share

__all__ = [
    "DiscEngine",
    "ClassificationResult",
    "Report",
    "Scores",
    "InvalidSubmissionError",
    "InvalidShareDataError",
    "calculate_scores",
    "calculate_natural_scores",
    "calculate_bipolar_indicators",
    "classify_wheel",
    "calculate_spranger_scores",
    "generate_report",
    "encode_results",
    "decode_results",
    "result_from_share",
]
