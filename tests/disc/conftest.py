import pytest

from services.disc_engine.config import EngineSettings
from services.disc_engine.engine import DiscEngine
from services.disc_engine.models import LikertQuestion, LocalizedText

QUESTION_BANK_PATH = "assets/disc_questions.yml"


@pytest.fixture
def questions():
    """Six plain Likert questions per dimension: ids 1-6 D, 7-12 I, 13-18 S, 19-24 C."""
    result = []
    for index, dim in enumerate(('D', 'I', 'S', 'C')):
        for offset in range(1, 7):
            qid = index * 6 + offset
            result.append(LikertQuestion(
                id=qid,
                dimension=dim,
                text=LocalizedText(fr=f"Question {qid}", en=f"Question {qid}"),
            ))
    return result


@pytest.fixture(scope="session")
def engine():
    """Provides a DiscEngine loaded with the shipped question bank and default settings."""
    try:
        return DiscEngine(EngineSettings(), question_bank_path=QUESTION_BANK_PATH)
    except Exception as e:
        pytest.fail(f"Failed to initialize DiscEngine: {e}")
