from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Dict, Optional, Tuple, Literal

Dimension = Literal['D', 'I', 'S', 'C']
Locale = Literal['fr', 'en']
MotivationCategory = Literal[
    'cognitive', 'aesthetic', 'utilitarian', 'altruistic', 'individual', 'traditional'
]
DeltaLevel = Literal['low', 'moderate', 'high', 'very-high']
DeltaDirection = Literal['increase', 'decrease', 'stable']


class LocalizedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    fr: str
    en: str

    def get(self, locale: Locale) -> str:
        return self.fr if locale == 'fr' else self.en

# --- Scores & classification ---

class Scores(BaseModel):
    """Four dimension scores. Raw sums are unbounded, normalized ones sit in [0, 100]."""
    model_config = ConfigDict(frozen=True)

    D: int = 0
    I: int = 0
    S: int = 0
    C: int = 0

    def get(self, dimension: Dimension) -> int:
        return getattr(self, dimension)

    def as_dict(self) -> Dict[str, int]:
        return {'D': self.D, 'I': self.I, 'S': self.S, 'C': self.C}

class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_scores: Scores
    normalized_scores: Scores
    dominant: Dimension
    secondary: Optional[Dimension] = None

class DimensionScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension: Dimension
    score: int

class WheelArchetype(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    position: int = Field(..., ge=1, le=8)
    primary: Dimension
    secondary: Optional[Dimension] = None
    label: LocalizedText

    @property
    def is_blend(self) -> bool:
        return self.secondary is not None

# --- Derived indicators ---

class BipolarIndicator(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    left_label: LocalizedText
    right_label: LocalizedText
    value: int = Field(..., ge=-100, le=100)

class DeltaInterpretation(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension: Dimension
    adapted: int
    natural: int
    delta: int
    level: DeltaLevel
    direction: DeltaDirection
    text: str

class ValueScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: MotivationCategory
    score: int
    times_chosen: int
    times_appeared: int

class ValuesResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    scores: Dict[MotivationCategory, int]
    indicators: Tuple[BipolarIndicator, ...]
    ranking: Tuple[ValueScore, ...]

class Perceptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    self_positive: Tuple[str, ...]
    others_stress: Tuple[str, ...]

class Report(BaseModel):
    """Terminal aggregate of a completed assessment. Read-only once built."""
    model_config = ConfigDict(frozen=True)

    locale: Locale
    result: ClassificationResult
    wheel_type: str
    wheel_position: int
    wheel_label: str
    opposite_type: str
    opposite_position: int
    opposite_label: str
    indicators: Tuple[BipolarIndicator, ...]
    perceptions: Perceptions
    sorted_dimensions: Tuple[DimensionScore, ...]
    natural_scores: Optional[Scores] = None
    deltas: Optional[Tuple[DeltaInterpretation, ...]] = None
    values: Optional[ValuesResult] = None

# --- Answers ---

class ForcedChoiceAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    most: int = Field(..., ge=0)
    least: int = Field(..., ge=0)

    @model_validator(mode='after')
    def _distinct_picks(self):
        if self.most == self.least:
            raise ValueError("'most' and 'least' must point to different adjectives")
        return self

# --- Question bank ---

class LikertQuestion(BaseModel):
    id: int
    dimension: Dimension
    text: LocalizedText
    adaptive: bool = False # Extra question, only shown when the top two scores are close

class Adjective(BaseModel):
    dimension: Dimension
    text: LocalizedText

class ForcedChoiceGroup(BaseModel):
    id: int
    adjectives: List[Adjective] = Field(..., min_length=4, max_length=4)

class ValueOption(BaseModel):
    category: MotivationCategory
    text: LocalizedText

class ValuePair(BaseModel):
    id: int
    option_a: ValueOption
    option_b: ValueOption

    @property
    def options(self) -> Tuple[ValueOption, ValueOption]:
        return (self.option_a, self.option_b)

class QuestionBank(BaseModel):
    version: str
    released_at: str
    likert_questions: List[LikertQuestion]
    forced_choice_groups: List[ForcedChoiceGroup] = Field(default_factory=list)
    value_pairs: List[ValuePair] = Field(default_factory=list)

    @property
    def core_questions(self) -> List[LikertQuestion]:
        return [q for q in self.likert_questions if not q.adaptive]

    @property
    def extra_questions(self) -> List[LikertQuestion]:
        return [q for q in self.likert_questions if q.adaptive]

# Custom Error Classes
class InvalidSubmissionError(ValueError):
    """Custom exception for invalid answer data (e.g., a Likert value outside 1-5)."""
    pass

class InvalidShareDataError(ValueError):
    """Custom exception for a share code that does not decode to four scores in [0, 100]."""
    pass
