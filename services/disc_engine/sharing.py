# services/disc_engine/sharing.py
# Compact share codes for a score set (and for a named team of score sets).

import base64
import json
import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ValidationError

from .definitions import DIMENSIONS
from .models import ClassificationResult, InvalidShareDataError, Scores
from .scorer import result_from_scores, round_half_away

logger = logging.getLogger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100


class TeamMember(BaseModel):
    name: str
    scores: Scores


def _check_range(values: Sequence[int]) -> None:
    if any(v < SCORE_MIN or v > SCORE_MAX for v in values):
        raise InvalidShareDataError(f"Scores must lie within [{SCORE_MIN}, {SCORE_MAX}], got {list(values)}")

def encode_results(scores: Scores) -> str:
    """Base64 of the 'D-I-S-C' join of the four scores."""
    data = '-'.join(str(scores.get(dim)) for dim in DIMENSIONS)
    return base64.b64encode(data.encode('ascii')).decode('ascii')

def decode_results(encoded: str) -> Scores:
    """
    Reverses encode_results.

    Raises:
        InvalidShareDataError: If the code is not base64, does not hold four
            integers, or holds a value outside [0, 100].
    """
    try:
        data = base64.b64decode(encoded.strip(), validate=True).decode('ascii')
    except (ValueError, AttributeError) as e:
        raise InvalidShareDataError(f"Share code is not valid base64: {e}")

    parts = data.split('-')
    if len(parts) != len(DIMENSIONS) or not all(part.isdigit() for part in parts):
        raise InvalidShareDataError(f"Share code must hold four non-negative integers, got '{data}'")

    values = [int(part) for part in parts]
    _check_range(values)
    return Scores(**dict(zip(DIMENSIONS, values)))

def result_from_share(encoded: str) -> ClassificationResult:
    """Reconstructs the classification from a share code without re-answering."""
    return result_from_scores(decode_results(encoded))

# --- Team codes ---

def encode_team(members: Sequence[TeamMember]) -> str:
    payload = [
        {'n': member.name, 's': [member.scores.get(dim) for dim in DIMENSIONS]}
        for member in members
    ]
    raw = json.dumps(payload, ensure_ascii=False, separators=(',', ':')).encode('utf-8')
    return base64.urlsafe_b64encode(raw).decode('ascii')

def decode_team(encoded: str) -> List[TeamMember]:
    """
    Reverses encode_team.

    Raises:
        InvalidShareDataError: If the code or any member entry is malformed.
    """
    try:
        raw = base64.b64decode(encoded.strip().encode("ascii"), altchars=b"-_", validate=True)
        payload = json.loads(raw.decode("utf-8"))
    except (ValueError, AttributeError) as e:
        raise InvalidShareDataError(f"Team code could not be decoded: {e}")

    if not isinstance(payload, list):
        raise InvalidShareDataError("Team code must hold a list of members")

    members = []
    for entry in payload:
        if not isinstance(entry, dict) or not isinstance(entry.get('s'), list) or len(entry['s']) != len(DIMENSIONS):
            raise InvalidShareDataError(f"Malformed team member entry: {entry}")
        values = entry['s']
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            raise InvalidShareDataError(f"Team member scores must be integers: {values}")
        _check_range(values)
        try:
            members.append(TeamMember(name=str(entry.get('n', '')), scores=Scores(**dict(zip(DIMENSIONS, values)))))
        except ValidationError as e:
            raise InvalidShareDataError(f"Malformed team member entry: {e}")
    return members

# --- Team aggregation ---

def average_scores(members: Sequence[TeamMember]) -> Optional[Scores]:
    """Rounded per-dimension mean of the members' scores; None for an empty team."""
    if not members:
        return None
    totals = {dim: sum(member.scores.get(dim) for member in members) for dim in DIMENSIONS}
    return Scores(**{dim: round_half_away(total / len(members)) for dim, total in totals.items()})

def team_report(members: Sequence[TeamMember]) -> Optional[ClassificationResult]:
    average = average_scores(members)
    if average is None:
        logger.debug("Empty team, no aggregate profile")
        return None
    return result_from_scores(average)
