import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .config import EngineSettings
from .engine import DiscEngine
from .logging_config import setup_logging
from .models import InvalidShareDataError, InvalidSubmissionError
from .loader import SpecValidationError
from .sharing import decode_team, encode_results, result_from_share, team_report

logger = logging.getLogger(__name__)


def _report_payload(engine: DiscEngine, submission: Dict[str, Any], locale: Optional[str], with_content: bool) -> Dict[str, Any]:
    report = engine.assess(submission, locale=locale)
    payload = report.model_dump(mode='json')
    payload['share_code'] = encode_results(report.result.normalized_scores)
    if with_content:
        payload['content'] = engine.content(report)
    return payload


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="disc-engine", description="Score DISC assessments and build profile reports")
    ap.add_argument("--bank", type=str, default=None, help="Question bank YAML (overrides DISC_QUESTION_BANK_PATH)")
    sub = ap.add_subparsers(dest="command", required=True)

    rep = sub.add_parser("report", help="Build a report from a JSON answers file")
    rep.add_argument("answers", type=str, help="JSON file with likert / forced_choice / values answers")
    rep.add_argument("--locale", choices=["fr", "en"], default=None, help="Report language")
    rep.add_argument("--content", action="store_true", help="Include the narrative sections")

    dec = sub.add_parser("decode", help="Rebuild a classification from a share code")
    dec.add_argument("code", type=str)

    team = sub.add_parser("team", help="Aggregate profile of a team code")
    team.add_argument("code", type=str)
    args = ap.parse_args(argv)

    settings = EngineSettings()
    setup_logging(settings.log_level, json_format=settings.log_json)

    try:
        if args.command == "report":
            with open(args.answers, 'r', encoding='utf-8') as f:
                submission = json.load(f)
            engine = DiscEngine(settings, question_bank_path=args.bank)
            output = _report_payload(engine, submission, args.locale, args.content)
        elif args.command == "decode":
            output = result_from_share(args.code).model_dump(mode='json')
        else:
            members = decode_team(args.code)
            result = team_report(members)
            output = {
                "members": [m.model_dump(mode='json') for m in members],
                "average": result.model_dump(mode='json') if result else None,
            }
    except (OSError, json.JSONDecodeError, ValidationError,
            InvalidSubmissionError, InvalidShareDataError, SpecValidationError) as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0

if __name__ == "__main__":
    sys.exit(main())
