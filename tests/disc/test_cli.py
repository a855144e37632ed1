import json

import pytest
from services.disc_engine import cli
from services.disc_engine.sharing import TeamMember, encode_results, encode_team
from services.disc_engine.models import Scores


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keeps the CLI from attaching handlers to the root logger during tests."""
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


@pytest.fixture
def answers_file(tmp_path):
    likert = {}
    for qid in range(1, 25):
        likert[str(qid)] = 5 if qid <= 6 else 2  # ids 1-6 are the D statements
    path = tmp_path / "answers.json"
    path.write_text(json.dumps({"likert": likert}), encoding="utf-8")
    return path

# --- Test Cases ---

def test_report_command(answers_file, capsys):
    assert cli.main(["report", str(answers_file), "--locale", "en"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["result"]["dominant"] == "D"
    assert payload["wheel_type"] == "DIRECTIF"
    assert payload["locale"] == "en"
    assert payload["share_code"] == encode_results(Scores(D=100, I=25, S=25, C=25))
    assert "content" not in payload

def test_report_command_with_content(answers_file, capsys):
    assert cli.main(["report", str(answers_file), "--content"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["locale"] == "fr"
    assert payload["content"]["talents"]

def test_report_command_missing_file(tmp_path, capsys):
    assert cli.main(["report", str(tmp_path / "missing.json")]) == 1
    assert "error" in capsys.readouterr().err

def test_report_command_invalid_answers(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"likert": {"1": 9}}), encoding="utf-8")
    assert cli.main(["report", str(path)]) == 1
    assert "Invalid Likert value" in capsys.readouterr().err

def test_decode_command(capsys):
    code = encode_results(Scores(D=70, I=65, S=20, C=10))
    assert cli.main(["decode", code]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["dominant"] == "D"
    assert payload["secondary"] == "I"

def test_decode_command_invalid_code(capsys):
    assert cli.main(["decode", "%%%"]) == 1
    assert "error" in capsys.readouterr().err

def test_team_command(capsys):
    code = encode_team([
        TeamMember(name="Ana", scores=Scores(D=20, I=40, S=90, C=70)),
        TeamMember(name="Ben", scores=Scores(D=30, I=50, S=80, C=60)),
    ])
    assert cli.main(["team", code]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [m["name"] for m in payload["members"]] == ["Ana", "Ben"]
    assert payload["average"]["normalized_scores"] == {"D": 25, "I": 45, "S": 85, "C": 65}

def test_missing_subcommand():
    with pytest.raises(SystemExit):
        cli.main([])

@pytest.mark.parametrize("submission, message", [
    ({"likert": [4, 4]}, "object keyed by id"),
    ({"likert": {"1": 4}, "values": {"1": 1.0}}, "Invalid choice"),
])
def test_report_command_malformed_sections(tmp_path, capsys, submission, message):
    path = tmp_path / "malformed.json"
    path.write_text(json.dumps(submission), encoding="utf-8")
    assert cli.main(["report", str(path)]) == 1
    assert message in capsys.readouterr().err
