import json
import runpy
from pathlib import Path

import pytest

from rbook.content.chapters import R_SYNTAX
from rbook.core.config import settings
from rbook.services.quiz_renderer import format_quiz

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def test_render_quiz_script_prints_quiz(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["render_quiz.py", "R", "Syntax", "and", "Functions"])
    runpy.run_path(str(SCRIPTS / "render_quiz.py"), run_name="__main__")
    assert capsys.readouterr().out == format_quiz(R_SYNTAX)


def test_render_quiz_script_unknown_title_suggests(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["render_quiz.py", "dplyr verbs"])
    with pytest.raises(SystemExit) as e:
        runpy.run_path(str(SCRIPTS / "render_quiz.py"), run_name="__main__")
    assert e.value.code == 2
    err = capsys.readouterr().err
    assert "Unknown quiz: dplyr verbs" in err
    assert "Data Manipulation with dplyr" in err


def test_check_quiz_bank_script_ok(capsys):
    runpy.run_path(str(SCRIPTS / "check_quiz_bank.py"), run_name="__main__")
    assert capsys.readouterr().out.startswith("[OK] Quiz bank valid (6 quizzes, 38 questions")


def _write(path, doc):
    path.write_text(json.dumps(doc), encoding="utf-8")


def _bad_answer_quiz():
    return {
        "title": "Bad",
        "questions": [{"prompt": "Which verb keeps rows?", "options": ["select()", "filter()", "mutate()", "arrange()"], "answer": "E"}],
    }


def test_check_quiz_bank_script_reports_every_problem(tmp_path, monkeypatch, capsys):
    _write(tmp_path / "bad.json", _bad_answer_quiz())
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(settings, "QUIZ_EXTRA_DIR", str(tmp_path))

    with pytest.raises(SystemExit) as e:
        runpy.run_path(str(SCRIPTS / "check_quiz_bank.py"), run_name="__main__")
    assert e.value.code == 3
    out = capsys.readouterr().out
    assert out.startswith("[ERROR] Quiz bank invalid:")
    assert "quiz 'Bad', question 1: answer 'E' is not one of A, B, C, D" in out
    assert "broken.json: invalid JSON" in out


def test_check_quiz_bank_script_missing_extra_dir(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(settings, "QUIZ_EXTRA_DIR", str(tmp_path / "nope"))
    with pytest.raises(SystemExit) as e:
        runpy.run_path(str(SCRIPTS / "check_quiz_bank.py"), run_name="__main__")
    assert e.value.code == 3
    assert "quiz directory not found" in capsys.readouterr().out


def test_render_quiz_script_uses_extra_dir(tmp_path, monkeypatch, capsys):
    good = _bad_answer_quiz()
    good["title"] = "Dates and Times"
    good["questions"][0]["answer"] = "B"
    _write(tmp_path / "dates.json", good)
    monkeypatch.setattr(settings, "QUIZ_EXTRA_DIR", str(tmp_path))
    monkeypatch.setattr("sys.argv", ["render_quiz.py", "Dates and Times"])

    runpy.run_path(str(SCRIPTS / "render_quiz.py"), run_name="__main__")
    out = capsys.readouterr().out
    assert out.startswith("Dates and Times\n")
    assert out.rstrip().endswith("1. B")


def test_render_quiz_script_bad_extra_dir(tmp_path, monkeypatch, capsys):
    _write(tmp_path / "bad.json", _bad_answer_quiz())
    monkeypatch.setattr(settings, "QUIZ_EXTRA_DIR", str(tmp_path))
    monkeypatch.setattr("sys.argv", ["render_quiz.py", "R Syntax and Functions"])

    with pytest.raises(SystemExit) as e:
        runpy.run_path(str(SCRIPTS / "render_quiz.py"), run_name="__main__")
    assert e.value.code == 3
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Cannot load quiz bank: quiz 'Bad', question 1" in captured.err
