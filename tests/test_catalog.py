import json

import pytest

from rbook.core.errors import QuizContentError
from rbook.services.catalog import check_bank, get_chapters, get_quiz, get_quizzes, search_quizzes


def test_chapters_in_book_order():
    titles = [c.title for c in get_chapters(extra_dir="")]
    assert titles == [
        "Getting Started with R and RStudio",
        "R Syntax and Functions",
        "Data Types and Structures",
        "Importing Data",
        "Data Manipulation with dplyr",
        "Joining and Reshaping Data",
    ]


def test_get_quiz_ignores_case_and_spacing():
    q = get_quiz("  r syntax   AND functions ", extra_dir="")
    assert q.title == "R Syntax and Functions"


def test_get_quiz_unknown_title():
    with pytest.raises(KeyError):
        get_quiz("Shiny Dashboards", extra_dir="")


def test_search_quizzes_ranks_best_title_first():
    found = search_quizzes("dplyr manipulation", extra_dir="")
    assert found
    assert found[0].title == "Data Manipulation with dplyr"
    assert found[0].question_count == 7
    assert len(found) <= 3


def test_search_quizzes_respects_limit():
    assert len(search_quizzes("data", limit=1, extra_dir="")) == 1


def test_extra_quiz_dir_is_merged(tmp_path):
    doc = {
        "title": "Dates and Times",
        "questions": [
            {"prompt": "Which package parses dates with ymd()?", "options": ["lubridate", "dplyr", "tidyr", "readr"], "answer": "A"}
        ],
    }
    (tmp_path / "dates.json").write_text(json.dumps(doc), encoding="utf-8")

    chapters = get_chapters(extra_dir=str(tmp_path))
    assert chapters[-1].number == 7
    assert chapters[-1].title == "Dates and Times"
    assert len(get_quizzes(extra_dir=str(tmp_path))) == 7
    assert get_quiz("dates and times", extra_dir=str(tmp_path)).questions[0].answer == "A"


def _dates_doc(**over):
    doc = {
        "title": "Dates and Times",
        "questions": [
            {"prompt": "Which package parses dates with ymd()?", "options": ["lubridate", "dplyr", "tidyr", "readr"], "answer": "A"}
        ],
    }
    doc.update(over)
    return doc


def test_extra_quiz_cannot_take_a_book_chapter_number(tmp_path):
    (tmp_path / "dates.json").write_text(json.dumps(_dates_doc(chapter=2)), encoding="utf-8")
    with pytest.raises(QuizContentError, match="chapter 2 is already 'R Syntax and Functions'") as e:
        get_chapters(extra_dir=str(tmp_path))
    assert e.value.quiz_title == "Dates and Times"


def test_extra_quiz_cannot_reuse_a_book_title(tmp_path):
    (tmp_path / "dup.json").write_text(json.dumps(_dates_doc(title="importing   data")), encoding="utf-8")
    with pytest.raises(QuizContentError, match="already uses this title"):
        get_quiz("Importing Data", extra_dir=str(tmp_path))


def test_check_bank_collects_instead_of_raising(tmp_path):
    bad = _dates_doc(chapter=3)
    bad["questions"][0]["answer"] = "Z"
    (tmp_path / "a_bad.json").write_text(json.dumps(bad), encoding="utf-8")
    (tmp_path / "b_broken.json").write_text("[", encoding="utf-8")

    quizzes, problems = check_bank(extra_dir=str(tmp_path))
    assert len(quizzes) == 7
    messages = [str(p) for p in problems]
    assert any("b_broken.json: invalid JSON" in m for m in messages)
    assert any("chapter 3 is already 'Data Types and Structures'" in m for m in messages)
    assert any(m.startswith("quiz 'Dates and Times', question 1: answer 'Z'") for m in messages)


def test_check_bank_missing_dir(tmp_path):
    quizzes, problems = check_bank(extra_dir=str(tmp_path / "nope"))
    assert len(quizzes) == 6
    assert len(problems) == 1
    assert "quiz directory not found" in str(problems[0])


def test_check_bank_clean():
    quizzes, problems = check_bank(extra_dir="")
    assert problems == []
    assert sum(len(q) for q in quizzes) == 38
