from __future__ import annotations

import json
import logging
from pathlib import Path

from rbook.core.errors import QuizContentError
from rbook.models.quiz import Quiz, QuizQuestion
from rbook.services.quiz_validation import validate_quiz

log = logging.getLogger(__name__)


def _require(obj: dict, key: str, kind: type, where: str):
    if not isinstance(obj, dict) or key not in obj:
        raise QuizContentError(f"{where}: missing '{key}'")
    value = obj[key]
    if not isinstance(value, kind):
        raise QuizContentError(f"{where}: '{key}' must be {kind.__name__}")
    return value


def quiz_from_dict(data: dict, source: str = "<dict>", validate: bool = True) -> Quiz:
    """Build a quiz from its JSON shape.

    Structural problems always raise. With ``validate=False`` the content
    checks are left to the caller, so a bank checker can report every
    problem instead of the first one.
    """
    title = _require(data, "title", str, source)
    records = _require(data, "questions", list, source)
    chapter = data.get("chapter")
    if chapter is not None and (isinstance(chapter, bool) or not isinstance(chapter, int)):
        raise QuizContentError(f"{source}: 'chapter' must be int")

    questions: list[QuizQuestion] = []
    for i, rec in enumerate(records, start=1):
        where = f"{source} question {i}"
        options = _require(rec, "options", list, where)
        if not all(isinstance(o, str) for o in options):
            raise QuizContentError(f"{where}: options must be strings")
        prompt = _require(rec, "prompt", str, where)
        answer = _require(rec, "answer", str, where)
        try:
            questions.append(QuizQuestion(prompt=prompt, options=tuple(options), answer=answer))
        except QuizContentError as e:
            raise QuizContentError(f"{source}: {e.detail}", quiz_title=title, question_number=i) from e

    quiz = Quiz(title=title, questions=tuple(questions), chapter=chapter)
    return validate_quiz(quiz) if validate else quiz


def list_quiz_files(path: str | Path) -> list[Path]:
    root = Path(path)
    if not root.is_dir():
        raise FileNotFoundError(f"quiz directory not found: {root}")
    return sorted(root.glob("*.json"))


def load_quiz_file(path: str | Path, validate: bool = True) -> Quiz:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise QuizContentError(f"{p.name}: cannot read ({e})") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise QuizContentError(f"{p.name}: invalid JSON ({e.msg} at line {e.lineno})") from e
    quiz = quiz_from_dict(data, source=p.name, validate=validate)
    log.info("loaded quiz file", extra={"path": str(p), "quiz": quiz.title, "questions": len(quiz)})
    return quiz


def load_quiz_dir(path: str | Path, validate: bool = True) -> list[Quiz]:
    return [load_quiz_file(p, validate=validate) for p in list_quiz_files(path)]
