"""Plain-text rendering of chapter self-check quizzes.

A quiz renders in two passes over the same ordered records: the numbered
questions with their labelled options, then a separator line and the
numbered answer key. Nothing random or time dependent goes into the output,
so rendering the same quiz twice yields the same text.
"""
from __future__ import annotations

import io
import logging
import sys
from typing import TextIO

from rbook.core.config import settings
from rbook.models.quiz import Quiz
from rbook.services.quiz_validation import validate_quiz

log = logging.getLogger(__name__)

OPTION_INDENT = "   "


def answer_key_separator(title: str | None = None) -> str:
    return f"---- {title or settings.ANSWER_KEY_TITLE} ----"


def _write_questions(quiz: Quiz, out: TextIO) -> None:
    out.write(f"{quiz.title}\n")
    for i, q in quiz.numbered():
        out.write(f"\n{i}. {q.prompt}\n")
        for label, text in q.labelled_options():
            out.write(f"{OPTION_INDENT}{label}) {text}\n")


def _write_answer_key(quiz: Quiz, out: TextIO, separator: str) -> None:
    out.write(f"\n{separator}\n")
    for i, q in quiz.numbered():
        out.write(f"{i}. {q.answer}\n")


def render_quiz(quiz: Quiz, out: TextIO | None = None, *, separator: str | None = None) -> None:
    """Write ``quiz`` and its answer key to ``out`` (stdout by default).

    The quiz is validated first, so a bad record raises
    :class:`~rbook.core.errors.QuizContentError` before anything is written.
    """
    validate_quiz(quiz)
    out = out if out is not None else sys.stdout
    log.debug("rendering quiz", extra={"quiz": quiz.title, "questions": len(quiz)})
    _write_questions(quiz, out)
    _write_answer_key(quiz, out, separator or answer_key_separator())


def format_quiz(quiz: Quiz, *, separator: str | None = None) -> str:
    buf = io.StringIO()
    render_quiz(quiz, buf, separator=separator)
    return buf.getvalue()


def render_answer_key(quiz: Quiz, out: TextIO | None = None, *, separator: str | None = None) -> None:
    validate_quiz(quiz)
    _write_answer_key(quiz, out if out is not None else sys.stdout, separator or answer_key_separator())
