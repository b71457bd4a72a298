from __future__ import annotations

import logging
from typing import Iterable

from rbook.core.errors import QuizContentError
from rbook.models.quiz import OPTION_LABELS, Quiz, QuizQuestion

log = logging.getLogger(__name__)

OPTION_COUNT = len(OPTION_LABELS)


def _question_problems(question: QuizQuestion) -> list[str]:
    problems: list[str] = []
    if not question.prompt:
        problems.append("prompt is empty")
    if len(question.options) != OPTION_COUNT:
        problems.append(f"expected {OPTION_COUNT} options, found {len(question.options)}")
    for label, text in question.labelled_options():
        if not text:
            problems.append(f"option {label} is empty")
    if question.answer not in OPTION_LABELS:
        problems.append(f"answer {question.answer!r} is not one of {', '.join(OPTION_LABELS)}")
    elif not question.answer_text():
        problems.append(f"answer {question.answer} points at an empty option")
    return problems


def validate_question(question: QuizQuestion, index: int, quiz_title: str | None = None) -> None:
    problems = _question_problems(question)
    if problems:
        raise QuizContentError(problems[0], quiz_title=quiz_title, question_number=index)


def validate_quiz(quiz: Quiz) -> Quiz:
    if not quiz.title:
        raise QuizContentError("quiz has no title")
    if not quiz.questions:
        raise QuizContentError("quiz has no questions", quiz_title=quiz.title)
    for i, q in quiz.numbered():
        validate_question(q, i, quiz_title=quiz.title)
    return quiz


def collect_problems(quizzes: Iterable[Quiz]) -> list[QuizContentError]:
    found: list[QuizContentError] = []
    for quiz in quizzes:
        if not quiz.title:
            found.append(QuizContentError("quiz has no title"))
        if not quiz.questions:
            found.append(QuizContentError("quiz has no questions", quiz_title=quiz.title))
        for i, q in quiz.numbered():
            for p in _question_problems(q):
                found.append(QuizContentError(p, quiz_title=quiz.title, question_number=i))
    for err in found:
        log.warning("quiz content problem", extra={"quiz": err.quiz_title, "question": err.question_number, "problem": err.detail})
    return found
