from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz import fuzz, utils

from rbook.content.chapters import CHAPTERS
from rbook.core.config import settings
from rbook.core.errors import QuizContentError
from rbook.ingest.quiz_loader import list_quiz_files, load_quiz_file
from rbook.models.quiz import Chapter, Quiz
from rbook.services.quiz_validation import collect_problems

MIN_TITLE_SCORE = 20


@dataclass
class QuizView:
    title: str
    chapter: int | None
    question_count: int
    score: float | None = None


def _norm(title: str) -> str:
    return " ".join((title or "").split()).casefold()


def _extra_dir(extra_dir: str | None) -> str:
    return settings.QUIZ_EXTRA_DIR if extra_dir is None else extra_dir


def _append_extras(chapters: list[Chapter], quizzes: list[Quiz]) -> None:
    # authored quizzes without a chapter number go after the book's own
    next_num = max((c.number for c in chapters), default=0) + 1
    for q in quizzes:
        num = q.chapter if q.chapter is not None else next_num
        if q.chapter is None:
            next_num += 1
        chapters.append(Chapter(number=num, title=q.title, quiz=q))


def _clashes(chapters: list[Chapter]) -> list[QuizContentError]:
    found: list[QuizContentError] = []
    numbers: dict[int, str] = {}
    titles: set[str] = set()
    for c in chapters:
        if c.number in numbers:
            found.append(QuizContentError(f"chapter {c.number} is already '{numbers[c.number]}'", quiz_title=c.title))
        else:
            numbers[c.number] = c.title
        if _norm(c.title) in titles:
            found.append(QuizContentError("another chapter already uses this title", quiz_title=c.title))
        titles.add(_norm(c.title))
    return found


def get_chapters(extra_dir: str | None = None) -> list[Chapter]:
    chapters = list(CHAPTERS)
    extra = _extra_dir(extra_dir)
    if extra:
        _append_extras(chapters, [load_quiz_file(p) for p in list_quiz_files(extra)])
        clashes = _clashes(chapters)
        if clashes:
            raise clashes[0]
    return sorted(chapters, key=lambda c: c.number)


def check_bank(extra_dir: str | None = None) -> tuple[list[Quiz], list[QuizContentError]]:
    """Load the whole bank without stopping at the first bad quiz.

    Returns the quizzes that could be built and every problem found: files
    that could not be read or parsed, chapter clashes, and content problems.
    """
    problems: list[QuizContentError] = []
    chapters = list(CHAPTERS)
    extra = _extra_dir(extra_dir)
    if extra:
        loaded: list[Quiz] = []
        try:
            paths = list_quiz_files(extra)
        except FileNotFoundError as e:
            problems.append(QuizContentError(str(e)))
            paths = []
        for p in paths:
            try:
                loaded.append(load_quiz_file(p, validate=False))
            except QuizContentError as e:
                problems.append(e)
        _append_extras(chapters, loaded)
        problems.extend(_clashes(chapters))
    quizzes = [c.quiz for c in sorted(chapters, key=lambda c: c.number) if c.quiz is not None]
    problems.extend(collect_problems(quizzes))
    return quizzes, problems


def get_quizzes(extra_dir: str | None = None) -> list[Quiz]:
    return [c.quiz for c in get_chapters(extra_dir) if c.quiz is not None]


def get_quiz(title: str, extra_dir: str | None = None) -> Quiz:
    wanted = _norm(title)
    for q in get_quizzes(extra_dir):
        if _norm(q.title) == wanted:
            return q
    raise KeyError(title)


def search_quizzes(query: str, limit: int = 3, extra_dir: str | None = None) -> list[QuizView]:
    ranked: list[tuple[float, Quiz]] = []
    for q in get_quizzes(extra_dir):
        score = fuzz.token_set_ratio(query, q.title, processor=utils.default_process)
        if score >= MIN_TITLE_SCORE:
            ranked.append((score, q))
    ranked.sort(key=lambda x: x[0], reverse=True)
    return [
        QuizView(title=q.title, chapter=q.chapter, question_count=len(q), score=score)
        for score, q in ranked[:limit]
    ]
