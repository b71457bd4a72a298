from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from rbook.core.errors import QuizContentError

OPTION_LABELS = ("A", "B", "C", "D")

# "A) text", "B. text", "C: text", "(D) text"
_LABEL_PREFIX_RE = re.compile(r"^\s*\(?([A-Z])\s*[\)\.\:]\s+")


def split_option_label(option: str) -> tuple[str | None, str]:
    m = _LABEL_PREFIX_RE.match(option or "")
    if not m:
        return None, (option or "").strip()
    return m.group(1), option[m.end() :].strip()


@dataclass(frozen=True)
class QuizQuestion:
    prompt: str
    options: tuple[str, ...]
    answer: str

    def __post_init__(self):
        cleaned: list[str] = []
        for pos, raw in enumerate(self.options):
            label, text = split_option_label(raw)
            expected = OPTION_LABELS[pos] if pos < len(OPTION_LABELS) else None
            if label is not None and expected is not None and label != expected:
                raise QuizContentError(f"option {pos + 1} is labelled {label}, expected {expected}")
            cleaned.append(text)
        object.__setattr__(self, "prompt", (self.prompt or "").strip())
        object.__setattr__(self, "options", tuple(cleaned))
        object.__setattr__(self, "answer", (self.answer or "").strip().upper())

    def labelled_options(self) -> list[tuple[str, str]]:
        return list(zip(OPTION_LABELS, self.options))

    def answer_text(self) -> str | None:
        if self.answer not in OPTION_LABELS:
            return None
        idx = OPTION_LABELS.index(self.answer)
        return self.options[idx] if idx < len(self.options) else None


@dataclass(frozen=True)
class Quiz:
    title: str
    questions: tuple[QuizQuestion, ...] = field(default_factory=tuple)
    chapter: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "title", " ".join((self.title or "").split()))
        object.__setattr__(self, "questions", tuple(self.questions))

    def __len__(self) -> int:
        return len(self.questions)

    def numbered(self) -> Iterable[tuple[int, QuizQuestion]]:
        return enumerate(self.questions, start=1)


@dataclass(frozen=True)
class Chapter:
    number: int
    title: str
    quiz: Quiz | None = None
