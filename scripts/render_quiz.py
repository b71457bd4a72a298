import sys

from rbook.core.config import settings
from rbook.core.errors import QuizContentError
from rbook.core.logging import setup_logging
from rbook.services.catalog import get_quiz, search_quizzes
from rbook.services.quiz_renderer import render_quiz

setup_logging(settings.LOG_LEVEL)

if len(sys.argv) < 2:
    raise SystemExit('Usage: python scripts/render_quiz.py "<quiz title>"')

title = " ".join(sys.argv[1:])
try:
    quiz = get_quiz(title)
except KeyError:
    suggestions = search_quizzes(title)
    msg = f"Unknown quiz: {title}"
    if suggestions:
        msg += "\nDid you mean:\n" + "\n".join(f"  - {s.title}" for s in suggestions)
    print(msg, file=sys.stderr)
    raise SystemExit(2)
except (QuizContentError, FileNotFoundError) as e:
    print(f"Cannot load quiz bank: {e}", file=sys.stderr)
    print("Run scripts/check_quiz_bank.py for the full list of problems.", file=sys.stderr)
    raise SystemExit(3)

render_quiz(quiz)
