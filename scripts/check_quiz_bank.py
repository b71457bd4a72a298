import sys

from rbook.core.config import settings
from rbook.core.logging import setup_logging
from rbook.services.catalog import check_bank

setup_logging(settings.LOG_LEVEL)

quizzes, problems = check_bank()
if problems:
    print("[ERROR] Quiz bank invalid:")
    for p in problems:
        print(" -", p)
    sys.exit(3)

total = sum(len(q) for q in quizzes)
print(f"[OK] Quiz bank valid ({len(quizzes)} quizzes, {total} questions, 4 options each, answers in A-D).")
