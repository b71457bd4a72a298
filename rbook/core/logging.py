import logging
import sys
from typing import TextIO

from pythonjsonlogger import jsonlogger

from rbook.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(funcName)s %(lineno)d"


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    # Rendered quizzes own stdout, so log records go to stderr unless told otherwise.
    root = logging.getLogger()
    root.setLevel(level or settings.LOG_LEVEL)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(jsonlogger.JsonFormatter(fmt=LOG_FORMAT))
    root.handlers = [handler]
