import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: str, log_file: Path | None = None) -> None:
    """Route memstore's eviction and prune logs to the console and an optional file.

    Repeated calls reuse the handlers installed earlier and move them to the
    new level, so raising verbosity to DEBUG also surfaces cache evictions.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        log_file: Rotating log file path; console only when omitted.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    # Exact type check so FileHandler subclasses don't count as console output
    console = next(
        (h for h in root_logger.handlers if type(h) is logging.StreamHandler), None
    )
    if console is None:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root_logger.addHandler(console)
    console.setLevel(level)

    if log_file is None:
        return

    file_handler = next(
        (h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)), None
    )
    if file_handler is None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    file_handler.setLevel(level)
