import logging
import logging.config
import os
from pathlib import Path

_ROOT_DIR = Path(__file__).resolve().parent.parent


def _configure_logging() -> None:
    """
    Configure from `logging.conf` (or `LOG_CONF`), else plain console logging.

    Serverless hosts often mount the code read-only; when the log directory
    cannot be created the file handler is skipped.
    """
    log_conf_path = Path(os.getenv("LOG_CONF", str(_ROOT_DIR / "logging.conf")))
    log_dir = Path(os.getenv("LOG_DIR", str(_ROOT_DIR / "logs")))
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        logging.basicConfig(level=level)
        logging.getLogger(__name__).warning("Log dir %s not writable, console logging only.", log_dir)
        return

    if log_conf_path.exists():
        logging.config.fileConfig(
            log_conf_path,
            disable_existing_loggers=False,
            defaults={"logdirpath": str(log_dir)},
        )
    else:
        logging.basicConfig(level=level)


_configure_logging()

# Default app logger
logger = logging.getLogger("vocab_ocr")
