import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from weatherdash.config import LOG_LEVEL
from weatherdash.paths import LOGS, ensure_dirs


def setup_logging(log_dir: str | None = None, level: str = LOG_LEVEL) -> logging.Logger:
    """Configure logging with rotation and formatting."""
    # Määritä lokihakemisto ja varmista että se on olemassa
    if log_dir is None:
        log_dir = str(LOGS)
    ensure_dirs()

    Path(log_dir).mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("weatherdash")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG)

    file_handler = RotatingFileHandler(
        Path(log_dir) / "weatherdash.log",
        maxBytes=5_000_000,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    # Streamlit ajaa skriptin uudelleen joka klikkauksella -> handlerit vain kerran
    if not logger.handlers:
        logger.addHandler(console)
        logger.addHandler(file_handler)
    else:
        file_handler.close()

    return logger
