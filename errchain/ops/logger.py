import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

def setup_logger(level: str = "INFO", logs_dir: Optional[str] = None) -> logging.Logger:
    """
    Configures the `errchain` logger:
    - Console: `level`
    - File: DEBUG level (logs_dir/errchain_{timestamp}.log), only when logs_dir is set
    """
    logger = logging.getLogger("errchain")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Clear existing handlers to avoid duplicates during re-runs or tests
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logs_dir:
        log_path = Path(logs_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        filename = f"errchain_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_path / filename, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
