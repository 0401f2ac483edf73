"""Logging configuration for the application."""

import logging
from .paths import LOGS_DIR, ensure_dir

def setup_logging():
    """Setup application logging (once per process; Streamlit reruns are no-ops)."""
    if not logging.getLogger().handlers:
        ensure_dir(LOGS_DIR)
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(message)s",
            handlers=[
                logging.FileHandler(LOGS_DIR / "app.log", encoding="utf-8"),
                logging.StreamHandler(),
            ],
        )
    return logging.getLogger("ecolca")
