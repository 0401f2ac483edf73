"""Filesystem locations used by the dashboard.

Everything lives under ``assets/`` in the working directory. Nothing is
created at import time; the store and the logger create their own folders.
"""

from datetime import datetime
from pathlib import Path

ASSETS = Path.cwd() / "assets"

LOGS_DIR = ASSETS / "logs"
LANG_FILE_DIR = ASSETS / "i18n"
PRODUCTS_FILE = ASSETS / "data" / "lca_products.json"

# Optional docxtpl template; reports fall back to a plain layout without it
TEMPLATE = ASSETS / "guides" / "report_template.docx"

# First match wins
LOGO_CANDIDATES = [ASSETS / "ecolca_logo.png", Path("ecolca_logo.png")]


def ensure_dir(path: Path) -> Path:
    """Create ``path`` as a directory, moving aside a file of the same name."""
    if path.exists() and not path.is_dir():
        stamp = datetime.now().strftime("%Y%m%d%H%M%S")
        path.rename(path.with_name(f"{path.name}.conflict.{stamp}"))
    path.mkdir(parents=True, exist_ok=True)
    return path
