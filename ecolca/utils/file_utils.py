"""File handling utilities."""

import base64
import re
from pathlib import Path
from typing import Optional


class FileUtils:
    """Utilities for file operations."""

    @staticmethod
    def load_logo_bytes(logo_candidates: list) -> Optional[bytes]:
        """Load logo bytes from the first available candidate path."""
        for path in logo_candidates:
            path = Path(path)
            if path.exists():
                try:
                    return path.read_bytes()
                except OSError:
                    continue
        return None

    @staticmethod
    def create_logo_tag(logo_bytes: Optional[bytes], height: int = 64) -> str:
        """Create an HTML img tag for the logo, or a text mark without one."""
        if not logo_bytes:
            return f"<span style='font-size:{height // 2}px'>🌿</span>"

        b64 = base64.b64encode(logo_bytes).decode()
        return f"<img src='data:image/png;base64,{b64}' alt='EcoLCA' style='height:{height}px'/>"

    @staticmethod
    def safe_filename(name: str, suffix: str) -> str:
        """Turn a product name into a download filename."""
        stem = re.sub(r"[^A-Za-z0-9._-]", "_", (name or "product").strip().replace(" ", "_"))
        if suffix and not suffix.startswith("."):
            suffix = f".{suffix}"
        return f"EcoLCA_Report_{stem}{suffix}"
