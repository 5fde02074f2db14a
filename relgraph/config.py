"""Centralised settings for relgraph.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("RELGRAPH_OUTPUT_DIR", Path.cwd() / "docs" / "diagrams")
        )
    )
    basename: str = field(
        default_factory=lambda: os.environ.get("RELGRAPH_BASENAME", "dataverse")
    )

    # ------------------------------------------------------------------
    # Layout / styling
    # ------------------------------------------------------------------
    layout_engine: str = field(
        default_factory=lambda: os.environ.get("RELGRAPH_LAYOUT_ENGINE", "dot")
    )
    rankdir: str = field(
        default_factory=lambda: os.environ.get("RELGRAPH_RANKDIR", "LR")
    )
    fontname: str = field(
        default_factory=lambda: os.environ.get("RELGRAPH_FONTNAME", "helvetica")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("RELGRAPH_LOG_LEVEL", "WARNING")
    )

    def ensure_output_dir(self, path: Optional[Path] = None) -> Path:
        """Create the output directory (or *path*) if it does not exist."""
        target = Path(path) if path is not None else self.output_dir
        target.mkdir(parents=True, exist_ok=True)
        return target


# Module-level singleton, import this everywhere:
#   from relgraph.config import settings
settings = Settings()
