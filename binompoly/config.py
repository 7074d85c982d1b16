"""Run configuration for report persistence."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class ReportConfig:
    """Where and when a report is written to disk.

    ``output_dir`` defaults to the directory holding the installed package,
    not the caller's working directory.
    """

    output_dir: Path = field(default=PACKAGE_DIR)
    default_filename: str = "results_n100.txt"
    persist_degree: int = 100

    @property
    def default_path(self) -> Path:
        return self.output_dir / self.default_filename
