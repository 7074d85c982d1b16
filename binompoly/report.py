"""Timed pipeline run and report assembly/persistence."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple, Union

from .binom import DEFAULT_BACKEND, Backend, binom_row
from .config import ReportConfig
from .model import Evaluation, ExpansionCheck, check_expansion, evaluate_steps, format_polynomial

logger = logging.getLogger(__name__)

GENERATION_LABEL = "Coefficient generation"
FORMATTING_LABEL = "Polynomial string construction"
EVALUATION_LABEL = "Stepwise evaluation"


@dataclass(frozen=True)
class StageTiming:
    label: str
    elapsed_ms: float

    def _format(self) -> str:
        return f"{self.label}: {self.elapsed_ms:.3f} ms"


def timed(label: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[Any, StageTiming]:
    """Run ``func`` and return its value together with the wall-clock time it took."""

    start = time.perf_counter()
    value = func(*args, **kwargs)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.info(f"{label} took {elapsed_ms:.3f} ms")
    return value, StageTiming(label, elapsed_ms)


@dataclass
class Report:
    n: int
    x: int
    polynomial: str
    evaluation: Evaluation
    timings: List[StageTiming] = field(default_factory=list)
    coefficients: Optional[List[int]] = None
    check: Optional[ExpansionCheck] = None

    def render(self, include_timings: bool = True) -> str:
        lines = [f"Polynomial (x+1)^{self.n} as sum of coefficients * x^k:", self.polynomial]
        if self.coefficients is not None:
            joined = ", ".join(str(c) for c in self.coefficients)
            lines.append(f"Coefficients (row {self.n} of Pascal's triangle): [{joined}]")
        lines.append("")
        lines.append(f"Evaluation for x = {self.x}:")
        lines.append(self.evaluation._format_steps())
        lines.append("")
        lines.append(f"Final result f({self.x}) = {self.evaluation.result}")
        if self.check is not None:
            lines.append(self.check._format())
        if include_timings:
            lines.append("")
            lines.append("Times (ms):")
            lines.extend(timing._format() for timing in self.timings)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:  # pragma: no cover - trivial wrapper
        return self.render()


def build_report(
    n: int,
    x: int,
    *,
    backend: Backend = DEFAULT_BACKEND,
    show_coefficients: bool = False,
    check: bool = False,
) -> Report:
    """Generate, format and evaluate ``(x+1)^n``, timing each stage on its own."""

    coeffs, gen_time = timed(GENERATION_LABEL, binom_row, n, backend)
    polynomial, fmt_time = timed(FORMATTING_LABEL, format_polynomial, coeffs)
    evaluation, eval_time = timed(EVALUATION_LABEL, evaluate_steps, coeffs, x)
    return Report(
        n=n,
        x=x,
        polynomial=polynomial,
        evaluation=evaluation,
        timings=[gen_time, fmt_time, eval_time],
        coefficients=coeffs if show_coefficients else None,
        check=check_expansion(n, x, evaluation.result) if check else None,
    )


def should_persist(n: int, out_path: Optional[Union[str, Path]], config: ReportConfig) -> bool:
    return n == config.persist_degree or out_path is not None


def resolve_output_path(out_path: Optional[Union[str, Path]], config: ReportConfig) -> Path:
    if out_path is not None:
        return Path(out_path)
    return config.default_path


def write_report(text: str, path: Union[str, Path]) -> bool:
    """Write ``text`` to ``path`` as UTF-8, replacing any existing file.

    A failure is logged as a warning and reported through the return value.
    """

    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        logger.warning(f"Could not write results file {path}: {exc}")
        return False
    logger.info(f"Wrote results file: {path}")
    return True
