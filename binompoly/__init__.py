"""Public API for binompoly."""
from .binom import BackendUnavailableError, binom_row
from .config import ReportConfig
from .model import Evaluation, EvaluationStep, ExpansionCheck, check_expansion, evaluate_steps, format_polynomial
from .report import Report, StageTiming, build_report, write_report

__all__ = [
    "binom_row",
    "BackendUnavailableError",
    "format_polynomial",
    "evaluate_steps",
    "check_expansion",
    "Evaluation",
    "EvaluationStep",
    "ExpansionCheck",
    "build_report",
    "write_report",
    "Report",
    "StageTiming",
    "ReportConfig",
]
