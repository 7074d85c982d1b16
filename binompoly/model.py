"""Polynomial rendering and step-by-step evaluation of ``(x+1)^n``."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List


@dataclass(frozen=True)
class EvaluationStep:
    k: int
    coeff: int
    x_power: int
    term: int
    running_sum: int

    def _format(self) -> str:
        return (
            f"k={self.k}: coeff={self.coeff} * x^{self.k}({self.x_power}) = {self.term}"
            f"  => sum={self.running_sum}"
        )


@dataclass
class Evaluation:
    """Result of evaluating a polynomial one term at a time.

    Attributes
    ----------
    x: int
        The evaluation point.
    result: int
        ``sum coeffs[k] * x^k``, computed exactly.
    steps: List[EvaluationStep]
        One record per power ``k``, in ascending order. The running sum of the
        last step equals ``result``.
    """

    x: int
    result: int
    steps: List[EvaluationStep] = field(default_factory=list)

    def _format_steps(self) -> str:
        return "\n".join(step._format() for step in self.steps)


@dataclass(frozen=True)
class ExpansionCheck:
    n: int
    x: int
    expected: int
    actual: int

    @property
    def matches(self) -> bool:
        return self.expected == self.actual

    def _format(self) -> str:
        status = "matches" if self.matches else "MISMATCH"
        return f"Check: ({self.x} + 1)^{self.n} = {self.expected} ({status})"


def format_polynomial(coeffs: Iterable[int], var: str = "x") -> str:
    """Format ``sum coeffs[k] * var^k`` in ascending powers.

    Every coefficient is printed, including ones and zeros.
    """

    terms = []
    for power, coeff in enumerate(coeffs):
        if power == 0:
            terms.append(f"{coeff}")
        elif power == 1:
            terms.append(f"{coeff}*{var}")
        else:
            terms.append(f"{coeff}*{var}^{power}")
    if not terms:
        raise ValueError("coefficient sequence must not be empty")
    return " + ".join(terms)


def evaluate_steps(coeffs: Iterable[int], x: int) -> Evaluation:
    """Evaluate ``sum coeffs[k] * x^k`` term by term, keeping each partial sum."""

    coeff_list = list(coeffs)
    if not coeff_list:
        raise ValueError("coefficient sequence must not be empty")
    steps: List[EvaluationStep] = []
    x_power = 1
    total = 0
    for k, coeff in enumerate(coeff_list):
        if k:
            x_power *= x
        term = coeff * x_power
        total += term
        steps.append(EvaluationStep(k, coeff, x_power, term, total))
    return Evaluation(x=x, result=total, steps=steps)


def check_expansion(n: int, x: int, actual: int) -> ExpansionCheck:
    """Compare a stepwise result with ``(x+1)^n`` computed directly."""

    return ExpansionCheck(n=n, x=x, expected=(x + 1) ** n, actual=actual)
