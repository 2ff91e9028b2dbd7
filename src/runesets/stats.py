"""Chi-squared goodness-of-fit check for sampler uniformity.

Expected counts are proportional to each symbol's multiplicity in the
charset, so sets with repeated code points are judged against the
distribution a uniform index draw actually produces.
"""

import logging
import math
from collections import Counter
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, Field

from runesets.errors import InvalidArgumentError
from runesets.sampler import Sampler

logger = logging.getLogger(__name__)

# One-sided z for alpha = 0.01.
_DEFAULT_Z = 2.326


class UniformityReport(BaseModel):
    draws: int
    categories: int = Field(description="Distinct code points in the set")
    statistic: float
    critical_value: float
    passed: bool


def frequency_counts(draws: Iterable[str], charset: str) -> dict[str, int]:
    """Count draws per distinct symbol of charset, zero-filled.

    Raises InvalidArgumentError if a draw is not a member of charset.
    """
    counts = dict.fromkeys(charset, 0)
    for symbol in draws:
        if symbol not in counts:
            raise InvalidArgumentError(
                f"draw {symbol!r} is not a member of the charset"
            )
        counts[symbol] += 1
    return counts


def chi_squared_statistic(
    counts: Mapping[str, int], weights: Mapping[str, int]
) -> float:
    total = sum(counts.values())
    weight_total = sum(weights.values())
    if total <= 0 or weight_total <= 0:
        raise InvalidArgumentError("counts and weights must be positive")
    statistic = 0.0
    for symbol, weight in weights.items():
        expected = total * weight / weight_total
        observed = counts.get(symbol, 0)
        statistic += (observed - expected) ** 2 / expected
    return statistic


def chi_squared_critical_value(dof: int, z: float = _DEFAULT_Z) -> float:
    """Wilson-Hilferty approximation of the chi-squared upper quantile."""
    if dof < 1:
        raise InvalidArgumentError(f"dof must be >= 1, got {dof}")
    k = 2.0 / (9.0 * dof)
    return dof * (1.0 - k + z * math.sqrt(k)) ** 3


def check_uniformity(
    sampler: Sampler,
    charset: str,
    draws: int = 100_000,
    z: float = _DEFAULT_Z,
) -> UniformityReport:
    weights = Counter(charset)
    if len(weights) < 2:
        raise InvalidArgumentError(
            "charset needs at least two distinct code points"
        )
    if draws <= 0:
        raise InvalidArgumentError(f"draws must be > 0, got {draws}")

    counts = frequency_counts(sampler.random_runes(draws, charset), charset)
    statistic = chi_squared_statistic(counts, weights)
    critical = chi_squared_critical_value(len(weights) - 1, z)
    report = UniformityReport(
        draws=draws,
        categories=len(weights),
        statistic=statistic,
        critical_value=critical,
        passed=statistic <= critical,
    )
    logger.debug(
        "uniformity: chi2=%.3f critical=%.3f passed=%s",
        statistic,
        critical,
        report.passed,
    )
    return report
