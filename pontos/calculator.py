"""
Points arithmetic.

Pure functions, no database access. Services read balances, call these,
and write the results back.

Accrual:
    points_generated = floor(amount * multiplier)
    new_bonus        = floor(new_points / POINTS_PER_MILESTONE) * BONUS_PER_MILESTONE

Withdrawal:
    points_to_remove = amount / BONUS_PER_MILESTONE * POINTS_PER_MILESTONE
    new_points       = max(0, points - points_to_remove)
"""

from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal

from pontos.conf import pontos_settings
from pontos.exceptions import PontosError
from pontos.gates import GateError, Gates

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a purchase accrual."""

    amount: Decimal
    multiplier: int
    points_generated: int
    new_points: int
    new_bonus: Decimal
    bonus_generated: Decimal


@dataclass(frozen=True)
class WithdrawalComputation:
    """Outcome of a bonus withdrawal."""

    amount: Decimal
    points_removed: int
    new_points: int
    new_bonus: Decimal


def to_decimal(value) -> Decimal:
    """Coerce user input ("12,50", 12.5, "12.50") into a Decimal."""
    if isinstance(value, float):
        value = str(value)
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        result = value if isinstance(value, Decimal) else Decimal(value)
    except (ArithmeticError, TypeError, ValueError):
        raise PontosError("INVALID_AMOUNT", amount=str(value))
    if not result.is_finite():
        raise PontosError("INVALID_AMOUNT", amount=str(value))
    # Amounts are stored with cents precision; reject anything finer
    try:
        exact = result == result.quantize(CENTS)
    except ArithmeticError:
        exact = False
    if not exact:
        raise PontosError("INVALID_AMOUNT", amount=str(value))
    return result


def points_for(amount: Decimal, multiplier: int = 1) -> int:
    """floor(amount * multiplier)."""
    return int((to_decimal(amount) * multiplier).to_integral_value(rounding=ROUND_FLOOR))


def bonus_for(total_points: int) -> Decimal:
    """Bonus earned by a points total; recomputed wholesale, never incremented."""
    milestones = max(total_points, 0) // pontos_settings.POINTS_PER_MILESTONE
    return (Decimal(milestones) * Decimal(pontos_settings.BONUS_PER_MILESTONE)).quantize(CENTS)


def compute_purchase(
    amount,
    multiplier: int,
    current_points: int,
    current_bonus,
) -> PurchaseResult:
    """
    Accrue points for a purchase.

    The amount is not validated against <= 0.
    """
    amount = to_decimal(amount)
    current_bonus = to_decimal(current_bonus)

    points_generated = points_for(amount, multiplier)
    new_points = current_points + points_generated
    new_bonus = bonus_for(new_points)

    return PurchaseResult(
        amount=amount,
        multiplier=multiplier,
        points_generated=points_generated,
        new_points=new_points,
        new_bonus=new_bonus,
        bonus_generated=(new_bonus - current_bonus).quantize(CENTS),
    )


def points_to_remove(amount) -> int:
    """Inverse of the milestone rate, rounded up to a whole point."""
    raw = (
        to_decimal(amount)
        / Decimal(pontos_settings.BONUS_PER_MILESTONE)
        * Decimal(pontos_settings.POINTS_PER_MILESTONE)
    )
    return int(raw.to_integral_value(rounding=ROUND_CEILING))


def compute_withdrawal(amount, current_points: int, current_bonus) -> WithdrawalComputation:
    """
    Debit bonus and the matching points.

    Raises:
        PontosError: INVALID_AMOUNT if amount <= 0,
                     INSUFFICIENT_BONUS if amount > current_bonus
    """
    amount = to_decimal(amount)
    current_bonus = to_decimal(current_bonus)

    if amount <= 0:
        raise PontosError("INVALID_AMOUNT", amount=str(amount))

    try:
        Gates.sufficient_bonus(amount, current_bonus)
    except GateError as exc:
        raise PontosError(
            "INSUFFICIENT_BONUS",
            message=f"Cliente possui apenas R$ {current_bonus:.2f} de bônus",
            **exc.details,
        )

    removed = points_to_remove(amount)

    return WithdrawalComputation(
        amount=amount,
        points_removed=removed,
        new_points=max(0, current_points - removed),
        new_bonus=(current_bonus - amount).quantize(CENTS),
    )
