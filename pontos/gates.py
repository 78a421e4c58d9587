"""
Pontos Gates - Validation rules.

G1: CpfUniqueness - CPF cannot belong to another Client
G2: MultiplierRange - Promotion multiplier is an integer >= 1
G3: PromotionPeriod - Start date cannot be after end date
G4: SufficientBonus - Withdrawal cannot exceed the bonus balance
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


class GateError(Exception):
    """Gate validation error."""

    def __init__(self, gate_name: str, message: str, details: dict | None = None):
        self.gate_name = gate_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{gate_name}] {message}")


@dataclass
class GateResult:
    """Result of a gate check."""

    passed: bool
    gate_name: str
    message: str = ""


# =============================================================================
# Gates
# =============================================================================


class Gates:
    """Pontos validation gates."""

    # =========================================================================
    # G1: CPF Uniqueness
    # =========================================================================

    @classmethod
    def cpf_uniqueness(cls, cpf: str, exclude_client_id: int | None = None) -> GateResult:
        """
        G1: CPF (digits only) cannot exist in another Client.

        Args:
            cpf: Canonical digits-only CPF
            exclude_client_id: Client ID to exclude from check (for updates)

        Raises:
            GateError: If CPF already belongs to another client
        """
        from pontos.models import Client

        query = Client.objects.filter(cpf=cpf)
        if exclude_client_id:
            query = query.exclude(pk=exclude_client_id)

        existing = query.first()
        if existing:
            raise GateError(
                "G1_CpfUniqueness",
                "CPF already registered to another client.",
                {"existing_client_code": existing.code},
            )

        return GateResult(True, "G1_CpfUniqueness")

    @classmethod
    def check_cpf_uniqueness(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.cpf_uniqueness(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G2: Multiplier Range
    # =========================================================================

    @classmethod
    def multiplier_range(cls, multiplier) -> GateResult:
        """
        G2: Multiplier must be an integer >= 1.

        Accepts ints and integral strings ("3"); rejects bools, floats with a
        fractional part and anything below 1.

        Raises:
            GateError: If multiplier is invalid
        """
        value = multiplier
        if isinstance(value, bool):
            value = None
        elif isinstance(value, str):
            value = int(value) if value.strip().isdigit() else None
        elif isinstance(value, (float, Decimal)):
            value = int(value) if value == int(value) else None
        elif not isinstance(value, int):
            value = None

        if value is None or value < 1:
            raise GateError(
                "G2_MultiplierRange",
                "Multiplier must be an integer >= 1.",
                {"multiplier": str(multiplier)},
            )

        return GateResult(True, "G2_MultiplierRange")

    @classmethod
    def check_multiplier_range(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.multiplier_range(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G3: Promotion Period
    # =========================================================================

    @classmethod
    def promotion_period(cls, starts_on: date | None, ends_on: date | None) -> GateResult:
        """
        G3: When both dates are set, start cannot be after end.

        Raises:
            GateError: If starts_on > ends_on
        """
        if starts_on and ends_on and starts_on > ends_on:
            raise GateError(
                "G3_PromotionPeriod",
                "Start date is after end date.",
                {"starts_on": starts_on.isoformat(), "ends_on": ends_on.isoformat()},
            )

        return GateResult(True, "G3_PromotionPeriod")

    @classmethod
    def check_promotion_period(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.promotion_period(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G4: Sufficient Bonus
    # =========================================================================

    @classmethod
    def sufficient_bonus(cls, amount: Decimal, available: Decimal) -> GateResult:
        """
        G4: Withdrawal amount cannot exceed the available bonus.

        Raises:
            GateError: If amount > available
        """
        if amount > available:
            raise GateError(
                "G4_SufficientBonus",
                "Withdrawal exceeds available bonus.",
                {"available": str(available), "requested": str(amount)},
            )

        return GateResult(True, "G4_SufficientBonus")

    @classmethod
    def check_sufficient_bonus(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.sufficient_bonus(*args, **kwargs)
            return True
        except GateError:
            return False
