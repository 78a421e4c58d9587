"""Tests for validation gates."""

from datetime import date
from decimal import Decimal

import pytest

from pontos.gates import GateError, Gates


class TestG1CpfUniqueness:
    def test_new_cpf_passes(self, client_ana):
        assert Gates.cpf_uniqueness("11122233344").passed

    def test_existing_cpf_raises(self, client_ana):
        with pytest.raises(GateError, match="G1_CpfUniqueness") as exc_info:
            Gates.cpf_uniqueness("12345678901")
        assert exc_info.value.details["existing_client_code"] == "1234"

    def test_exclude_self(self, client_ana):
        assert Gates.check_cpf_uniqueness("12345678901", exclude_client_id=client_ana.pk)


class TestG2MultiplierRange:
    @pytest.mark.parametrize("value", [1, 2, 10, "3", 2.0, Decimal("4")])
    def test_valid(self, value):
        assert Gates.check_multiplier_range(value)

    @pytest.mark.parametrize("value", [0, -1, "0", "abc", "1.5", 1.5, None, True])
    def test_invalid(self, value):
        with pytest.raises(GateError, match="G2_MultiplierRange"):
            Gates.multiplier_range(value)


class TestG3PromotionPeriod:
    def test_open_period(self):
        assert Gates.check_promotion_period(None, None)
        assert Gates.check_promotion_period(date(2024, 1, 1), None)

    def test_same_day(self):
        assert Gates.check_promotion_period(date(2024, 1, 1), date(2024, 1, 1))

    def test_inverted(self):
        with pytest.raises(GateError, match="G3_PromotionPeriod"):
            Gates.promotion_period(date(2024, 2, 1), date(2024, 1, 1))


class TestG4SufficientBonus:
    def test_exact_balance(self):
        assert Gates.check_sufficient_bonus(Decimal("10"), Decimal("10.00"))

    def test_exceeds(self):
        assert not Gates.check_sufficient_bonus(Decimal("8"), Decimal("5.00"))
