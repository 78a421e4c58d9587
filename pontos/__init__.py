"""
Pontos+ - Loyalty points for the store counter.

Usage:
    from pontos.services import clients, purchases, withdrawals, reports
    from pontos import PontosError

    confirmation = purchases.register_purchase("1234", Decimal("120.00"))
    result = withdrawals.withdraw_bonus("123.456.789-01", Decimal("10.00"))
    stats = reports.dashboard()
"""


def __getattr__(name):
    if name == "PontosError":
        from pontos.exceptions import PontosError

        return PontosError
    if name == "Gates":
        from pontos.gates import Gates

        return Gates
    if name == "GateError":
        from pontos.gates import GateError

        return GateError
    if name == "GateResult":
        from pontos.gates import GateResult

        return GateResult
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["PontosError", "Gates", "GateError", "GateResult"]
__version__ = "1.0.0"
