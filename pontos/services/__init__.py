"""Pontos services.

- clients: lookup by CPF/code, registration, balances
- promotions: multiplier campaigns
- purchases: point accrual
- withdrawals: bonus redemption
- reports: dashboard, history, daily withdrawals
"""

from pontos.services import clients
from pontos.services import promotions
from pontos.services import purchases
from pontos.services import withdrawals
from pontos.services import reports

__all__ = ["clients", "promotions", "purchases", "withdrawals", "reports"]
