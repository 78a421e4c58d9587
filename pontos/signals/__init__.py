"""
Pontos signals - public event API.

Emitted signals:
- client_created: Emitted by services.clients.create()
- purchase_registered: Emitted by services.purchases.register_purchase()
- bonus_withdrawn: Emitted by services.withdrawals.withdraw_bonus()
- promotion_changed: Emitted by services.promotions create/toggle/delete
"""

from django.dispatch import Signal

client_created = Signal()  # sender=Client, client=Client
purchase_registered = Signal()  # sender=Client, client, transaction, result
bonus_withdrawn = Signal()  # sender=Client, client, transaction, result
promotion_changed = Signal()  # sender=Promotion, promotion, action
