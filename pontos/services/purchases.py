"""Purchase service - accrue points at the counter.

Flow:
    1. Lookup client by CPF or code (not found -> CLIENT_NOT_FOUND, never auto-create)
    2. Resolve promotion multiplier (invalid/expired -> 1x)
    3. Compute points and bonus (pontos.calculator)
    4. Write balances + append purchase Transaction
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from django.db import transaction

from pontos.calculator import PurchaseResult, compute_purchase, to_decimal
from pontos.models import Client, Promotion, Transaction, TransactionType
from pontos.services import clients as client_service
from pontos.services import promotions as promotion_service
from pontos.signals import purchase_registered

logger = logging.getLogger(__name__)


@dataclass
class PurchaseConfirmation:
    """What the cashier sees after a purchase."""

    client: Client
    transaction: Transaction
    result: PurchaseResult
    promotion: Promotion | None = None
    client_created: bool = False

    @property
    def points_generated(self) -> int:
        return self.result.points_generated

    @property
    def bonus_generated(self) -> Decimal:
        return self.result.bonus_generated

    @property
    def message(self) -> str:
        lines = [f"{self.result.points_generated} pontos gerados"]
        if self.result.multiplier > 1:
            lines.append(f"Promoção {self.result.multiplier}x aplicada!")
        lines.append(f"Total de pontos: {self.result.new_points}")
        if self.result.bonus_generated > 0:
            lines.append(f"Bônus de R$ {self.result.bonus_generated:.2f} concedido!")
        lines.append(f"Código do cliente: {self.client.code}")
        return "\n".join(lines)

    def as_dict(self) -> dict:
        return {
            "client": {
                "id": self.client.pk,
                "name": self.client.name,
                "code": self.client.code,
                "points": self.client.points,
                "bonus": str(self.client.bonus),
            },
            "transaction_id": self.transaction.pk,
            "amount": str(self.result.amount),
            "multiplier": self.result.multiplier,
            "promotion": self.promotion.name if self.promotion else None,
            "points_generated": self.result.points_generated,
            "new_points": self.result.new_points,
            "new_bonus": str(self.result.new_bonus),
            "bonus_generated": str(self.result.bonus_generated),
            "client_created": self.client_created,
            "message": self.message,
        }


def register_purchase(identifier: str, amount, promotion_id=None) -> PurchaseConfirmation:
    """
    Register a purchase for an existing client.

    Args:
        identifier: CPF or 4-digit code
        amount: Purchase amount (R$)
        promotion_id: Selected promotion (optional)

    Returns:
        PurchaseConfirmation

    Raises:
        PontosError: CLIENT_NOT_FOUND (caller should offer registration),
                     INVALID_AMOUNT
    """
    amount = to_decimal(amount)

    with transaction.atomic():
        client = client_service.get_or_raise(identifier, for_update=True)
        return _process(client, amount, promotion_id)


def register_purchase_for_new_client(
    cpf: str,
    name: str,
    phone: str,
    amount,
    promotion_id=None,
) -> PurchaseConfirmation:
    """
    Register the client, then the purchase that triggered registration.

    Raises:
        PontosError: any client validation error, INVALID_AMOUNT
    """
    amount = to_decimal(amount)

    with transaction.atomic():
        client = client_service.create(name=name, cpf=cpf, phone=phone)
        confirmation = _process(client, amount, promotion_id)

    confirmation.client_created = True
    return confirmation


def _process(client: Client, amount: Decimal, promotion_id) -> PurchaseConfirmation:
    """Compute and persist. MUST be called inside transaction.atomic()."""
    multiplier, promotion = promotion_service.resolve_multiplier(promotion_id)

    result = compute_purchase(amount, multiplier, client.points, client.bonus)

    client_service.update_balances(client, result.new_points, result.new_bonus)

    tx = Transaction.objects.create(
        client=client,
        transaction_type=TransactionType.PURCHASE,
        amount=result.amount,
        points=result.points_generated,
        multiplier=result.multiplier,
    )

    logger.info(
        "Purchase: client=%s amount=%s multiplier=%s points=%s total=%s bonus=%s",
        client.code,
        result.amount,
        result.multiplier,
        result.points_generated,
        result.new_points,
        result.new_bonus,
    )

    transaction.on_commit(
        lambda: purchase_registered.send(
            sender=Client, client=client, transaction=tx, result=result
        )
    )

    return PurchaseConfirmation(
        client=client,
        transaction=tx,
        result=result,
        promotion=promotion,
    )
