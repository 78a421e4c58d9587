"""Withdrawal service - redeem bonus credit.

Flow:
    1. Lookup client by CPF or code (not found -> CLIENT_NOT_FOUND)
    2. Reject when amount exceeds bonus (INSUFFICIENT_BONUS, nothing written)
    3. Debit bonus and amount / 10 * 500 points (floored at zero)
    4. Append withdrawal Transaction (negative points, multiplier 1)
"""

import logging
from dataclasses import dataclass

from django.db import transaction
from django.utils import timezone

from pontos.calculator import WithdrawalComputation, compute_withdrawal, to_decimal
from pontos.exceptions import PontosError
from pontos.models import Client, Transaction, TransactionType
from pontos.receipts import WithdrawalReceipt, render_receipt
from pontos.services import clients as client_service
from pontos.signals import bonus_withdrawn

logger = logging.getLogger(__name__)


@dataclass
class WithdrawalResult:
    client: Client
    transaction: Transaction
    result: WithdrawalComputation
    receipt: WithdrawalReceipt

    @property
    def receipt_text(self) -> str:
        return render_receipt(self.receipt)

    @property
    def message(self) -> str:
        return "\n".join(
            [
                f"R$ {self.result.amount:.2f} retirados",
                f"Saldo restante: R$ {self.result.new_bonus:.2f}",
                f"Pontos restantes: {self.result.new_points}",
            ]
        )

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
            "points_removed": self.result.points_removed,
            "new_points": self.result.new_points,
            "new_bonus": str(self.result.new_bonus),
            "message": self.message,
            "receipt": self.receipt.as_dict(),
            "receipt_text": self.receipt_text,
        }


def withdraw_bonus(identifier: str, amount) -> WithdrawalResult:
    """
    Redeem bonus for a client.

    Args:
        identifier: CPF or 4-digit code, kept as typed for the receipt
        amount: R$ to withdraw

    Returns:
        WithdrawalResult with the printable receipt

    Raises:
        PontosError: CLIENT_NOT_FOUND, INVALID_AMOUNT, INSUFFICIENT_BONUS
    """
    amount = to_decimal(amount)

    with transaction.atomic():
        client = client_service.get_or_raise(identifier, for_update=True)

        try:
            computation = compute_withdrawal(amount, client.points, client.bonus)
        except PontosError as exc:
            logger.warning(
                "Withdrawal rejected: client=%s amount=%s code=%s",
                client.code,
                amount,
                exc.code,
            )
            raise

        client_service.update_balances(client, computation.new_points, computation.new_bonus)

        tx = Transaction.objects.create(
            client=client,
            transaction_type=TransactionType.WITHDRAWAL,
            amount=computation.amount,
            points=-computation.points_removed,
            multiplier=1,
        )

    logger.info(
        "Withdrawal: client=%s amount=%s points_removed=%s bonus_left=%s",
        client.code,
        computation.amount,
        computation.points_removed,
        computation.new_bonus,
    )

    bonus_withdrawn.send(sender=Client, client=client, transaction=tx, result=computation)

    receipt = WithdrawalReceipt(
        client_name=client.name,
        identifier=identifier,
        amount=computation.amount,
        remaining_bonus=computation.new_bonus,
        remaining_points=computation.new_points,
        issued_at=tx.created_at or timezone.now(),
    )

    return WithdrawalResult(
        client=client,
        transaction=tx,
        result=computation,
        receipt=receipt,
    )
