"""Transaction model - append-only points ledger."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class TransactionType(models.TextChoices):
    PURCHASE = "purchase", _("Compra")
    WITHDRAWAL = "withdrawal", _("Retirada")


class Transaction(models.Model):
    """
    Immutable ledger entry.

    One row per purchase or bonus withdrawal. Points are positive for
    purchases and negative for withdrawals. Rows are never updated or deleted.
    """

    client = models.ForeignKey(
        "pontos.Client",
        on_delete=models.PROTECT,
        related_name="transactions",
        verbose_name=_("cliente"),
    )
    transaction_type = models.CharField(
        _("tipo"),
        max_length=20,
        choices=TransactionType.choices,
        db_index=True,
    )
    amount = models.DecimalField(_("valor"), max_digits=12, decimal_places=2)
    points = models.IntegerField(
        _("pontos gerados"),
        help_text=_("Positivo para compra, negativo para retirada"),
    )
    multiplier = models.PositiveIntegerField(_("multiplicador"), default=1)

    created_at = models.DateTimeField(_("criado em"), auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = _("transação")
        verbose_name_plural = _("transações")
        ordering = ["-created_at", "-pk"]
        indexes = [
            models.Index(
                fields=["transaction_type", "-created_at"],
                name="pontos_tx_type_created_idx",
            ),
        ]

    def __str__(self):
        sign = "+" if self.points > 0 else ""
        return f"{sign}{self.points}pts - {self.get_transaction_type_display()}"

    def save(self, *args, **kwargs):
        if self.pk is not None and not self._state.adding:
            raise ValueError("Transactions are append-only and cannot be updated.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Transactions are append-only and cannot be deleted.")
