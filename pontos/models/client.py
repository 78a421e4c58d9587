"""Client model.

Identification:
    cpf   - canonical digits-only CPF, globally unique
    code  - short 4-digit code handed to the customer at the counter,
            globally unique, assigned by services.clients.generate_unique_code()

Balances:
    points - accumulated points (never negative)
    bonus  - R$ credit derived from point milestones (never negative)
"""

import uuid as uuid_lib
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from pontos.utils import format_cpf, format_phone, only_digits


class Client(models.Model):
    """Store customer enrolled in the points program."""

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True)

    name = models.CharField(_("nome"), max_length=200)
    cpf = models.CharField(
        _("CPF"),
        max_length=11,
        unique=True,
        help_text=_("Apenas números"),
    )
    code = models.CharField(
        _("código"),
        max_length=4,
        unique=True,
        help_text=_("Código de 4 dígitos usado no balcão"),
    )
    phone = models.CharField(_("telefone"), max_length=20, blank=True)

    points = models.IntegerField(
        _("pontos"),
        default=0,
        validators=[MinValueValidator(0)],
    )
    bonus = models.DecimalField(
        _("bônus"),
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    created_at = models.DateTimeField(_("criado em"), auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(_("atualizado em"), auto_now=True)

    class Meta:
        verbose_name = _("cliente")
        verbose_name_plural = _("clientes")
        ordering = ["-points", "name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(points__gte=0),
                name="pontos_client_points_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(bonus__gte=0),
                name="pontos_client_bonus_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.code})"

    @property
    def cpf_display(self) -> str:
        return format_cpf(self.cpf)

    @property
    def phone_display(self) -> str:
        return format_phone(self.phone)

    def save(self, *args, **kwargs):
        self.cpf = only_digits(self.cpf)
        self.name = self.name.strip()
        super().save(*args, **kwargs)
