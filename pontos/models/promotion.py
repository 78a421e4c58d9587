"""Promotion model - point multiplier campaigns."""

from datetime import date, datetime

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


def _as_day(value: date | datetime | None) -> date:
    if value is None:
        return timezone.localdate()
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value).date()
        return value.date()
    return value


class Promotion(models.Model):
    """
    Named multiplier campaign.

    A promotion is valid on a given day when it is active and the day falls
    inside [starts_on, ends_on] (both inclusive, both optional).
    """

    name = models.CharField(_("nome"), max_length=120)
    multiplier = models.PositiveIntegerField(
        _("multiplicador"),
        default=2,
        validators=[MinValueValidator(1)],
    )
    is_active = models.BooleanField(_("ativo"), default=True, db_index=True)
    starts_on = models.DateField(_("início"), null=True, blank=True)
    ends_on = models.DateField(_("fim"), null=True, blank=True)

    created_at = models.DateTimeField(_("criado em"), auto_now_add=True)

    class Meta:
        verbose_name = _("promoção")
        verbose_name_plural = _("promoções")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(multiplier__gte=1),
                name="pontos_promotion_multiplier_gte_1",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.multiplier}x)"

    def is_valid_on(self, when: date | datetime | None = None) -> bool:
        day = _as_day(when)
        if not self.is_active:
            return False
        if self.starts_on and self.starts_on > day:
            return False
        if self.ends_on and self.ends_on < day:
            return False
        return True

    @property
    def is_currently_valid(self) -> bool:
        return self.is_valid_on()

    def is_expired_on(self, when: date | datetime | None = None) -> bool:
        return bool(self.ends_on and self.ends_on < _as_day(when))

    @property
    def effective_active(self) -> bool:
        """Stored flag, forced off once the end date has passed. Never persisted."""
        if self.is_expired_on():
            return False
        return self.is_active
