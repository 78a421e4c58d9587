"""Promotion service - multiplier campaigns."""

import logging
from datetime import date

from django.db.models import Q
from django.utils import timezone

from pontos.exceptions import PontosError
from pontos.gates import GateError, Gates
from pontos.models import Promotion
from pontos.signals import promotion_changed

logger = logging.getLogger(__name__)


def get(promotion_id) -> Promotion | None:
    try:
        return Promotion.objects.get(pk=promotion_id)
    except (Promotion.DoesNotExist, ValueError, TypeError):
        return None


def _get_or_raise(promotion_id) -> Promotion:
    promotion = get(promotion_id)
    if promotion is None:
        raise PontosError("PROMOTION_NOT_FOUND", promotion_id=promotion_id)
    return promotion


def list_valid(today: date | None = None) -> list[Promotion]:
    """Active promotions whose [starts_on, ends_on] window contains today."""
    today = today or timezone.localdate()
    return list(
        Promotion.objects.filter(is_active=True)
        .filter(Q(starts_on__isnull=True) | Q(starts_on__lte=today))
        .filter(Q(ends_on__isnull=True) | Q(ends_on__gte=today))
        .order_by("-multiplier", "name")
    )


def list_all() -> list[Promotion]:
    """Every promotion, newest first. Use .effective_active for display."""
    return list(Promotion.objects.order_by("-created_at", "-pk"))


def create(
    name: str,
    multiplier,
    starts_on: date | None = None,
    ends_on: date | None = None,
) -> Promotion:
    """
    Create an active promotion.

    Raises:
        PontosError: INVALID_NAME, INVALID_MULTIPLIER, INVALID_PERIOD
    """
    name = (name or "").strip()
    if not name:
        raise PontosError("INVALID_NAME")

    try:
        Gates.multiplier_range(multiplier)
    except GateError as exc:
        raise PontosError("INVALID_MULTIPLIER", **exc.details)

    try:
        Gates.promotion_period(starts_on, ends_on)
    except GateError as exc:
        raise PontosError("INVALID_PERIOD", **exc.details)

    promotion = Promotion.objects.create(
        name=name,
        multiplier=int(multiplier),
        starts_on=starts_on,
        ends_on=ends_on,
        is_active=True,
    )
    logger.info("Promotion created: %s", promotion)
    promotion_changed.send(sender=Promotion, promotion=promotion, action="created")
    return promotion


def toggle(promotion_id) -> Promotion:
    """Flip the stored active flag."""
    promotion = _get_or_raise(promotion_id)
    promotion.is_active = not promotion.is_active
    promotion.save(update_fields=["is_active"])
    logger.info("Promotion %s active=%s", promotion.pk, promotion.is_active)
    promotion_changed.send(sender=Promotion, promotion=promotion, action="toggled")
    return promotion


def delete(promotion_id) -> None:
    """Remove a promotion permanently."""
    promotion = _get_or_raise(promotion_id)
    promotion.delete()
    logger.info("Promotion deleted: %s", promotion)
    promotion_changed.send(sender=Promotion, promotion=promotion, action="deleted")


def resolve_multiplier(promotion_id, today: date | None = None) -> tuple[int, Promotion | None]:
    """
    Multiplier to apply for a selected promotion.

    Returns (promotion.multiplier, promotion) when the promotion exists and is
    valid today, otherwise (1, None).
    """
    if promotion_id in (None, "", "none"):
        return 1, None

    promotion = get(promotion_id)
    if promotion is None or not promotion.is_valid_on(today):
        logger.info("Promotion %s not valid, falling back to 1x", promotion_id)
        return 1, None

    return promotion.multiplier, promotion
