"""
Pontos configuration.

Usage in settings.py:
    PONTOS = {
        "STORE_NAME": "FERRAGENS NATAL",
        "POINTS_PER_MILESTONE": 500,
        "BONUS_PER_MILESTONE": 10,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class PontosSettings:
    """Pontos configuration settings."""

    # Printed on receipts and reports
    STORE_NAME: str = "FERRAGENS NATAL"

    # Every POINTS_PER_MILESTONE points convert into BONUS_PER_MILESTONE (R$)
    POINTS_PER_MILESTONE: int = 500
    BONUS_PER_MILESTONE: int = 10

    # Short client code
    CODE_LENGTH: int = 4
    CODE_MAX_ATTEMPTS: int = 50

    # Transaction history size
    HISTORY_LIMIT: int = 50

    # Thermal printer columns
    RECEIPT_WIDTH: int = 32


def get_pontos_settings() -> PontosSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "PONTOS", {})
    return PontosSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_pontos_settings(), name)


pontos_settings = _LazySettings()
