from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class PontosConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pontos"
    verbose_name = _("Pontos+ - Programa de Fidelidade")
