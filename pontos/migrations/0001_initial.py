# Generated migration for Client, Promotion and Transaction

import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Client",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("uuid", models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ("name", models.CharField(max_length=200, verbose_name="nome")),
                (
                    "cpf",
                    models.CharField(
                        help_text="Apenas números",
                        max_length=11,
                        unique=True,
                        verbose_name="CPF",
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        help_text="Código de 4 dígitos usado no balcão",
                        max_length=4,
                        unique=True,
                        verbose_name="código",
                    ),
                ),
                ("phone", models.CharField(blank=True, max_length=20, verbose_name="telefone")),
                (
                    "points",
                    models.IntegerField(
                        default=0,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="pontos",
                    ),
                ),
                (
                    "bonus",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                        verbose_name="bônus",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="criado em"),
                ),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
            ],
            options={
                "verbose_name": "cliente",
                "verbose_name_plural": "clientes",
                "ordering": ["-points", "name"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(points__gte=0),
                        name="pontos_client_points_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(bonus__gte=0),
                        name="pontos_client_bonus_non_negative",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Promotion",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=120, verbose_name="nome")),
                (
                    "multiplier",
                    models.PositiveIntegerField(
                        default=2,
                        validators=[django.core.validators.MinValueValidator(1)],
                        verbose_name="multiplicador",
                    ),
                ),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="ativo")),
                ("starts_on", models.DateField(blank=True, null=True, verbose_name="início")),
                ("ends_on", models.DateField(blank=True, null=True, verbose_name="fim")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
            ],
            options={
                "verbose_name": "promoção",
                "verbose_name_plural": "promoções",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(multiplier__gte=1),
                        name="pontos_promotion_multiplier_gte_1",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Transaction",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "transaction_type",
                    models.CharField(
                        choices=[("purchase", "Compra"), ("withdrawal", "Retirada")],
                        db_index=True,
                        max_length=20,
                        verbose_name="tipo",
                    ),
                ),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="valor")),
                (
                    "points",
                    models.IntegerField(
                        help_text="Positivo para compra, negativo para retirada",
                        verbose_name="pontos gerados",
                    ),
                ),
                ("multiplier", models.PositiveIntegerField(default=1, verbose_name="multiplicador")),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="criado em"),
                ),
                (
                    "client",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="transactions",
                        to="pontos.client",
                        verbose_name="cliente",
                    ),
                ),
            ],
            options={
                "verbose_name": "transação",
                "verbose_name_plural": "transações",
                "ordering": ["-created_at", "-pk"],
                "indexes": [
                    models.Index(
                        fields=["transaction_type", "-created_at"],
                        name="pontos_tx_type_created_idx",
                    ),
                ],
            },
        ),
    ]
