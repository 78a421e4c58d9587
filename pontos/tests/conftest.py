"""Pytest fixtures for Pontos tests."""

from decimal import Decimal

import pytest

from pontos.models import Client, Promotion


@pytest.fixture
def client_ana(db):
    """Client with empty balances."""
    return Client.objects.create(
        name="Ana Souza",
        cpf="123.456.789-01",
        code="1234",
        phone="84999990001",
    )


@pytest.fixture
def client_bruno(db):
    """Client with one milestone reached (500 points, R$10 bonus)."""
    return Client.objects.create(
        name="Bruno Lima",
        cpf="98765432100",
        code="4321",
        phone="84999990002",
        points=500,
        bonus=Decimal("10.00"),
    )


@pytest.fixture
def promotion_2x(db):
    """Open-ended 2x promotion."""
    return Promotion.objects.create(name="Dobro de Pontos", multiplier=2)


@pytest.fixture
def staff_user(db, django_user_model):
    return django_user_model.objects.create_user(username="caixa", password="senha-caixa")


@pytest.fixture
def api(client, staff_user):
    """Django test client logged in as store staff."""
    client.force_login(staff_user)
    return client
