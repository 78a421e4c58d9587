"""Client service - lookup, registration and balances.

Lookup rule: a cleaned identifier with exactly CODE_LENGTH digits is a
client code, anything else is a CPF.
"""

import logging
import secrets
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.db.models import Q

from pontos.calculator import CENTS, to_decimal
from pontos.conf import pontos_settings
from pontos.exceptions import PontosError
from pontos.gates import GateError, Gates
from pontos.models import Client
from pontos.signals import client_created
from pontos.utils import only_digits

logger = logging.getLogger(__name__)

CPF_LENGTH = 11


def is_code(identifier: str) -> bool:
    """True when the cleaned identifier should be matched against client codes."""
    return len(only_digits(identifier)) == pontos_settings.CODE_LENGTH


def lookup(identifier: str) -> Client | None:
    """
    Find a client by CPF or short code.

    Args:
        identifier: CPF (any punctuation) or 4-digit code

    Returns:
        Client or None if not found
    """
    clean = only_digits(identifier)
    if not clean:
        return None

    field = "code" if is_code(clean) else "cpf"
    return Client.objects.filter(**{field: clean}).first()


def get_or_raise(identifier: str, for_update: bool = False) -> Client:
    """
    Lookup that raises instead of returning None.

    With for_update=True the row is locked; MUST be called inside
    transaction.atomic().

    Raises:
        PontosError: CLIENT_NOT_FOUND
    """
    clean = only_digits(identifier)
    if clean:
        field = "code" if is_code(clean) else "cpf"
        qs = Client.objects.filter(**{field: clean})
        if for_update:
            qs = qs.select_for_update()
        client = qs.first()
        if client:
            return client

    raise PontosError("CLIENT_NOT_FOUND", identifier=identifier)


def search(query: str = "", limit: int | None = None) -> list[Client]:
    """
    List clients by points (highest first), optionally filtered.

    Args:
        query: Substring of name (case-insensitive), CPF or code
        limit: Maximum results
    """
    qs = Client.objects.order_by("-points", "name")

    query = (query or "").strip()
    if query:
        qs = qs.filter(
            Q(name__icontains=query) | Q(cpf__contains=query) | Q(code__contains=query)
        )

    if limit:
        qs = qs[:limit]
    return list(qs)


def generate_unique_code() -> str:
    """
    Draw a zero-padded random code that no client uses.

    Falls back to the lowest free code after CODE_MAX_ATTEMPTS random misses.

    Raises:
        PontosError: CODE_SPACE_EXHAUSTED when every code is taken
    """
    length = pontos_settings.CODE_LENGTH
    space = 10**length

    for _ in range(pontos_settings.CODE_MAX_ATTEMPTS):
        candidate = str(secrets.randbelow(space)).zfill(length)
        if not Client.objects.filter(code=candidate).exists():
            return candidate

    taken = set(Client.objects.values_list("code", flat=True))
    for number in range(space):
        candidate = str(number).zfill(length)
        if candidate not in taken:
            return candidate

    raise PontosError("CODE_SPACE_EXHAUSTED")


def create(name: str, cpf: str, phone: str) -> Client:
    """
    Register a new client with a freshly generated code.

    Args:
        name: Full name
        cpf: CPF, any punctuation
        phone: Phone number

    Returns:
        Created Client

    Raises:
        PontosError: INVALID_NAME, INVALID_CPF, INVALID_PHONE, DUPLICATE_CPF
    """
    name = (name or "").strip()
    cpf = only_digits(cpf)
    phone = (phone or "").strip()

    if not name:
        raise PontosError("INVALID_NAME")
    if len(cpf) != CPF_LENGTH:
        raise PontosError("INVALID_CPF", cpf=cpf)
    if not only_digits(phone):
        raise PontosError("INVALID_PHONE")

    try:
        Gates.cpf_uniqueness(cpf)
    except GateError as exc:
        raise PontosError("DUPLICATE_CPF", **exc.details)

    try:
        with transaction.atomic():
            client = Client.objects.create(
                name=name,
                cpf=cpf,
                phone=phone,
                code=generate_unique_code(),
            )
    except IntegrityError:
        # Lost a race on cpf or code
        raise PontosError("DUPLICATE_CPF", cpf=cpf)

    logger.info("Client registered: %s (code %s)", client.name, client.code)
    # Deferred: create() may run inside a caller's atomic block
    transaction.on_commit(lambda: client_created.send(sender=Client, client=client))
    return client


def update_balances(client: Client, points: int, bonus) -> Client:
    """
    Overwrite a client's balances with absolute values.

    Callers read, compute and pass the final values; nothing is added.

    Raises:
        PontosError: INVALID_BALANCE if either value is negative
    """
    bonus = to_decimal(bonus).quantize(CENTS)
    if points < 0 or bonus < Decimal("0"):
        raise PontosError("INVALID_BALANCE", points=points, bonus=str(bonus))

    client.points = points
    client.bonus = bonus
    client.save(update_fields=["points", "bonus", "updated_at"])
    return client
