"""Pontos exceptions."""


class BaseError(Exception):
    """
    Structured exception with a machine-readable code.

    Subclasses declare `_default_messages` mapping codes to human messages.
    Extra keyword arguments are kept in `data` for API responses.
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "data": self.data}


class PontosError(BaseError):
    """
    Structured exception for loyalty operations.

    Usage:
        try:
            purchases.register_purchase("1234", Decimal("50.00"))
        except PontosError as e:
            if e.code == "CLIENT_NOT_FOUND":
                ask_for_registration()
    """

    _default_messages = {
        "CLIENT_NOT_FOUND": "Cliente não encontrado",
        "DUPLICATE_CPF": "CPF já cadastrado",
        "INVALID_NAME": "Nome é obrigatório",
        "INVALID_CPF": "CPF inválido",
        "INVALID_PHONE": "Telefone é obrigatório",
        "INVALID_BALANCE": "Saldo não pode ser negativo",
        "CODE_SPACE_EXHAUSTED": "Não há códigos disponíveis",
        "PROMOTION_NOT_FOUND": "Promoção não encontrada",
        "INVALID_MULTIPLIER": "Multiplicador deve ser um inteiro maior ou igual a 1",
        "INVALID_PERIOD": "Data de início posterior à data de fim",
        "INVALID_AMOUNT": "Valor inválido",
        "INSUFFICIENT_BONUS": "Saldo insuficiente",
    }

    @property
    def is_not_found(self) -> bool:
        return self.code.endswith("_NOT_FOUND")
