# api/domain/documento/validator.py
#
# CPF / CNPJ normalization, check-digit validation and display formatting.
#
# Design decisions:
#   - Plain module-level functions: one algorithm per document kind, no state.
#   - Validators absorb every malformed input into False (None, empty, wrong
#     length, repeated digits). Only the formatters raise: they never pad or
#     truncate an identifier.
#   - normalize keeps ASCII 0-9 only, not everything str.isdigit() accepts
#     ("²" and Arabic-Indic digits are dropped).
#   - The weight vectors and the mod-11 rule are Receita Federal constants.
#
# Invariants:
#   - normalize(normalize(x)) == normalize(x)
#   - is_valid_cpf(normalize(x)) == is_valid_cpf(x) (same for CNPJ)
from __future__ import annotations

from .enums import TipoDocumento

_ASCII_DIGITS = frozenset("0123456789")

CPF_DIGITOS = 11
CNPJ_DIGITOS = 14

_PESOS_CPF_1 = (10, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_CPF_2 = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_CNPJ_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_CNPJ_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


class InvalidLengthError(ValueError):
    """Raised when a formatter receives a digit count that does not match the
    target document kind. Never raised by the is_valid_* functions."""

    def __init__(self, tipo: str, esperado: int, recebido: int) -> None:
        super().__init__(
            f"{tipo} com comprimento invalido: esperado {esperado} digitos, recebido {recebido}"
        )
        self.tipo = tipo
        self.esperado = esperado
        self.recebido = recebido


def normalize(raw: str | None) -> str:
    """Strip every character that is not an ASCII decimal digit."""
    if not raw:
        return ""
    return "".join(c for c in raw if c in _ASCII_DIGITS)


def _digito_verificador(digitos: str, pesos: tuple[int, ...]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def check_digits_cpf(base: str) -> str:
    """Both CPF check digits for a 9-digit base, as a 2-char string.

    Raises:
        InvalidLengthError: if ``base`` does not normalize to 9 digits.
    """
    digitos = normalize(base)
    if len(digitos) != 9:
        raise InvalidLengthError("Base de CPF", 9, len(digitos))
    d1 = _digito_verificador(digitos, _PESOS_CPF_1)
    d2 = _digito_verificador(digitos + str(d1), _PESOS_CPF_2)
    return f"{d1}{d2}"


def check_digits_cnpj(base: str) -> str:
    """Both CNPJ check digits for a 12-digit base, as a 2-char string.

    Raises:
        InvalidLengthError: if ``base`` does not normalize to 12 digits.
    """
    digitos = normalize(base)
    if len(digitos) != 12:
        raise InvalidLengthError("Base de CNPJ", 12, len(digitos))
    d1 = _digito_verificador(digitos, _PESOS_CNPJ_1)
    d2 = _digito_verificador(digitos + str(d1), _PESOS_CNPJ_2)
    return f"{d1}{d2}"


def _estrutura_valida(digitos: str, comprimento: int) -> bool:
    return len(digitos) == comprimento and len(set(digitos)) > 1


def is_valid_cpf(raw: str | None) -> bool:
    """True if ``raw`` embeds an 11-digit CPF with correct check digits."""
    digitos = normalize(raw)
    if not _estrutura_valida(digitos, CPF_DIGITOS):
        return False
    return digitos[9:] == check_digits_cpf(digitos[:9])


def is_valid_cnpj(raw: str | None) -> bool:
    """True if ``raw`` embeds a 14-digit CNPJ with correct check digits."""
    digitos = normalize(raw)
    if not _estrutura_valida(digitos, CNPJ_DIGITOS):
        return False
    return digitos[12:] == check_digits_cnpj(digitos[:12])


def is_valid_document(raw: str | None, tipo: TipoDocumento) -> bool:
    """Dispatch on the caller-declared kind. Length alone never picks the kind."""
    if tipo is TipoDocumento.CPF:
        return is_valid_cpf(raw)
    if tipo is TipoDocumento.CNPJ:
        return is_valid_cnpj(raw)
    return False


def format_cpf(digits: str) -> str:
    """DDD.DDD.DDD-DD

    Raises:
        InvalidLengthError: unless ``digits`` normalizes to exactly 11 digits.
    """
    d = normalize(digits)
    if len(d) != CPF_DIGITOS:
        raise InvalidLengthError("CPF", CPF_DIGITOS, len(d))
    return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"


def format_cnpj(digits: str) -> str:
    """DD.DDD.DDD/DDDD-DD

    Raises:
        InvalidLengthError: unless ``digits`` normalizes to exactly 14 digits.
    """
    d = normalize(digits)
    if len(d) != CNPJ_DIGITOS:
        raise InvalidLengthError("CNPJ", CNPJ_DIGITOS, len(d))
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


def format_document(digits: str, tipo: TipoDocumento) -> str:
    if tipo is TipoDocumento.CNPJ:
        return format_cnpj(digits)
    return format_cpf(digits)


def mask_cpf(digits: str) -> str:
    """***.DDD.DDD-** — only the middle six digits, safe for logs (LGPD)."""
    d = normalize(digits)
    if len(d) != CPF_DIGITOS:
        raise InvalidLengthError("CPF", CPF_DIGITOS, len(d))
    return f"***.{d[3:6]}.{d[6:9]}-**"
