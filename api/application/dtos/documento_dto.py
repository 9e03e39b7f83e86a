# api/application/dtos/documento_dto.py
#
# Regras de documento compartilhadas pelos DTOs de requisicao.
#
# Design decisions:
#   - A verificacao completa dos digitos verificadores e feita aqui, na borda,
#     pelas mesmas funcoes puras usadas pelos value objects do dominio.
#   - Falhas viram ValueError com a mensagem de dominio; o pydantic as reune
#     em um unico ValidationError.
from __future__ import annotations

from api.domain.documento.enums import TipoDocumento
from api.domain.documento.validator import is_valid_document, normalize
from api.domain.messages import ErrorMessages


def parse_tipo_documento(valor: object) -> TipoDocumento:
    if valor is None:
        raise ValueError(ErrorMessages.TIPO_DOCUMENTO_OBRIGATORIO)
    try:
        return TipoDocumento.parse(valor)  # type: ignore[arg-type]
    except ValueError:
        raise ValueError(ErrorMessages.TIPO_DOCUMENTO_INVALIDO) from None


def exigir_documento_valido(documento: str, tipo: TipoDocumento) -> str:
    """Retorna os digitos do documento ou levanta ValueError com a mensagem de dominio."""
    digitos = normalize(documento)
    if not digitos:
        raise ValueError(ErrorMessages.DOCUMENTO_OBRIGATORIO)
    if not is_valid_document(digitos, tipo):
        raise ValueError(ErrorMessages.DOCUMENTO_INVALIDO)
    return digitos


def validar_cep(cep: str | None) -> str | None:
    if cep is None or not cep.strip():
        return None
    digitos = normalize(cep)
    if len(digitos) != 8:
        raise ValueError(ErrorMessages.CEP_INVALIDO)
    return digitos
