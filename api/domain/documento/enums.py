# api/domain/documento/enums.py
from __future__ import annotations

from enum import StrEnum

# Codigos numericos usados pelos cadastros legados (1 = CPF, 2 = CNPJ).
_CODIGOS_LEGADOS = {"1": "CPF", "2": "CNPJ"}


class TipoDocumento(StrEnum):
    CPF = "CPF"
    CNPJ = "CNPJ"

    @property
    def digitos(self) -> int:
        return 11 if self is TipoDocumento.CPF else 14

    @classmethod
    def parse(cls, valor: TipoDocumento | str | int) -> TipoDocumento:
        """Aceita o enum, 'cpf'/'CNPJ' em qualquer caixa, ou os codigos 1/2."""
        if isinstance(valor, cls):
            return valor
        texto = str(valor).strip().upper()
        texto = _CODIGOS_LEGADOS.get(texto, texto)
        try:
            return cls(texto)
        except ValueError:
            raise ValueError(f"Tipo de documento invalido: {valor!r}") from None
