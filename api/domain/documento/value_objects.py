# api/domain/documento/value_objects.py
from __future__ import annotations

from dataclasses import dataclass

from api.domain.messages import ErrorMessages

from .enums import TipoDocumento
from .validator import (
    CNPJ_DIGITOS,
    CPF_DIGITOS,
    format_cnpj,
    format_cpf,
    format_document,
    is_valid_cnpj,
    is_valid_cpf,
    is_valid_document,
    mask_cpf,
    normalize,
)


def _digitos_ou_erro(raw: str, nome: str, comprimento: int) -> str:
    digitos = normalize(raw)
    if len(digitos) != comprimento:
        raise ValueError(f"{nome} invalido: comprimento {len(digitos)}, esperado {comprimento}")
    if len(set(digitos)) == 1:
        raise ValueError(f"{nome} invalido: todos digitos iguais")
    return digitos


@dataclass(frozen=True)
class CPF:
    """Value Object imutavel para CPF. NUNCA expoe valor completo em repr/str (LGPD)."""
    _valor: str  # sempre 11 digitos

    def __init__(self, raw: str) -> None:
        digitos = _digitos_ou_erro(raw, "CPF", CPF_DIGITOS)
        if not is_valid_cpf(digitos):
            raise ValueError("CPF invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """11 digitos sem formatacao. Usar com cuidado, nunca logar."""
        return self._valor

    @property
    def formatado(self) -> str:
        return format_cpf(self._valor)

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-** (formato seguro para logs)"""
        return mask_cpf(self._valor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CPF):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 14 digitos sem formatacao

    def __init__(self, raw: str) -> None:
        digitos = _digitos_ou_erro(raw, "CNPJ", CNPJ_DIGITOS)
        if not is_valid_cnpj(digitos):
            raise ValueError("CNPJ invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """14 digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        return format_cnpj(self._valor)

    @property
    def raiz(self) -> str:
        """8 primeiros digitos (cnpj_basico), comum a matriz e filiais."""
        return self._valor[:8]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNPJ):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True)
class Documento:
    """CPF ou CNPJ, conforme o tipo declarado por quem chama.

    O tipo nunca e inferido pelo numero de digitos: um CNPJ informado como
    CPF e rejeitado mesmo que seus digitos verificadores estejam corretos.
    """
    _valor: str
    tipo: TipoDocumento

    def __init__(self, raw: str, tipo: TipoDocumento | str | int) -> None:
        tipo = TipoDocumento.parse(tipo)
        if not normalize(raw):
            raise ValueError(ErrorMessages.DOCUMENTO_OBRIGATORIO)
        if not is_valid_document(raw, tipo):
            raise ValueError(ErrorMessages.DOCUMENTO_INVALIDO)
        object.__setattr__(self, "_valor", normalize(raw))
        object.__setattr__(self, "tipo", tipo)

    @property
    def valor(self) -> str:
        return self._valor

    @property
    def formatado(self) -> str:
        return format_document(self._valor, self.tipo)

    def exibicao(self, mascarar_cpf: bool = True) -> str:
        """Forma de exibicao: CNPJ sempre formatado, CPF mascarado se pedido."""
        if self.tipo is TipoDocumento.CPF and mascarar_cpf:
            return mask_cpf(self._valor)
        return self.formatado

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Documento):
            return NotImplemented
        return (self._valor, self.tipo) == (other._valor, other.tipo)

    def __hash__(self) -> int:
        return hash((self._valor, self.tipo))

    def __repr__(self) -> str:
        return f"Documento({self.tipo.value}, {self.exibicao()!r})"

    def __str__(self) -> str:
        return self.exibicao()
