# api/domain/empresa/entities.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import StrEnum

from api.domain.documento.value_objects import CNPJ
from api.domain.messages import ErrorMessages


class FormaJuridica(StrEnum):
    LTDA = "LTDA"
    SA = "SA"
    EIRELI = "EIRELI"
    MEI = "MEI"
    SLU = "SLU"
    OUTRA = "OUTRA"


@dataclass(frozen=True)
class Empresa:
    """Empresa cujo quadro societario e gerido. Sempre identificada por CNPJ valido."""
    cliente_id: uuid.UUID
    razao_social: str
    cnpj: CNPJ
    forma_juridica: FormaJuridica = FormaJuridica.LTDA
    nome_fantasia: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not self.razao_social.strip():
            raise ValueError(ErrorMessages.NOME_OBRIGATORIO)

    @classmethod
    def criar(
        cls,
        cliente_id: uuid.UUID,
        razao_social: str,
        cnpj: str,
        forma_juridica: FormaJuridica = FormaJuridica.LTDA,
        nome_fantasia: str | None = None,
    ) -> Empresa:
        if not cnpj or not cnpj.strip():
            raise ValueError(ErrorMessages.CNPJ_OBRIGATORIO)
        try:
            cnpj_vo = CNPJ(cnpj)
        except ValueError:
            raise ValueError(ErrorMessages.CNPJ_INVALIDO) from None
        return cls(
            cliente_id=cliente_id,
            razao_social=razao_social.strip(),
            cnpj=cnpj_vo,
            forma_juridica=forma_juridica,
            nome_fantasia=nome_fantasia.strip() if nome_fantasia else None,
        )

    @property
    def cnpj_formatado(self) -> str:
        return self.cnpj.formatado
