# api/application/dtos/empresa_dto.py
from __future__ import annotations

import uuid

from pydantic import BaseModel, Field, field_validator

from api.domain.documento.validator import is_valid_cnpj, normalize
from api.domain.empresa.entities import Empresa, FormaJuridica
from api.domain.messages import ErrorMessages


class CriarEmpresaRequest(BaseModel):
    cliente_id: uuid.UUID
    razao_social: str = Field(..., min_length=1, max_length=200)
    nome_fantasia: str | None = Field(None, max_length=200)
    cnpj: str
    forma_juridica: FormaJuridica = FormaJuridica.LTDA

    @field_validator("cnpj")
    @classmethod
    def _cnpj(cls, v: str) -> str:
        digitos = normalize(v)
        if not digitos:
            raise ValueError(ErrorMessages.CNPJ_OBRIGATORIO)
        if not is_valid_cnpj(digitos):
            raise ValueError(ErrorMessages.CNPJ_INVALIDO)
        return digitos


class EmpresaResponse(BaseModel):
    id: uuid.UUID
    cliente_id: uuid.UUID
    razao_social: str
    nome_fantasia: str | None
    cnpj: str
    cnpj_formatado: str
    forma_juridica: FormaJuridica

    @classmethod
    def from_domain(cls, empresa: Empresa) -> EmpresaResponse:
        return cls(
            id=empresa.id,
            cliente_id=empresa.cliente_id,
            razao_social=empresa.razao_social,
            nome_fantasia=empresa.nome_fantasia,
            cnpj=empresa.cnpj.valor,
            cnpj_formatado=empresa.cnpj_formatado,
            forma_juridica=empresa.forma_juridica,
        )
