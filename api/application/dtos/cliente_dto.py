# api/application/dtos/cliente_dto.py
from __future__ import annotations

import uuid

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from api.domain.cliente.entities import Cliente, StatusCliente
from api.domain.documento.enums import TipoDocumento
from api.infrastructure.config import get_settings

from .documento_dto import exigir_documento_valido, parse_tipo_documento


class CriarClienteRequest(BaseModel):
    nome: str = Field(..., min_length=1, max_length=200)
    nome_fantasia: str | None = Field(None, max_length=200)
    documento: str
    tipo_documento: TipoDocumento
    email: EmailStr
    telefone: str | None = Field(None, max_length=20)

    @field_validator("tipo_documento", mode="before")
    @classmethod
    def _tipo_documento(cls, v: object) -> TipoDocumento:
        return parse_tipo_documento(v)

    @model_validator(mode="after")
    def _documento_confere_com_tipo(self) -> CriarClienteRequest:
        self.documento = exigir_documento_valido(self.documento, self.tipo_documento)
        return self


class ClienteResponse(BaseModel):
    id: uuid.UUID
    nome: str
    nome_fantasia: str | None
    documento_formatado: str
    tipo_documento: TipoDocumento
    email: str
    status: StatusCliente

    @classmethod
    def from_domain(cls, cliente: Cliente, mascarar_cpf: bool | None = None) -> ClienteResponse:
        if mascarar_cpf is None:
            mascarar_cpf = get_settings().mask_cpf
        return cls(
            id=cliente.id,
            nome=cliente.nome,
            nome_fantasia=cliente.nome_fantasia,
            documento_formatado=cliente.documento.exibicao(mascarar_cpf),
            tipo_documento=cliente.documento.tipo,
            email=cliente.email,
            status=cliente.status,
        )
