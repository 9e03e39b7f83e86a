# api/application/dtos/socio_dto.py
from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from api.domain.documento.enums import TipoDocumento
from api.domain.messages import ErrorMessages
from api.domain.socio.entities import Socio, StatusSocio, TipoSocio
from api.infrastructure.config import get_settings

from .documento_dto import exigir_documento_valido, parse_tipo_documento, validar_cep


class _DadosPessoais(BaseModel):
    email: EmailStr | None = None
    telefone: str | None = Field(None, max_length=20)
    cep: str | None = None
    uf: str | None = Field(None, min_length=2, max_length=2)
    data_nascimento: date | None = None

    @field_validator("cep")
    @classmethod
    def _cep(cls, v: str | None) -> str | None:
        return validar_cep(v)

    @field_validator("uf")
    @classmethod
    def _uf(cls, v: str | None) -> str | None:
        return v.upper() if v else v

    @field_validator("data_nascimento")
    @classmethod
    def _data_nascimento(cls, v: date | None) -> date | None:
        if v is not None and v > date.today():
            raise ValueError(ErrorMessages.DATA_NASCIMENTO_INVALIDA)
        return v


class CriarSocioRequest(_DadosPessoais):
    empresa_id: uuid.UUID
    nome: str = Field(..., min_length=1, max_length=200)
    documento: str
    tipo_documento: TipoDocumento
    tipo: TipoSocio = TipoSocio.FUNDADOR

    @field_validator("nome")
    @classmethod
    def _nome(cls, v: str) -> str:
        if not v.strip():
            raise ValueError(ErrorMessages.NOME_OBRIGATORIO)
        return v.strip()

    @field_validator("tipo_documento", mode="before")
    @classmethod
    def _tipo_documento(cls, v: object) -> TipoDocumento:
        return parse_tipo_documento(v)

    @model_validator(mode="after")
    def _documento_confere_com_tipo(self) -> CriarSocioRequest:
        self.documento = exigir_documento_valido(self.documento, self.tipo_documento)
        return self


class AtualizarSocioRequest(_DadosPessoais):
    """Todos os campos opcionais. Documento e tipo so podem ser trocados juntos."""
    nome: str | None = Field(None, min_length=1, max_length=200)
    documento: str | None = None
    tipo_documento: TipoDocumento | None = None
    tipo: TipoSocio | None = None
    status: StatusSocio | None = None

    @field_validator("tipo_documento", mode="before")
    @classmethod
    def _tipo_documento(cls, v: object) -> TipoDocumento | None:
        return None if v is None else parse_tipo_documento(v)

    @model_validator(mode="after")
    def _documento_e_tipo_juntos(self) -> AtualizarSocioRequest:
        informou_documento = bool(self.documento and self.documento.strip())
        if not informou_documento and self.tipo_documento is None:
            self.documento = None
            return self
        if not informou_documento:
            raise ValueError(ErrorMessages.DOCUMENTO_OBRIGATORIO)
        if self.tipo_documento is None:
            raise ValueError(ErrorMessages.TIPO_DOCUMENTO_OBRIGATORIO)
        self.documento = exigir_documento_valido(self.documento or "", self.tipo_documento)
        return self


class SocioResponse(BaseModel):
    id: uuid.UUID
    cliente_id: uuid.UUID
    empresa_id: uuid.UUID
    nome: str
    documento_formatado: str
    tipo_documento: TipoDocumento
    tipo: TipoSocio
    status: StatusSocio
    email: str | None
    telefone: str | None

    @classmethod
    def from_domain(cls, socio: Socio, mascarar_cpf: bool | None = None) -> SocioResponse:
        if mascarar_cpf is None:
            mascarar_cpf = get_settings().mask_cpf
        return cls(
            id=socio.id,
            cliente_id=socio.cliente_id,
            empresa_id=socio.empresa_id,
            nome=socio.nome,
            documento_formatado=socio.documento.exibicao(mascarar_cpf),
            tipo_documento=socio.documento.tipo,
            tipo=socio.tipo,
            status=socio.status,
            email=socio.email,
            telefone=socio.telefone,
        )
