# api/domain/cliente/entities.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import StrEnum

from api.domain.documento.enums import TipoDocumento
from api.domain.documento.value_objects import Documento
from api.domain.messages import ErrorMessages


class StatusCliente(StrEnum):
    ATIVO = "ATIVO"
    INATIVO = "INATIVO"
    SUSPENSO = "SUSPENSO"


@dataclass(frozen=True)
class Cliente:
    """Organizacao contratante (tenant). Pode ser pessoa fisica ou juridica."""
    nome: str
    documento: Documento
    email: str
    nome_fantasia: str | None = None
    telefone: str | None = None
    status: StatusCliente = StatusCliente.ATIVO
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError(ErrorMessages.NOME_OBRIGATORIO)
        if "@" not in self.email:
            raise ValueError(f"Email invalido: {self.email!r}")

    @classmethod
    def criar(
        cls,
        nome: str,
        documento: str,
        tipo_documento: TipoDocumento | str | int,
        email: str,
        nome_fantasia: str | None = None,
        telefone: str | None = None,
    ) -> Cliente:
        return cls(
            nome=nome.strip(),
            documento=Documento(documento, tipo_documento),
            email=email.strip().lower(),
            nome_fantasia=nome_fantasia.strip() if nome_fantasia else None,
            telefone=telefone.strip() if telefone else None,
        )

    @property
    def documento_formatado(self) -> str:
        return self.documento.formatado
