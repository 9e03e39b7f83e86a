# api/domain/socio/entities.py
from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field
from enum import StrEnum

from api.domain.documento.enums import TipoDocumento
from api.domain.documento.value_objects import Documento
from api.domain.messages import ErrorMessages


class TipoSocio(StrEnum):
    FUNDADOR = "FUNDADOR"
    INVESTIDOR = "INVESTIDOR"
    FUNCIONARIO = "FUNCIONARIO"
    CONSELHEIRO = "CONSELHEIRO"
    ESOP = "ESOP"
    OUTRO = "OUTRO"


class StatusSocio(StrEnum):
    ATIVO = "ATIVO"
    INATIVO = "INATIVO"
    PENDENTE = "PENDENTE"
    DESLIGADO = "DESLIGADO"


@dataclass(frozen=True)
class Socio:
    """Titular de participacao no cap table de uma empresa.

    Pessoa fisica (CPF) ou juridica (CNPJ). O documento e guardado apenas com
    digitos; a forma pontuada e derivada na exibicao.
    """
    cliente_id: uuid.UUID
    empresa_id: uuid.UUID
    nome: str
    documento: Documento
    tipo: TipoSocio = TipoSocio.FUNDADOR
    status: StatusSocio = StatusSocio.ATIVO
    email: str | None = None
    telefone: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError(ErrorMessages.NOME_OBRIGATORIO)

    @classmethod
    def criar(
        cls,
        cliente_id: uuid.UUID,
        empresa_id: uuid.UUID,
        nome: str,
        documento: str,
        tipo_documento: TipoDocumento | str | int,
        tipo: TipoSocio = TipoSocio.FUNDADOR,
        email: str | None = None,
        telefone: str | None = None,
    ) -> Socio:
        return cls(
            cliente_id=cliente_id,
            empresa_id=empresa_id,
            nome=nome.strip(),
            documento=Documento(documento, tipo_documento),
            tipo=tipo,
            email=email.strip() if email else None,
            telefone=telefone.strip() if telefone else None,
        )

    def com_documento(self, documento: str, tipo_documento: TipoDocumento | str | int) -> Socio:
        """Copia do socio com o documento trocado. O original nao muda."""
        return dataclasses.replace(self, documento=Documento(documento, tipo_documento))

    @property
    def pessoa_juridica(self) -> bool:
        return self.documento.tipo is TipoDocumento.CNPJ

    @property
    def documento_formatado(self) -> str:
        return self.documento.formatado
