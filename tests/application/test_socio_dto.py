# tests/application/test_socio_dto.py
#
# Request/response validation for shareholders.
from __future__ import annotations

import uuid
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from api.application.dtos.socio_dto import AtualizarSocioRequest, CriarSocioRequest, SocioResponse
from api.domain.documento.enums import TipoDocumento
from api.domain.messages import ErrorMessages
from api.domain.socio.entities import Socio

EMPRESA_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")


def _payload(**kwargs: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "empresa_id": str(EMPRESA_ID),
        "nome": "Maria Souza",
        "documento": "529.982.247-25",
        "tipo_documento": "CPF",
    }
    payload.update(kwargs)
    return payload


def test_criar_socio_normaliza_documento():
    req = CriarSocioRequest(**_payload())
    assert req.documento == "52998224725"
    assert req.tipo_documento is TipoDocumento.CPF


def test_criar_socio_aceita_codigo_numerico_do_tipo():
    req = CriarSocioRequest(**_payload(documento="11.222.333/0001-81", tipo_documento=2))
    assert req.tipo_documento is TipoDocumento.CNPJ


def test_criar_socio_digito_verificador_errado():
    with pytest.raises(ValidationError, match=ErrorMessages.DOCUMENTO_INVALIDO):
        CriarSocioRequest(**_payload(documento="529.982.247-00"))


def test_criar_socio_documento_de_outro_tipo():
    with pytest.raises(ValidationError, match=ErrorMessages.DOCUMENTO_INVALIDO):
        CriarSocioRequest(**_payload(documento="11222333000181", tipo_documento="CPF"))


def test_criar_socio_documento_vazio():
    with pytest.raises(ValidationError, match=ErrorMessages.DOCUMENTO_OBRIGATORIO):
        CriarSocioRequest(**_payload(documento="..."))


def test_criar_socio_tipo_desconhecido():
    with pytest.raises(ValidationError, match=ErrorMessages.TIPO_DOCUMENTO_INVALIDO):
        CriarSocioRequest(**_payload(tipo_documento="RG"))


def test_criar_socio_cep_e_uf():
    req = CriarSocioRequest(**_payload(cep="01310-100", uf="sp"))
    assert req.cep == "01310100"
    assert req.uf == "SP"


def test_criar_socio_cep_invalido():
    with pytest.raises(ValidationError, match=ErrorMessages.CEP_INVALIDO):
        CriarSocioRequest(**_payload(cep="0131"))


def test_criar_socio_data_nascimento_futura():
    amanha = date.today() + timedelta(days=1)
    with pytest.raises(ValidationError, match=ErrorMessages.DATA_NASCIMENTO_INVALIDA):
        CriarSocioRequest(**_payload(data_nascimento=amanha.isoformat()))


def test_criar_socio_email_invalido():
    with pytest.raises(ValidationError):
        CriarSocioRequest(**_payload(email="nao-e-email"))


def test_atualizar_sem_documento_e_valido():
    req = AtualizarSocioRequest(nome="Novo Nome")
    assert req.documento is None
    assert req.tipo_documento is None


def test_atualizar_documento_exige_tipo():
    with pytest.raises(ValidationError, match="Tipo de documento e obrigatorio"):
        AtualizarSocioRequest(documento="52998224725")


def test_atualizar_tipo_exige_documento():
    with pytest.raises(ValidationError, match=ErrorMessages.DOCUMENTO_OBRIGATORIO):
        AtualizarSocioRequest(tipo_documento="CNPJ")


def test_atualizar_documento_e_tipo_validos():
    req = AtualizarSocioRequest(documento="33.000.167/0001-01", tipo_documento="cnpj")
    assert req.documento == "33000167000101"


def test_atualizar_documento_invalido():
    with pytest.raises(ValidationError, match=ErrorMessages.DOCUMENTO_INVALIDO):
        AtualizarSocioRequest(documento="11222333000100", tipo_documento="CNPJ")


def test_response_mascara_cpf():
    socio = Socio.criar(uuid.uuid4(), EMPRESA_ID, "Maria", "52998224725", TipoDocumento.CPF)
    resp = SocioResponse.from_domain(socio, mascarar_cpf=True)
    assert resp.documento_formatado == "***.982.247-**"
    assert "52998224725" not in resp.model_dump_json()


def test_response_sem_mascara():
    socio = Socio.criar(uuid.uuid4(), EMPRESA_ID, "Maria", "52998224725", TipoDocumento.CPF)
    resp = SocioResponse.from_domain(socio, mascarar_cpf=False)
    assert resp.documento_formatado == "529.982.247-25"


def test_response_cnpj_nunca_mascarado():
    socio = Socio.criar(uuid.uuid4(), EMPRESA_ID, "Fundo", "11222333000181", TipoDocumento.CNPJ)
    resp = SocioResponse.from_domain(socio, mascarar_cpf=True)
    assert resp.documento_formatado == "11.222.333/0001-81"
    assert resp.tipo_documento is TipoDocumento.CNPJ
