import uuid

import pytest
from pydantic import ValidationError

from api.application.dtos.cliente_dto import ClienteResponse, CriarClienteRequest
from api.application.dtos.empresa_dto import CriarEmpresaRequest, EmpresaResponse
from api.domain.cliente.entities import Cliente
from api.domain.documento.enums import TipoDocumento
from api.domain.empresa.entities import Empresa
from api.domain.messages import ErrorMessages
from api.infrastructure.config import get_settings

CLIENTE_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


def test_criar_empresa_normaliza_cnpj():
    req = CriarEmpresaRequest(cliente_id=CLIENTE_ID, razao_social="Empresa", cnpj="11.222.333/0001-81")
    assert req.cnpj == "11222333000181"


def test_criar_empresa_cnpj_obrigatorio():
    with pytest.raises(ValidationError, match=ErrorMessages.CNPJ_OBRIGATORIO):
        CriarEmpresaRequest(cliente_id=CLIENTE_ID, razao_social="Empresa", cnpj="")


def test_criar_empresa_cnpj_invalido():
    with pytest.raises(ValidationError, match=ErrorMessages.CNPJ_INVALIDO):
        CriarEmpresaRequest(cliente_id=CLIENTE_ID, razao_social="Empresa", cnpj="11222333000100")


def test_empresa_response():
    empresa = Empresa.criar(CLIENTE_ID, "Empresa Teste LTDA", "11222333000181")
    resp = EmpresaResponse.from_domain(empresa)
    assert resp.cnpj == "11222333000181"
    assert resp.cnpj_formatado == "11.222.333/0001-81"


def test_criar_cliente_cpf():
    req = CriarClienteRequest(
        nome="Joao", documento="529.982.247-25", tipo_documento="CPF", email="joao@exemplo.com"
    )
    assert req.documento == "52998224725"


def test_criar_cliente_documento_invalido():
    with pytest.raises(ValidationError, match=ErrorMessages.DOCUMENTO_INVALIDO):
        CriarClienteRequest(
            nome="Joao", documento="52998224725", tipo_documento="CNPJ", email="joao@exemplo.com"
        )


def test_cliente_response_usa_configuracao_de_mascara(monkeypatch: pytest.MonkeyPatch):
    cliente = Cliente.criar("Joao", "52998224725", TipoDocumento.CPF, "joao@exemplo.com")

    monkeypatch.setenv("API_MASK_CPF", "false")
    get_settings.cache_clear()
    try:
        assert ClienteResponse.from_domain(cliente).documento_formatado == "529.982.247-25"
    finally:
        get_settings.cache_clear()

    monkeypatch.setenv("API_MASK_CPF", "true")
    try:
        assert ClienteResponse.from_domain(cliente).documento_formatado == "***.982.247-**"
    finally:
        get_settings.cache_clear()
