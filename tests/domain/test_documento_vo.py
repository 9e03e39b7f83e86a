import pytest

from api.domain.documento.enums import TipoDocumento
from api.domain.documento.value_objects import Documento
from api.domain.messages import ErrorMessages


def test_documento_cpf():
    doc = Documento("529.982.247-25", TipoDocumento.CPF)
    assert doc.valor == "52998224725"
    assert doc.tipo is TipoDocumento.CPF
    assert doc.formatado == "529.982.247-25"


def test_documento_cnpj_com_tipo_textual():
    doc = Documento("11222333000181", "cnpj")
    assert doc.tipo is TipoDocumento.CNPJ
    assert doc.formatado == "11.222.333/0001-81"


def test_documento_invalido_para_o_tipo():
    with pytest.raises(ValueError, match=ErrorMessages.DOCUMENTO_INVALIDO):
        Documento("11222333000181", TipoDocumento.CPF)


def test_documento_vazio():
    with pytest.raises(ValueError, match=ErrorMessages.DOCUMENTO_OBRIGATORIO):
        Documento("  ", TipoDocumento.CPF)


def test_documento_tipo_desconhecido():
    with pytest.raises(ValueError, match="Tipo de documento invalido"):
        Documento("52998224725", "RG")


def test_exibicao_mascara_apenas_cpf():
    cpf = Documento("52998224725", TipoDocumento.CPF)
    cnpj = Documento("11222333000181", TipoDocumento.CNPJ)
    assert cpf.exibicao() == "***.982.247-**"
    assert cpf.exibicao(mascarar_cpf=False) == "529.982.247-25"
    assert cnpj.exibicao() == "11.222.333/0001-81"


def test_repr_nunca_mostra_cpf_completo():
    doc = Documento("52998224725", TipoDocumento.CPF)
    assert "52998224725" not in repr(doc)
    assert "529.982.247-25" not in str(doc)


def test_igualdade_considera_tipo():
    a = Documento("52998224725", TipoDocumento.CPF)
    b = Documento("529.982.247-25", 1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Documento("11222333000181", TipoDocumento.CNPJ)
