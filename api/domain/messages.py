# api/domain/messages.py
#
# Mensagens de erro exibidas ao usuario. Portugues sem acentos, como o
# restante do dominio.
from __future__ import annotations


class ErrorMessages:
    CPF_INVALIDO = "O CPF informado e invalido."
    CNPJ_INVALIDO = "O CNPJ informado e invalido."
    CNPJ_OBRIGATORIO = "O CNPJ e obrigatorio."
    DOCUMENTO_OBRIGATORIO = "Documento e obrigatorio."
    DOCUMENTO_INVALIDO = "Documento invalido para o tipo informado."
    TIPO_DOCUMENTO_INVALIDO = "Tipo de documento invalido."
    TIPO_DOCUMENTO_OBRIGATORIO = "Tipo de documento e obrigatorio quando o documento e informado."
    NOME_OBRIGATORIO = "Nome e obrigatorio."
    CEP_INVALIDO = "CEP invalido."
    DATA_NASCIMENTO_INVALIDA = "Data de nascimento invalida."
