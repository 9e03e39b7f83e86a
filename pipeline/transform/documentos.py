# pipeline/transform/documentos.py
#
# Batch CPF/CNPJ validation over a DataFrame of stored documents.
#
# Design decisions:
#   - Normalization is a vectorized regex replace. The check-digit test has no
#     Polars equivalent, so it runs through map_elements on a struct of
#     (digits, kind) calling the same pure functions the API domain uses.
#   - The declared kind column accepts what TipoDocumento.parse accepts
#     ("CPF", "cnpj", "1", "2"). Anything else makes the row invalid rather
#     than aborting the batch.
#   - Duplicates are flagged, not dropped: the audit reports, it does not fix.
#
# Invariants:
#   - validar_documentos never mutates the input DataFrame.
#   - documento_formatado is non-null iff documento_valido is True.
#   - A null document is invalid.
from __future__ import annotations

import polars as pl

from api.domain.documento.enums import TipoDocumento
from api.domain.documento.validator import format_document, is_valid_document

COLUNAS_AUDITORIA: tuple[str, ...] = (
    "documento_normalizado",
    "tipo_normalizado",
    "documento_valido",
    "documento_formatado",
    "documento_duplicado",
)


class AuditInputError(Exception):
    """Raised when the input lacks a required column. The message names it."""


def _parse_tipo(valor: str | None) -> str | None:
    if valor is None:
        return None
    try:
        return TipoDocumento.parse(valor).value
    except ValueError:
        return None


def _valido(row: dict[str, str | None]) -> bool:
    digitos, tipo = row["documento_normalizado"], row["tipo_normalizado"]
    if not digitos or tipo is None:
        return False
    return is_valid_document(digitos, TipoDocumento(tipo))


def _formatado(row: dict[str, str | None]) -> str | None:
    if not _valido(row):
        return None
    return format_document(row["documento_normalizado"] or "", TipoDocumento(row["tipo_normalizado"]))


def validar_documentos(
    df: pl.DataFrame,
    documento_col: str = "documento",
    tipo_col: str = "tipo_documento",
) -> pl.DataFrame:
    """Append the audit columns (see COLUNAS_AUDITORIA) to *df*.

    Args:
        df:            DataFrame holding raw documents and their declared kind.
        documento_col: Column with the raw document text.
        tipo_col:      Column with the declared kind.

    Returns:
        New DataFrame with every original column plus the audit columns.

    Raises:
        AuditInputError: if *documento_col* or *tipo_col* is missing.
    """
    faltando = [c for c in (documento_col, tipo_col) if c not in df.columns]
    if faltando:
        raise AuditInputError(f"Colunas ausentes na entrada: {', '.join(faltando)}")

    df = df.with_columns(
        pl.col(documento_col).cast(pl.Utf8).str.replace_all(r"[^0-9]", "").alias("documento_normalizado"),
        pl.col(tipo_col)
        .cast(pl.Utf8)
        .map_elements(_parse_tipo, return_dtype=pl.Utf8)
        .alias("tipo_normalizado"),
    )

    par = pl.struct(["documento_normalizado", "tipo_normalizado"])
    df = df.with_columns(
        par.map_elements(_valido, return_dtype=pl.Boolean).fill_null(False).alias("documento_valido"),
        par.map_elements(_formatado, return_dtype=pl.Utf8).alias("documento_formatado"),
    )

    # Same digits under the same kind always share the same verdict.
    return df.with_columns(
        (
            pl.col("documento_valido")
            & (pl.len().over("documento_normalizado", "tipo_normalizado") > 1)
        ).alias("documento_duplicado")
    )


def separar_invalidos(df: pl.DataFrame) -> tuple[pl.DataFrame, pl.DataFrame]:
    """Split the output of validar_documentos into (validos, invalidos)."""
    validos = df.filter(pl.col("documento_valido"))
    invalidos = df.filter(~pl.col("documento_valido"))
    return validos, invalidos
