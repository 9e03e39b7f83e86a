# pipeline/main.py
#
# Document audit: validates every CPF/CNPJ in an export of clients, companies
# or shareholders and writes one report of valid rows and one of invalid rows.
#
# Design decisions:
#   - run_audit is the single entry point. It takes an AuditConfig so tests
#     can run it against tmp_path without touching the environment.
#   - Only counts are logged. Documents themselves never reach stdout.
#   - Both reports are always written, even when empty, so a consumer can tell
#     "no invalid rows" apart from "audit did not run".
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import polars as pl

from pipeline.config import AuditConfig, load_config
from pipeline.log import log, reset_clock
from pipeline.staging.report_writer import read_documents_csv, write_report
from pipeline.transform.documentos import separar_invalidos, validar_documentos


@dataclass(frozen=True)
class AuditResult:
    total: int
    validos: int
    invalidos: int
    duplicados: int
    validos_path: Path
    invalidos_path: Path


def run_audit(config: AuditConfig) -> AuditResult:
    """Run the audit described by *config*.

    Raises:
        pipeline.transform.documentos.AuditInputError: if the export lacks the
            configured document or kind column.
        FileNotFoundError: if the input file does not exist.
    """
    reset_clock()
    log(f"Reading {config.input_path.name}...")
    df = read_documents_csv(config.input_path)
    log(f"  {len(df):,} rows read")

    log("Validating documents...")
    auditado = validar_documentos(df, config.documento_col, config.tipo_col)
    validos, invalidos = separar_invalidos(auditado)
    duplicados = int(validos.select(pl.col("documento_duplicado").sum()).item() or 0)
    log(f"  Validos: {len(validos):,} | Invalidos: {len(invalidos):,} | Duplicados: {duplicados:,}")

    write_report(validos, config.validos_path)
    write_report(invalidos, config.invalidos_path)
    log(f"Done. Reports written to: {config.output_dir}")

    return AuditResult(
        total=len(auditado),
        validos=len(validos),
        invalidos=len(invalidos),
        duplicados=duplicados,
        validos_path=config.validos_path,
        invalidos_path=config.invalidos_path,
    )


if __name__ == "__main__":
    cfg = load_config()
    run_audit(cfg)
