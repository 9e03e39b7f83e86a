# pipeline/config.py
#
# Audit job configuration loaded from environment variables.
#
# Design decisions:
#   - Frozen dataclass, not pydantic Settings: pydantic stays in the API
#     layer, the audit is a standalone offline process.
#   - AUDIT_INPUT_PATH has no default: the job must be pointed at an export.
#   - Output defaults to pipeline/data/output relative to this file.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent

FORMATOS_SAIDA: tuple[str, ...] = ("parquet", "csv")


@dataclass(frozen=True)
class AuditConfig:
    """Immutable audit configuration.

    Invariants:
      - output_format is one of FORMATOS_SAIDA.
      - documento_col and tipo_col are non-empty column names.
    """

    input_path: Path
    output_dir: Path
    documento_col: str = "documento"
    tipo_col: str = "tipo_documento"
    output_format: str = "parquet"

    def __post_init__(self) -> None:
        if self.output_format not in FORMATOS_SAIDA:
            raise ValueError(
                f"Formato de saida invalido: {self.output_format!r}. "
                f"Use um de {FORMATOS_SAIDA}."
            )
        if not self.documento_col or not self.tipo_col:
            raise ValueError("Nomes de coluna nao podem ser vazios")

    @property
    def validos_path(self) -> Path:
        return self.output_dir / f"validos.{self.output_format}"

    @property
    def invalidos_path(self) -> Path:
        return self.output_dir / f"invalidos.{self.output_format}"


def load_config() -> AuditConfig:
    """Build AuditConfig from environment variables.

    Raises:
        ValueError: if AUDIT_INPUT_PATH is not set.
    """
    input_path = os.environ.get("AUDIT_INPUT_PATH")
    if not input_path:
        raise ValueError(
            "AUDIT_INPUT_PATH environment variable is required. "
            "Point it at a CSV export with document and document type columns."
        )

    return AuditConfig(
        input_path=Path(input_path),
        output_dir=Path(
            os.environ.get("AUDIT_OUTPUT_DIR", str(_PIPELINE_DIR / "data" / "output"))
        ),
        documento_col=os.environ.get("AUDIT_DOCUMENT_COLUMN", "documento"),
        tipo_col=os.environ.get("AUDIT_TYPE_COLUMN", "tipo_documento"),
        output_format=os.environ.get("AUDIT_OUTPUT_FORMAT", "parquet").lower(),
    )
