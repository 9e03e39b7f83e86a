from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    mask_cpf: bool
    debug: bool


def _flag(nome: str, padrao: str) -> bool:
    return os.environ.get(nome, padrao).strip().lower() == "true"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        mask_cpf=_flag("API_MASK_CPF", "true"),
        debug=_flag("API_DEBUG", "false"),
    )
