# carga/config.py
#
# Configuracao das cargas a partir de variaveis de ambiente.
#
# Frozen dataclass e nao pydantic: a carga e um processo offline isolado e
# pydantic fica restrito a camada HTTP.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_CARGA_DIR = Path(__file__).parent


@dataclass(frozen=True)
class CargaConfig:
    """Invariante: data_dir e duckdb_path sempre preenchidos."""

    data_dir: Path
    duckdb_path: str
    db_connect_retries: int = 5
    db_connect_retry_delay: float = 2.0

    @property
    def arquivo_cargos(self) -> Path:
        return self.data_dir / "positions_output.json"

    @property
    def arquivo_servidores(self) -> Path:
        return self.data_dir / "orgaos_e_servidores.json"


def load_config() -> CargaConfig:
    return CargaConfig(
        data_dir=Path(os.environ.get("CARGA_DATA_DIR", str(_CARGA_DIR / "data"))),
        duckdb_path=os.environ.get("DUCKDB_PATH", "gecom.duckdb"),
        db_connect_retries=int(os.environ.get("DB_CONNECT_RETRIES", "5")),
        db_connect_retry_delay=float(os.environ.get("DB_CONNECT_RETRY_DELAY", "2.0")),
    )
