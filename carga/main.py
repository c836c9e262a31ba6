# carga/main.py
#
# Cargas unicas dos fixtures JSON:
#
#   python -m carga.main cargos      [--arquivo positions_output.json]
#   python -m carga.main servidores  [--arquivo orgaos_e_servidores.json]
#
# Fluxo: parse -> validate (rejeitados sao logados) -> load numa transacao.
# Falha de leitura, de conexao ou de carga encerra com status 1; nesse caso
# nada do lote foi gravado.
from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

import duckdb
import polars as pl

from carga.config import CargaConfig, load_config
from carga.log import log
from carga.output.load_duckdb import ResumoCarga, carregar_cargos, carregar_servidores
from carga.sources.cargos.parse import parse_cargos
from carga.sources.cargos.validate import validate_cargos
from carga.sources.servidores.parse import parse_servidores
from carga.sources.servidores.validate import validate_servidores
from gecom.domain.errors import GecomError
from gecom.infrastructure.database import Database

_Etapas = tuple[
    Callable[[Path], pl.DataFrame],
    Callable[[pl.DataFrame], tuple[pl.DataFrame, pl.DataFrame]],
    Callable[[Database, pl.DataFrame], int],
]

ALVOS: dict[str, _Etapas] = {
    "cargos": (parse_cargos, validate_cargos, carregar_cargos),
    "servidores": (parse_servidores, validate_servidores, carregar_servidores),
}


def _arquivo_padrao(alvo: str, config: CargaConfig) -> Path:
    return config.arquivo_cargos if alvo == "cargos" else config.arquivo_servidores


def _log_rejeitados(rejeitados: pl.DataFrame) -> None:
    for linha in rejeitados.iter_rows(named=True):
        detalhes = {k: v for k, v in linha.items() if k not in ("_linha", "motivo") and v is not None}
        log(f"  Registro inválido (linha {linha['_linha']}): {linha['motivo']} {detalhes}")


def run_carga(alvo: str, arquivo: Path, db: Database) -> ResumoCarga:
    """Executa uma carga contra um Database ja aberto e com schema aplicado."""
    parse, validate, carregar = ALVOS[alvo]

    log(f"Lendo {arquivo}...")
    df = parse(arquivo)
    log(f"  {len(df):,} registros lidos")

    validos, rejeitados = validate(df)
    _log_rejeitados(rejeitados)

    log(f"Inserindo {len(validos):,} registros válidos em uma transação...")
    inseridos = carregar(db, validos)

    resumo = ResumoCarga(lidos=len(df), inseridos=inseridos, rejeitados=len(rejeitados))
    log(
        f"Concluído: {resumo.inseridos:,} inseridos, {resumo.ignorados:,} já existentes, "
        f"{resumo.rejeitados:,} rejeitados"
    )
    return resumo


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="carga", description="Carga inicial de cargos e servidores")
    parser.add_argument("alvo", choices=sorted(ALVOS))
    parser.add_argument("--arquivo", type=Path, default=None, help="Fixture JSON (padrão: CARGA_DATA_DIR)")
    args = parser.parse_args(argv)

    config = load_config()
    arquivo = args.arquivo or _arquivo_padrao(args.alvo, config)
    db = Database(
        config.duckdb_path,
        retries=config.db_connect_retries,
        retry_delay=config.db_connect_retry_delay,
    )
    try:
        db.abrir()
        db.aplicar_schema()
        run_carga(args.alvo, arquivo, db)
    except (GecomError, duckdb.Error, OSError, ValueError) as err:
        log(f"Erro na carga de {args.alvo}: {err}")
        log("Nenhum registro foi gravado (rollback).")
        return 1
    finally:
        db.fechar()
    return 0


if __name__ == "__main__":
    sys.exit(main())
