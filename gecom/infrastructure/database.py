# gecom/infrastructure/database.py
from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

import duckdb

from gecom.domain.errors import ErroConectividade

from .config import Settings

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


class Database:
    """Conexao DuckDB com ciclo de vida explicito.

    Construida pela raiz de composicao (create_app ou carga.main), aberta no
    boot e fechada no shutdown. Cada requisicao usa o proprio cursor().
    """

    def __init__(
        self,
        path: str,
        *,
        read_only: bool = False,
        retries: int = 5,
        retry_delay: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._path = path
        self._read_only = read_only and path != ":memory:"
        self._retries = max(retries, 1)
        self._retry_delay = retry_delay
        self._sleep = sleep
        self._conn: duckdb.DuckDBPyConnection | None = None
        self._dona_da_conexao = True
        self._travas: dict[str, threading.Lock] = {}
        self._travas_guard = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        return cls(
            settings.duckdb_path,
            read_only=settings.duckdb_read_only,
            retries=settings.db_connect_retries,
            retry_delay=settings.db_connect_retry_delay,
        )

    @classmethod
    def from_connection(cls, conn: duckdb.DuckDBPyConnection) -> Database:
        """Usado em testes para injetar DuckDB in-memory ja populado."""
        db = cls(":memory:")
        db._conn = conn
        db._dona_da_conexao = False
        return db

    @property
    def aberta(self) -> bool:
        return self._conn is not None

    def abrir(self) -> None:
        """Conecta e valida com SELECT 1, tentando `retries` vezes com pausa fixa.

        Raises:
            ErroConectividade: se todas as tentativas falharem.
        """
        if self._conn is not None:
            return
        for tentativa in range(1, self._retries + 1):
            try:
                conn = duckdb.connect(self._path, read_only=self._read_only)
                conn.execute("SELECT 1").fetchone()
            except duckdb.Error as err:
                logger.warning(
                    "Falha ao conectar em %s (tentativa %d/%d): %s",
                    self._path, tentativa, self._retries, err,
                )
                if tentativa == self._retries:
                    raise ErroConectividade(self._retries, err) from err
                self._sleep(self._retry_delay)
                continue
            self._conn = conn
            logger.info("Conectado ao banco %s", self._path)
            return

    def aplicar_schema(self) -> None:
        if self._read_only:
            return
        self.conexao.execute(SCHEMA_PATH.read_text(encoding="utf-8"))

    def fechar(self) -> None:
        if self._conn is not None and self._dona_da_conexao:
            self._conn.close()
            self._conn = None

    @property
    def conexao(self) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            raise RuntimeError("Database nao foi aberta")
        return self._conn

    def cursor(self) -> duckdb.DuckDBPyConnection:
        return self.conexao.cursor()

    @contextmanager
    def transacao(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """BEGIN/COMMIT num cursor proprio; ROLLBACK em qualquer excecao."""
        cur = self.cursor()
        cur.begin()
        try:
            yield cur
        except BaseException:
            cur.rollback()
            raise
        else:
            cur.commit()
        finally:
            cur.close()

    def trava(self, nome: str) -> threading.Lock:
        """Lock em processo nomeado (ex.: por secretaria no reorder)."""
        with self._travas_guard:
            lock = self._travas.get(nome)
            if lock is None:
                lock = self._travas[nome] = threading.Lock()
            return lock
