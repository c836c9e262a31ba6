# gecom/domain/errors.py
from __future__ import annotations


class GecomError(Exception):
    """Erro de regra de negocio generico."""


class NaoEncontrado(GecomError):
    def __init__(self, recurso: str, identificador: object) -> None:
        self.recurso = recurso
        self.identificador = identificador
        super().__init__(f"{recurso} nao encontrado: {identificador}")


class ValidacaoFalhou(GecomError):
    pass


class SecretariaNaoEncontrada(ValidacaoFalhou):
    def __init__(self, secretarias: list[str]) -> None:
        self.secretarias = secretarias
        nomes = ", ".join(f'"{s}"' for s in secretarias)
        super().__init__(f"Secretaria(s) nao encontrada(s) na tabela organizations: {nomes}")


class ConflitoConcorrente(GecomError):
    pass


class ErroConectividade(GecomError):
    def __init__(self, tentativas: int, causa: Exception) -> None:
        self.tentativas = tentativas
        super().__init__(f"Banco indisponivel apos {tentativas} tentativas: {causa}")
