# gecom/interfaces/api/routes/servidor_routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from gecom.application.dtos.servidor_dto import (
    MensagemDTO,
    ReordemDTO,
    ServidorDTO,
    ServidorPayloadDTO,
)
from gecom.application.services.servidor_service import ServidorService
from gecom.domain.errors import ConflitoConcorrente, NaoEncontrado, ValidacaoFalhou
from gecom.interfaces.api.dependencies import get_servidor_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/employees", response_model=list[ServidorDTO])
def listar_servidores(
    secretaria: str | None = Query(default=None),
    service: ServidorService = Depends(get_servidor_service),  # noqa: B008
) -> list[ServidorDTO]:
    return service.listar(secretaria)


@router.post("/employees", response_model=ServidorDTO, status_code=201)
def criar_servidor(
    body: ServidorPayloadDTO,
    service: ServidorService = Depends(get_servidor_service),  # noqa: B008
) -> ServidorDTO:
    try:
        return service.criar(body)
    except ValidacaoFalhou as err:
        logger.warning("Erro ao criar funcionario: %s", err)
        raise HTTPException(status_code=422, detail=str(err)) from err


# reorder ANTES de /employees/{servidor_id} (path conflict)
@router.put("/employees/reorder", response_model=MensagemDTO)
def reordenar_servidores(
    body: ReordemDTO,
    service: ServidorService = Depends(get_servidor_service),  # noqa: B008
) -> MensagemDTO:
    try:
        service.reordenar(body.employees)
    except NaoEncontrado as err:
        raise HTTPException(status_code=404, detail=str(err)) from err
    except ValidacaoFalhou as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    except ConflitoConcorrente as err:
        logger.warning("Erro ao atualizar posicoes dos funcionarios: %s", err)
        raise HTTPException(status_code=409, detail=str(err)) from err
    return MensagemDTO(message="Ordens atualizadas com sucesso")


@router.put("/employees/{servidor_id}", response_model=ServidorDTO)
def atualizar_servidor(
    servidor_id: int,
    body: ServidorPayloadDTO,
    service: ServidorService = Depends(get_servidor_service),  # noqa: B008
) -> ServidorDTO:
    try:
        return service.atualizar(servidor_id, body)
    except NaoEncontrado as err:
        raise HTTPException(status_code=404, detail="Funcionário não encontrado") from err
    except ValidacaoFalhou as err:
        logger.warning("Erro ao atualizar funcionario %s: %s", servidor_id, err)
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.delete("/employees/{servidor_id}", response_model=MensagemDTO)
def excluir_servidor(
    servidor_id: int,
    service: ServidorService = Depends(get_servidor_service),  # noqa: B008
) -> MensagemDTO:
    try:
        service.excluir(servidor_id)
    except NaoEncontrado as err:
        raise HTTPException(status_code=404, detail="Funcionário não encontrado") from err
    return MensagemDTO(message="Funcionário excluído com sucesso")
