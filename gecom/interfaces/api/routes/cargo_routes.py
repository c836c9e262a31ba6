# gecom/interfaces/api/routes/cargo_routes.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gecom.application.dtos.cargo_dto import CargoCriacaoDTO, CargoDTO, CargoResultadoDTO
from gecom.application.services.cargo_service import CargoService
from gecom.domain.cargo.value_objects import ResultadoCriacao
from gecom.interfaces.api.dependencies import get_cargo_service

router = APIRouter()

_STATUS_POR_RESULTADO = {
    ResultadoCriacao.CRIADO: 201,
    ResultadoCriacao.JA_EXISTE: 200,
    ResultadoCriacao.REJEITADO: 422,
}


@router.get("/positions", response_model=list[CargoDTO])
def listar_cargos(
    service: CargoService = Depends(get_cargo_service),  # noqa: B008
) -> list[CargoDTO]:
    return service.listar()


@router.post("/positions", response_model=CargoResultadoDTO)
def criar_cargo(
    body: CargoCriacaoDTO,
    service: CargoService = Depends(get_cargo_service),  # noqa: B008
) -> JSONResponse:
    resultado = service.criar(body.cargo_efetivo, body.simbolo, body.numero)
    return JSONResponse(
        content=resultado.model_dump(),
        status_code=_STATUS_POR_RESULTADO[ResultadoCriacao(resultado.resultado)],
    )
