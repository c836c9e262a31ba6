# gecom/interfaces/api/routes/organizacao_routes.py
from fastapi import APIRouter, Depends

from gecom.application.dtos.organizacao_dto import CrescimentoDTO, OrganizacaoDTO
from gecom.infrastructure.repositories.duckdb_crescimento_repo import DuckDBCrescimentoRepo
from gecom.infrastructure.repositories.duckdb_organizacao_repo import DuckDBOrganizacaoRepo
from gecom.interfaces.api.dependencies import get_crescimento_repo, get_organizacao_repo

router = APIRouter()


@router.get("/organizations", response_model=list[OrganizacaoDTO])
def listar_organizacoes(
    repo: DuckDBOrganizacaoRepo = Depends(get_organizacao_repo),  # noqa: B008
) -> list[OrganizacaoDTO]:
    return [
        OrganizacaoDTO(
            codigo=o.codigo,
            secretaria=o.secretaria,
            sigla=o.sigla,
            classificacao=o.classificacao.value,
        )
        for o in repo.listar()
    ]


@router.get("/organization-growth", response_model=list[CrescimentoDTO])
def listar_crescimento(
    repo: DuckDBCrescimentoRepo = Depends(get_crescimento_repo),  # noqa: B008
) -> list[CrescimentoDTO]:
    return [CrescimentoDTO(mes=p.mes, total=p.total) for p in repo.listar()]
