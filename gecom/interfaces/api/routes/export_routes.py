# gecom/interfaces/api/routes/export_routes.py
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from gecom.application.services.export_service import ExportService
from gecom.application.services.relatorio_service import RelatorioService, TipoRelatorio
from gecom.application.services.servidor_service import ServidorService, servidor_para_dto
from gecom.interfaces.api.dependencies import (
    get_export_service,
    get_relatorio_service,
    get_servidor_service,
)

router = APIRouter()


@router.get("/employees/export")
def exportar_servidores(
    secretaria: str = Query(...),
    formato: Literal["csv", "json", "pdf"] = Query(...),
    servidor_service: ServidorService = Depends(get_servidor_service),  # noqa: B008
    relatorio_service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    linhas = servidor_service.listar_entidades(secretaria)
    if not linhas:
        raise HTTPException(status_code=404, detail="Nenhum servidor para a secretaria")

    if formato == "json":
        return Response(
            content=export_service.exportar_json([servidor_para_dto(s) for s in linhas]),
            media_type="application/json",
        )
    if formato == "csv":
        return Response(
            content=export_service.exportar_csv(secretaria, linhas),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename=Relatorio-{secretaria}.csv"},
        )
    # pdf
    nome = next((o.secretaria for o in relatorio_service.organizacoes() if o.sigla == secretaria), secretaria)
    try:
        from gecom.infrastructure.pdf_generator import gerar_pdf_servidores

        pdf_bytes = gerar_pdf_servidores(secretaria, nome, linhas)
    except RuntimeError as err:
        raise HTTPException(status_code=501, detail=str(err)) from err
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=Relatorio-{secretaria}.pdf"},
    )


@router.get("/reports/{tipo}")
def gerar_relatorio(
    tipo: TipoRelatorio,
    secretaria: str = Query(default=""),
    cargo: str = Query(default=""),
    simbolo: str = Query(default=""),
    status: Literal["", "Provido", "Vago"] = Query(default=""),
    formato: Literal["json", "pdf"] = Query(default="json"),
    service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
) -> Response:
    dados = service.gerar(tipo, secretaria, cargo, simbolo, status)
    if formato == "json":
        return Response(
            content="[" + ",".join(d.model_dump_json() for d in dados) + "]",
            media_type="application/json",
        )
    try:
        from gecom.infrastructure.pdf_generator import gerar_pdf_relatorio

        pdf_bytes = gerar_pdf_relatorio(tipo, dados)
    except RuntimeError as err:
        raise HTTPException(status_code=501, detail=str(err)) from err
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=Relatorio-{tipo.value}.pdf"},
    )
