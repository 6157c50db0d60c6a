import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.application.catalog import CatalogService
from app.core.exceptions import CatalogError
from app.infrastructure.catalog import get_catalog_service

router = APIRouter()
log = logging.getLogger("app.categories")


@router.get("/api/categories")
async def list_categories(service: CatalogService = Depends(get_catalog_service)) -> JSONResponse:
    categories = await service.list_categories()
    return JSONResponse(status_code=200, content=categories)


@router.post("/api/categories")
async def create_category(
    request_body: Dict[str, Any],
    service: CatalogService = Depends(get_catalog_service),
) -> JSONResponse:
    try:
        categories = await service.create_category(request_body.get("name"))
    except CatalogError as exc:
        log.warning("[POST] Rejected category %r: %s", request_body.get("name"), exc)
        raise HTTPException(status_code=exc.status_code, detail=str(exc))

    return JSONResponse(status_code=200, content={"ok": True, "categories": categories})


@router.patch("/api/categories/{name}/thumbnail")
async def set_category_thumbnail(
    name: str,
    request_body: Dict[str, Any],
    service: CatalogService = Depends(get_catalog_service),
) -> JSONResponse:
    try:
        thumbnail = await service.set_category_thumbnail(name, request_body.get("thumbnail"))
    except CatalogError as exc:
        log.warning("[PATCH] Rejected thumbnail for category %r: %s", name, exc)
        raise HTTPException(status_code=exc.status_code, detail=str(exc))

    return JSONResponse(status_code=200, content={"ok": True, "thumbnail": thumbnail})


@router.delete("/api/categories/{name}")
async def delete_category(
    name: str,
    service: CatalogService = Depends(get_catalog_service),
) -> JSONResponse:
    try:
        categories = await service.delete_category(name)
    except CatalogError as exc:
        log.warning("[DELETE] Rejected delete of category %r: %s", name, exc)
        raise HTTPException(status_code=exc.status_code, detail=str(exc))

    return JSONResponse(status_code=200, content={"ok": True, "categories": categories})
