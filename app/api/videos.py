import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.application.catalog import CatalogService
from app.core.exceptions import CatalogError
from app.infrastructure.catalog import get_catalog_service

router = APIRouter()
log = logging.getLogger("app.videos")


def _http_error(exc: CatalogError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


@router.get("/api/videos")
async def list_videos(service: CatalogService = Depends(get_catalog_service)) -> JSONResponse:
    catalog = await service.list_videos()
    return JSONResponse(status_code=200, content=catalog)


@router.get("/api/videos/{category}")
async def list_category_videos(
    category: str,
    service: CatalogService = Depends(get_catalog_service),
) -> JSONResponse:
    log.debug("[GET] Serving videos for category %r", category)
    try:
        videos = await service.list_category_videos(category)
    except CatalogError as exc:
        raise _http_error(exc)

    return JSONResponse(status_code=200, content=videos)


@router.post("/api/videos/{category}")
async def add_video(
    category: str,
    request_body: Dict[str, Any],
    service: CatalogService = Depends(get_catalog_service),
) -> JSONResponse:
    try:
        videos = await service.add_video(category, request_body)
    except CatalogError as exc:
        log.warning("[POST] Rejected video for %r: %s", category, exc)
        raise _http_error(exc)

    return JSONResponse(status_code=200, content={"ok": True, "videos": videos})


@router.patch("/api/videos/{category}/{index}/thumbnail")
async def set_video_thumbnail(
    category: str,
    index: int,
    request_body: Dict[str, Any],
    service: CatalogService = Depends(get_catalog_service),
) -> JSONResponse:
    try:
        videos = await service.set_video_thumbnail(category, index, request_body.get("thumbnail"))
    except CatalogError as exc:
        log.warning("[PATCH] Rejected thumbnail for %r/%d: %s", category, index, exc)
        raise _http_error(exc)

    return JSONResponse(status_code=200, content={"ok": True, "videos": videos})


@router.delete("/api/videos/{category}/{index}")
async def delete_video(
    category: str,
    index: int,
    service: CatalogService = Depends(get_catalog_service),
) -> JSONResponse:
    try:
        videos = await service.delete_video(category, index)
    except CatalogError as exc:
        log.warning("[DELETE] Rejected delete of %r/%d: %s", category, index, exc)
        raise _http_error(exc)

    return JSONResponse(status_code=200, content={"ok": True, "videos": videos})
