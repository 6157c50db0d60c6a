import asyncio
import logging
from typing import Any, Dict, List, Optional

from app.application.ports.catalog_store import CatalogStore
from app.application.serializers import (
    build_video,
    category_names,
    category_summaries,
    normalize_category,
)
from app.core.exceptions import (
    CatalogValidationError,
    CategoryExistsError,
    CategoryNotFoundError,
    MalformedCategoryError,
    VideoNotFoundError,
)

log = logging.getLogger("app.catalog")


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _optional_text(value: Any) -> Optional[str]:
    return value if _has_text(value) else None


class CatalogService:
    """Video and category operations over a CatalogStore.

    Every call loads the whole catalog from the store. Mutations hold a
    single lock across load, change and save so two writers in this process
    never overwrite each other's changes.
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store
        self._write_lock = asyncio.Lock()

    @staticmethod
    def _category(catalog: Dict[str, Any], name: str, message: str = "Category not found") -> Dict[str, Any]:
        if name not in catalog:
            raise CategoryNotFoundError(name, message)
        record = normalize_category(catalog[name])
        if record is None:
            raise MalformedCategoryError(name)
        return record

    def _videos_at(self, catalog: Dict[str, Any], category: str, index: int) -> List[Dict[str, Any]]:
        if category not in catalog:
            raise VideoNotFoundError(category, index)
        videos = self._category(catalog, category)["videos"]
        if index < 0 or index >= len(videos):
            raise VideoNotFoundError(category, index)
        return videos

    # videos

    async def list_videos(self) -> Dict[str, Any]:
        return await self._store.load()

    async def list_category_videos(self, category: str) -> List[Dict[str, Any]]:
        catalog = await self._store.load()
        return self._category(catalog, category)["videos"]

    async def add_video(self, category: str, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        title = payload.get("title")
        url = payload.get("url")
        if not _has_text(title) or not _has_text(url):
            raise CatalogValidationError("Title and URL are required")

        video = build_video(
            title,
            url,
            description=_optional_text(payload.get("description")),
            thumbnail=_optional_text(payload.get("thumbnail")),
        )

        async with self._write_lock:
            catalog = await self._store.load()
            videos = self._category(catalog, category, "Category does not exist")["videos"]
            videos.append(video)
            await self._store.save(catalog)

        log.info("Video added category=%s title=%s count=%d", category, title, len(videos))
        return videos

    async def set_video_thumbnail(self, category: str, index: int, thumbnail: Any) -> List[Dict[str, Any]]:
        if not _has_text(thumbnail):
            raise CatalogValidationError("Thumbnail URL is required")

        async with self._write_lock:
            catalog = await self._store.load()
            videos = self._videos_at(catalog, category, index)
            video = videos[index]
            if not isinstance(video, dict):
                raise VideoNotFoundError(category, index)
            video["thumbnail"] = thumbnail
            await self._store.save(catalog)

        log.info("Video thumbnail set category=%s index=%d", category, index)
        return videos

    async def delete_video(self, category: str, index: int) -> List[Dict[str, Any]]:
        async with self._write_lock:
            catalog = await self._store.load()
            videos = self._videos_at(catalog, category, index)
            removed = videos.pop(index)
            await self._store.save(catalog)

        title = removed.get("title") if isinstance(removed, dict) else None
        log.info("Video deleted category=%s index=%d title=%s", category, index, title)
        return videos

    # categories

    async def list_categories(self) -> List[Dict[str, str]]:
        catalog = await self._store.load()
        return category_summaries(catalog)

    async def create_category(self, name: Any) -> List[str]:
        if not _has_text(name):
            raise CatalogValidationError("Category name is required")

        async with self._write_lock:
            catalog = await self._store.load()
            if name in catalog:
                raise CategoryExistsError(name)
            catalog[name] = {"categoryThumbnail": "", "videos": []}
            await self._store.save(catalog)

        log.info("Category created name=%s", name)
        return category_names(catalog)

    async def set_category_thumbnail(self, name: str, thumbnail: Any) -> str:
        if not _has_text(thumbnail):
            raise CatalogValidationError("Thumbnail URL is required")

        async with self._write_lock:
            catalog = await self._store.load()
            self._category(catalog, name)["categoryThumbnail"] = thumbnail
            await self._store.save(catalog)

        log.info("Category thumbnail set name=%s", name)
        return thumbnail

    async def delete_category(self, name: str) -> List[str]:
        async with self._write_lock:
            catalog = await self._store.load()
            if name not in catalog:
                raise CategoryNotFoundError(name)
            catalog.pop(name)
            await self._store.save(catalog)

        log.info("Category deleted name=%s", name)
        return category_names(catalog)
