from functools import lru_cache

from app.application.catalog import CatalogService
from app.config import VIDEOS_DATA_FILE
from app.infrastructure.store.json_file_store import JsonFileCatalogStore


@lru_cache(maxsize=1)
def get_catalog_service() -> CatalogService:
    store = JsonFileCatalogStore(VIDEOS_DATA_FILE)
    return CatalogService(store)
