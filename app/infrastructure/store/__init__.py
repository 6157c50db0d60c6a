from app.infrastructure.store.json_file_store import JsonFileCatalogStore

__all__ = ["JsonFileCatalogStore"]
