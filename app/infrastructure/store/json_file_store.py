import json
import logging
from pathlib import Path
from typing import Any, Dict

from app.application.ports.catalog_store import CatalogStore

log = logging.getLogger("app.catalog_store")


class JsonFileCatalogStore(CatalogStore):
    """Keeps the whole catalog in one JSON document.

    Failures are logged and swallowed: a broken or missing file reads as an
    empty catalog and a failed write leaves the previous document in place.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> Dict[str, Any]:
        try:
            raw = self._path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except FileNotFoundError:
            log.warning("Catalog file %s not found, using empty catalog", self._path)
            return {}
        except (OSError, ValueError):
            log.exception("Error reading %s", self._path)
            return {}

        if not isinstance(data, dict):
            log.warning("Catalog file %s does not hold an object (got %s)", self._path, type(data).__name__)
            return {}
        return data

    async def save(self, catalog: Dict[str, Any]) -> None:
        try:
            payload = json.dumps(catalog, ensure_ascii=False, indent=2)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError):
            log.exception("Error writing %s", self._path)
