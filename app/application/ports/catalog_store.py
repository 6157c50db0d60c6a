from typing import Protocol, Dict, Any


class CatalogStore(Protocol):
    async def load(self) -> Dict[str, Any]:
        ...

    async def save(self, catalog: Dict[str, Any]) -> None:
        ...
