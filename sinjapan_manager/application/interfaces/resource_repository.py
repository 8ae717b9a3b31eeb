"""Abstract repository interface (port) for upstream REST resources."""

from abc import ABC, abstractmethod
from typing import Any

JSONDict = dict[str, Any]


class ResourceRepository(ABC):
    """Port for one ``/api/<resource>`` collection: implemented in the infrastructure layer.

    Payloads and results are plain JSON objects with camelCase keys; the
    services validate them into records.
    """

    @abstractmethod
    async def list(self, params: dict[str, Any] | None = None) -> list[JSONDict]:
        """Retrieve the collection, optionally filtered by query parameters."""
        ...

    @abstractmethod
    async def get(self, record_id: int | str) -> JSONDict | None:
        """Retrieve a single record; ``None`` if it does not exist."""
        ...

    @abstractmethod
    async def create(self, payload: JSONDict) -> JSONDict:
        """Create a record and return what the backend echoes back."""
        ...

    @abstractmethod
    async def update(self, record_id: int | str, payload: JSONDict) -> JSONDict | None:
        """Update a record. Returns ``None`` if not found."""
        ...

    @abstractmethod
    async def delete(self, record_id: int | str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def fetch(self, sub_path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a route nested under the collection (e.g. ``"5/activities"``)."""
        ...

    @abstractmethod
    async def post(self, sub_path: str, payload: Any = None) -> Any:
        """POST to a route nested under the collection."""
        ...

    @abstractmethod
    async def patch(self, sub_path: str, payload: Any = None) -> Any:
        """PATCH a route nested under the collection."""
        ...

    @abstractmethod
    async def remove(self, sub_path: str) -> Any:
        """DELETE a route nested under the collection."""
        ...

    @abstractmethod
    async def upload(
        self,
        sub_path: str,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> Any:
        """POST a single file as multipart form field ``file``."""
        ...
