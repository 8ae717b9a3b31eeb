"""ResourceRepository implementation backed by the upstream REST backend."""

from typing import Any

from sinjapan_manager.application.interfaces import JSONDict, ResourceRepository
from sinjapan_manager.domain.exceptions import BackendError

from .backend_client import BackendClient


class HttpResourceRepository(ResourceRepository):
    """Concrete repository for one ``/api/<resource>`` collection.

    ``update_method`` is ``PATCH`` for most resources; leads are replaced
    with ``PUT``.
    """

    def __init__(
        self,
        client: BackendClient,
        collection_path: str,
        *,
        update_method: str = "PATCH",
    ):
        self._client = client
        self._path = "/" + collection_path.strip("/")
        self._update_method = update_method.upper()

    def _item_path(self, record_id: int | str) -> str:
        return f"{self._path}/{record_id}"

    def _sub_path(self, sub_path: str) -> str:
        sub_path = sub_path.strip("/")
        return f"{self._path}/{sub_path}" if sub_path else self._path

    async def list(self, params: dict[str, Any] | None = None) -> list[JSONDict]:
        data = await self._client.get(self._path, params=params)
        if isinstance(data, list):
            return data
        return []

    async def get(self, record_id: int | str) -> JSONDict | None:
        try:
            return await self._client.get(self._item_path(record_id))
        except BackendError as exc:
            if exc.status_code == 404:
                return None
            raise

    async def create(self, payload: JSONDict) -> JSONDict:
        return await self._client.post(self._path, json=payload)

    async def update(self, record_id: int | str, payload: JSONDict) -> JSONDict | None:
        try:
            data = await self._client.request(
                self._update_method, self._item_path(record_id), json=payload
            )
        except BackendError as exc:
            if exc.status_code == 404:
                return None
            raise
        return data if data is not None else {}

    async def delete(self, record_id: int | str) -> bool:
        try:
            await self._client.delete(self._item_path(record_id))
        except BackendError as exc:
            if exc.status_code == 404:
                return False
            raise
        return True

    async def fetch(self, sub_path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._client.get(self._sub_path(sub_path), params=params)

    async def post(self, sub_path: str, payload: Any = None) -> Any:
        return await self._client.post(self._sub_path(sub_path), json=payload)

    async def patch(self, sub_path: str, payload: Any = None) -> Any:
        return await self._client.patch(self._sub_path(sub_path), json=payload)

    async def remove(self, sub_path: str) -> Any:
        return await self._client.delete(self._sub_path(sub_path))

    async def upload(
        self,
        sub_path: str,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> Any:
        files = {"file": (filename, content, content_type or "application/octet-stream")}
        return await self._client.request("POST", self._sub_path(sub_path), files=files)
