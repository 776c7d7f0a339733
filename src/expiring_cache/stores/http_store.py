"""Remote backing store over a small REST key/value API.

Endpoints (relative to base_url):
- GET/PUT/DELETE /keys/{key}
- DELETE /keys          (clear)
- POST /invalidate      (JSON body {"tags": [...]})

Values are pickled. Reads go through a restricted unpickler that only
resolves plain builtin types and WrappedValue; anything it cannot decode
(foreign data, or pickles referencing other globals) is returned as raw
bytes. Like the memory store, the service is not expected to honor
expiration.
"""

from __future__ import annotations

import io
import logging
import pickle
from typing import Any, Dict, Hashable, Optional
from urllib.parse import quote

import httpx

from ..core.errors import CacheMissError, ExternalServiceError, ValidationError
from ..core.expiring import WrappedValue
from ..core.models import InvalidateOptions, StoreOptions

logger = logging.getLogger(__name__)

HTTP_STORE_TYPE = "http"

_SAFE_BUILTINS = frozenset(
    {
        "bool",
        "bytearray",
        "bytes",
        "complex",
        "dict",
        "float",
        "frozenset",
        "int",
        "list",
        "range",
        "set",
        "slice",
        "str",
        "tuple",
    }
)


class _StoreUnpickler(pickle.Unpickler):
    # Only plain builtin containers/scalars and the expiry envelope may be loaded
    def find_class(self, module: str, name: str) -> Any:
        if module == "builtins" and name in _SAFE_BUILTINS:
            return super().find_class(module, name)
        if module == WrappedValue.__module__ and name == WrappedValue.__qualname__:
            return WrappedValue
        raise pickle.UnpicklingError(f"global '{module}.{name}' is forbidden")


def _decode(content: bytes) -> Any:
    return _StoreUnpickler(io.BytesIO(content)).load()


def _key_path(key: Hashable) -> str:
    raw = str(key if key is not None else "").strip()
    if not raw:
        raise ValidationError("Cache key is empty")
    return f"/keys/{quote(raw, safe='')}"


class HttpStore:
    OCTET_STREAM = "application/octet-stream"

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 20.0,
        verify: bool = True,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/")
        self._timeout = timeout
        self._verify = verify
        self._headers = dict(headers or {})

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify,
        )

    async def get(self, key: Hashable) -> Any:
        path = _key_path(key)
        try:
            async with self._create_client() as c:
                r = await c.get(path, headers={"Accept": self.OCTET_STREAM})
                if r.status_code == 404:
                    raise CacheMissError(f"Key not found: {key!r}")
                r.raise_for_status()
                content = r.content
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(f"Cache service returned an error: {e}") from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Failed to call cache service: {e}") from e

        try:
            return _decode(content)
        except Exception as e:
            # Foreign or refused data is handed back untouched
            logger.debug("Returning raw bytes for %r: %s", key, e)
            return content

    async def set(self, key: Hashable, value: Any, options: Optional[StoreOptions] = None) -> None:
        path = _key_path(key)
        params: Dict[str, Any] = {}
        if options is not None:
            if options.tags:
                params["tag"] = list(options.tags)
            if options.cost:
                params["cost"] = options.cost

        await self._send(
            "PUT",
            path,
            params=params,
            content=pickle.dumps(value),
            headers={"Content-Type": self.OCTET_STREAM},
        )

    async def delete(self, key: Hashable) -> None:
        # Deleting an unknown key is not an error
        await self._send("DELETE", _key_path(key), allow_not_found=True)

    async def invalidate(self, options: InvalidateOptions) -> None:
        await self._send("POST", "/invalidate", json={"tags": list(options.tags)})

    async def clear(self) -> None:
        await self._send("DELETE", "/keys")

    def get_type(self) -> str:
        return HTTP_STORE_TYPE

    async def _send(self, method: str, path: str, *, allow_not_found: bool = False, **kwargs: Any) -> None:
        try:
            async with self._create_client() as c:
                r = await c.request(method, path, **kwargs)
                if allow_not_found and r.status_code == 404:
                    return
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(f"Cache service returned an error: {e}") from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Failed to call cache service: {e}") from e
