"""
Freepik API Client

Thin async wrapper over the Freepik REST API. Every method issues exactly
one request; failures are logged and re-raised as the httpx exceptions.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx

from .config import DEFAULT_BASE_URL
from .schemas import (
    CheckStatusResponse,
    DownloadResponse,
    GenerateImageResponse,
    ResourceResponse,
    SearchResourcesResponse,
)

logger = logging.getLogger(__name__)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_params(params: Dict[str, Any], prefix: str = "") -> List[Tuple[str, str]]:
    """
    Flatten nested query parameters into bracket notation.

    {"filters": {"license": {"premium": True}}} -> [("filters[license][premium]", "true")]
    """
    flat: List[Tuple[str, str]] = []

    for key, value in params.items():
        if value is None:
            continue

        name = f"{prefix}[{key}]" if prefix else key
        if isinstance(value, dict):
            flat.extend(flatten_params(value, name))
        else:
            flat.append((name, _query_value(value)))

    return flat


class FreepikClient:
    """
    Client for the Freepik stock and Mystic APIs.

    The underlying httpx.AsyncClient is configured once (base URL and API key
    header) and shared read-only by every call.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "x-freepik-api-key": api_key,
                "Content-Type": "application/json"
            },
            transport=transport
        )

    async def __aenter__(self) -> "FreepikClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"[Freepik API Error] {method} {path} failed: {e}")
            raise

        if response.is_error:
            logger.error(
                f"[Freepik API Error] Status: {response.status_code}, Message: {response.text}"
            )
            response.raise_for_status()

        return response.json()

    # Stock resources

    async def search_resources(self, params: Dict[str, Any]) -> SearchResourcesResponse:
        logger.info(f"[Freepik] Searching resources with params: {params}")
        return await self._request("GET", "/v1/resources", params=flatten_params(params))

    async def get_resource_details(self, resource_id: int) -> ResourceResponse:
        logger.info(f"[Freepik] Getting resource details for id: {resource_id}")
        return await self._request("GET", f"/v1/resources/{resource_id}")

    async def download_resource(self, resource_id: int) -> DownloadResponse:
        logger.info(f"[Freepik] Downloading resource id: {resource_id}")
        return await self._request("GET", f"/v1/resources/{resource_id}/download")

    # Mystic

    async def generate_image(self, params: Dict[str, Any]) -> GenerateImageResponse:
        logger.info(f"[Freepik] Generating image with params: {params}")
        return await self._request("POST", "/v1/ai/mystic", json=params)

    async def check_status(self, task_id: str) -> CheckStatusResponse:
        logger.info(f"[Freepik] Checking status for task: {task_id}")
        return await self._request("GET", f"/v1/ai/mystic/{quote(task_id, safe='')}")
