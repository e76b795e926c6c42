"""
Stock Resource Tools

Search Freepik photos, vectors and PSDs, fetch resource details, and
obtain download links.
"""

from typing import Any, List

import httpx

from ..base import ToolParameter
from ..schemas import (
    COLORS,
    PEOPLE_AGES,
    PEOPLE_ETHNICITIES,
    PEOPLE_GENDERS,
    PEOPLE_NUMBERS,
    SEARCH_ORDERS,
    DownloadResponse,
    ResourceIdParams,
    ResourceResponse,
    SearchResourcesParams,
    SearchResourcesResponse,
)
from ._common import FreepikTool


def _flag(name: str, description: str) -> ToolParameter:
    return ToolParameter(name=name, type="boolean", description=description)


SEARCH_FILTERS = ToolParameter(
    name="filters",
    type="object",
    properties=[
        ToolParameter(
            name="orientation",
            type="object",
            properties=[
                _flag("landscape", "Include landscape orientation"),
                _flag("portrait", "Include portrait orientation"),
                _flag("square", "Include square orientation"),
                _flag("panoramic", "Include panoramic orientation"),
            ]
        ),
        ToolParameter(
            name="content_type",
            type="object",
            properties=[
                _flag("photo", "Include photos"),
                _flag("psd", "Include PSDs"),
                _flag("vector", "Include vectors"),
            ]
        ),
        ToolParameter(
            name="license",
            type="object",
            properties=[
                _flag("freemium", "Include freemium resources"),
                _flag("premium", "Include premium resources"),
            ]
        ),
        ToolParameter(
            name="people",
            type="object",
            properties=[
                _flag("include", "Only resources with people"),
                _flag("exclude", "Only resources without people"),
                ToolParameter(
                    name="number",
                    type="string",
                    enum=PEOPLE_NUMBERS,
                    description="Number of people"
                ),
                ToolParameter(
                    name="age",
                    type="string",
                    enum=PEOPLE_AGES,
                    description="Age group of people"
                ),
                ToolParameter(
                    name="gender",
                    type="string",
                    enum=PEOPLE_GENDERS,
                    description="Gender of people"
                ),
                ToolParameter(
                    name="ethnicity",
                    type="string",
                    enum=PEOPLE_ETHNICITIES,
                    description="Ethnicity of people"
                ),
            ]
        ),
        ToolParameter(
            name="color",
            type="string",
            enum=COLORS,
            description="Predominant color"
        ),
    ]
)


class SearchResourcesTool(FreepikTool):
    """Search stock resources with optional filters."""

    order = 1
    input_model = SearchResourcesParams

    @property
    def name(self) -> str:
        return "search_resources"

    @property
    def description(self) -> str:
        return "Search for Freepik resources (photos, vectors, PSDs) with filters"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="term",
                type="string",
                description="Search term"
            ),
            ToolParameter(
                name="page",
                type="integer",
                minimum=1,
                description="Page number"
            ),
            ToolParameter(
                name="limit",
                type="integer",
                minimum=1,
                description="Limit results per page"
            ),
            ToolParameter(
                name="order",
                type="string",
                enum=SEARCH_ORDERS,
                description="Sort order"
            ),
            SEARCH_FILTERS,
        ]

    async def execute(self, **params: Any) -> SearchResourcesResponse:
        try:
            return await self.client.search_resources(params)
        except httpx.HTTPError as e:
            raise self.remote_error(e) from e


class GetResourceTool(FreepikTool):
    """Fetch the full record of one resource."""

    order = 2
    input_model = ResourceIdParams

    @property
    def name(self) -> str:
        return "get_resource"

    @property
    def description(self) -> str:
        return "Get detailed information about a specific resource"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="id",
                type="integer",
                minimum=1,
                required=True,
                description="Resource ID to get details for"
            )
        ]

    async def execute(self, id: int) -> ResourceResponse:
        try:
            return await self.client.get_resource_details(id)
        except httpx.HTTPError as e:
            raise self.remote_error(e) from e


class DownloadResourceTool(FreepikTool):
    """Obtain a short-lived download URL for one resource."""

    order = 3
    input_model = ResourceIdParams

    @property
    def name(self) -> str:
        return "download_resource"

    @property
    def description(self) -> str:
        return "Get download URL for a specific resource"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="id",
                type="integer",
                minimum=1,
                required=True,
                description="Resource ID to download"
            )
        ]

    async def execute(self, id: int) -> DownloadResponse:
        try:
            return await self.client.download_resource(id)
        except httpx.HTTPError as e:
            raise self.remote_error(e) from e
