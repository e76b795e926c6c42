"""
Mystic AI Image Generation Tools

Generation is asynchronous on the Freepik side: generate_image starts a task
and returns its handle, check_status polls it until images are available.
"""

from typing import Any, List

import httpx

from ..base import ToolParameter
from ..schemas import (
    ASPECT_RATIOS,
    CREATIVE_DETAILING_MAX,
    CREATIVE_DETAILING_MIN,
    ENGINES,
    RESOLUTIONS,
    CheckStatusParams,
    CheckStatusResponse,
    GenerateImageParams,
    GenerateImageResponse,
)
from ._common import FreepikTool


class GenerateImageTool(FreepikTool):
    """Start a Mystic generation task."""

    order = 4
    input_model = GenerateImageParams

    @property
    def name(self) -> str:
        return "generate_image"

    @property
    def description(self) -> str:
        return "Generate an image using Freepik Mystic AI"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="prompt",
                type="string",
                required=True,
                description="Text description of the image to generate"
            ),
            ToolParameter(
                name="resolution",
                type="string",
                enum=RESOLUTIONS,
                description="Image resolution"
            ),
            ToolParameter(
                name="aspect_ratio",
                type="string",
                enum=ASPECT_RATIOS,
                description="Image aspect ratio"
            ),
            ToolParameter(
                name="structure_reference",
                type="string",
                description="Reference image guiding the structure (URL or base64)"
            ),
            ToolParameter(
                name="style_reference",
                type="string",
                description="Reference image guiding the style (URL or base64)"
            ),
            ToolParameter(
                name="realism",
                type="boolean",
                description="Enable realistic style"
            ),
            ToolParameter(
                name="engine",
                type="string",
                enum=ENGINES,
                description="AI engine to use"
            ),
            ToolParameter(
                name="creative_detailing",
                type="integer",
                minimum=CREATIVE_DETAILING_MIN,
                maximum=CREATIVE_DETAILING_MAX,
                description="Level of creative detail"
            ),
            ToolParameter(
                name="filter_nsfw",
                type="boolean",
                description="Filter NSFW content from the results"
            ),
        ]

    async def execute(self, **params: Any) -> GenerateImageResponse:
        try:
            return await self.client.generate_image(params)
        except httpx.HTTPError as e:
            raise self.remote_error(e) from e


class CheckStatusTool(FreepikTool):
    """Poll a Mystic generation task."""

    order = 5
    input_model = CheckStatusParams

    @property
    def name(self) -> str:
        return "check_status"

    @property
    def description(self) -> str:
        return "Check the status of a Mystic image generation task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="task_id",
                type="string",
                required=True,
                description="ID of the generation task to check"
            )
        ]

    async def execute(self, task_id: str) -> CheckStatusResponse:
        try:
            return await self.client.check_status(task_id)
        except httpx.HTTPError as e:
            raise self.remote_error(e) from e
