"""
Unit tests for ToolDispatcher: discovery, invocation and error envelopes.
"""

import json

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND

TOOL_NAMES = [
    "search_resources",
    "get_resource",
    "download_resource",
    "generate_image",
    "check_status",
]


class TestListTools:
    def test_five_descriptors(self, dispatcher):
        tools = dispatcher.list_tools()
        assert [tool.name for tool in tools] == TOOL_NAMES
        for tool in tools:
            assert tool.description
            assert tool.inputSchema["type"] == "object"

    @pytest.mark.asyncio
    async def test_unchanged_after_calls(self, dispatcher, stub_api, sample_resource):
        before = [tool.model_dump() for tool in dispatcher.list_tools()]
        stub_api.add("GET", "/v1/resources/42", json=sample_resource)

        await dispatcher.call_tool("get_resource", {"id": 42})
        await dispatcher.call_tool("get_resource", {"id": 0})

        assert [tool.model_dump() for tool in dispatcher.list_tools()] == before


class TestCallTool:
    @pytest.mark.asyncio
    async def test_get_resource_round_trip(self, dispatcher, stub_api, sample_resource):
        stub_api.add("GET", "/v1/resources/42", json=sample_resource)

        result = await dispatcher.call_tool("get_resource", {"id": 42})

        assert not result.isError
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert json.loads(result.content[0].text) == sample_resource
        assert result.content[0].text == json.dumps(sample_resource, indent=2)

    @pytest.mark.asyncio
    async def test_search_forwards_query(self, dispatcher, stub_api):
        body = {"data": [], "meta": {"current_page": 2, "last_page": 2, "per_page": 5, "total": 6}}
        stub_api.add("GET", "/v1/resources", json=body)

        result = await dispatcher.call_tool("search_resources", {
            "term": "mountain",
            "page": 2,
            "limit": 5,
            "order": "recent",
            "filters": {"content_type": {"vector": True}, "color": "green"}
        })

        assert json.loads(result.content[0].text) == body
        params = stub_api.requests[0].url.params
        assert params["term"] == "mountain"
        assert params["page"] == "2"
        assert params["limit"] == "5"
        assert params["order"] == "recent"
        assert params["filters[content_type][vector]"] == "true"
        assert params["filters[color]"] == "green"

    @pytest.mark.asyncio
    async def test_search_without_arguments(self, dispatcher, stub_api):
        stub_api.add("GET", "/v1/resources", json={"data": [], "meta": {}})

        result = await dispatcher.call_tool("search_resources", None)

        assert not result.isError
        assert str(stub_api.requests[0].url.query, "ascii") == ""

    @pytest.mark.asyncio
    async def test_generate_then_check_status(self, dispatcher, stub_api):
        stub_api.add("POST", "/v1/ai/mystic", json={"task_id": "t-1", "status": "CREATED"})
        stub_api.add("GET", "/v1/ai/mystic/t-1", json={"status": "COMPLETED", "generated": ["u1"]})

        started = await dispatcher.call_tool("generate_image", {"prompt": "lighthouse", "creative_detailing": 100})
        handle = json.loads(started.content[0].text)
        status = await dispatcher.call_tool("check_status", {"task_id": handle["task_id"]})

        assert json.loads(stub_api.requests[0].content) == {"prompt": "lighthouse", "creative_detailing": 100}
        assert json.loads(status.content[0].text) == {"status": "COMPLETED", "generated": ["u1"]}

    @pytest.mark.asyncio
    async def test_download_resource(self, dispatcher, stub_api):
        stub_api.add("GET", "/v1/resources/7/download", json={"url": "https://dl/7"})

        result = await dispatcher.call_tool("download_resource", {"id": 7})

        assert json.loads(result.content[0].text) == {"url": "https://dl/7"}


class TestCallToolErrors:
    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher, stub_api):
        with pytest.raises(McpError) as exc:
            await dispatcher.call_tool("delete_resource", {"id": 1})

        assert exc.value.error.code == METHOD_NOT_FOUND
        assert "Unknown tool: delete_resource" in exc.value.error.message
        assert stub_api.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", ["get_resource", "download_resource"])
    @pytest.mark.parametrize("bad_id", [0, -5, 2.5])
    async def test_invalid_id_makes_no_request(self, dispatcher, stub_api, tool_name, bad_id):
        result = await dispatcher.call_tool(tool_name, {"id": bad_id})

        assert result.isError
        assert "id" in result.content[0].text
        assert stub_api.requests == []

    @pytest.mark.asyncio
    async def test_empty_prompt_makes_no_request(self, dispatcher, stub_api):
        result = await dispatcher.call_tool("generate_image", {"prompt": ""})

        assert result.isError
        assert "prompt" in result.content[0].text
        assert stub_api.requests == []

    @pytest.mark.asyncio
    async def test_creative_detailing_out_of_range(self, dispatcher, stub_api):
        result = await dispatcher.call_tool("generate_image", {"prompt": "p", "creative_detailing": 101})

        assert result.isError
        assert "creative_detailing" in result.content[0].text
        assert stub_api.requests == []

    @pytest.mark.asyncio
    async def test_non_object_arguments(self, dispatcher, stub_api):
        result = await dispatcher.call_tool("get_resource", [42])

        assert result.isError
        assert stub_api.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 503])
    async def test_remote_failure_is_error_result(self, dispatcher, stub_api, status):
        stub_api.add("GET", "/v1/ai/mystic/t-9", status=status, json={"message": "nope"})

        result = await dispatcher.call_tool("check_status", {"task_id": "t-9"})

        assert result.isError
        assert str(status) in result.content[0].text
        assert "/v1/ai/mystic/t-9" in result.content[0].text
