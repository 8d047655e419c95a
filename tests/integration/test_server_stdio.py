"""Integration tests for the furi MCP server.

These tests start ``python -m furi`` as a subprocess and talk to it over the
MCP stdio transport.
"""

import json
import os
import sys

import pytest
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


def server_params(**env: str) -> StdioServerParameters:
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "furi"],
        env={**os.environ, "FURI_LOG_LEVEL": "WARNING", **env},
    )


async def call(session: ClientSession, tool: str, arguments: dict) -> dict:
    result = await session.call_tool(tool, arguments)
    return json.loads(result.content[0].text)


@pytest.mark.integration
@pytest.mark.asyncio
class TestServerStdio:
    """Round trips through a real server process."""

    async def test_lists_tools(self):
        async with stdio_client(server_params()) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()
                tools = await session.list_tools()

        assert "uri_to_path" in {tool.name for tool in tools.tools}

    async def test_posix_round_trip(self):
        async with stdio_client(server_params(FURI_PLATFORM="posix")) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()
                uri = await call(session, "path_to_uri", {"path": "/dir/a b#c"})
                path = await call(session, "uri_to_path", {"uri": uri["uri"]})

        assert uri == {"status": "success", "uri": "file:///dir/a%20b%23c"}
        assert path["path"] == "/dir/a b#c"

    async def test_windows_long_path_setting(self):
        params = server_params(FURI_PLATFORM="windows", FURI_WINDOWS_LONG_PATH="true")
        async with stdio_client(params) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()
                result = await call(session, "uri_to_path", {"uri": "file://server/share/x"})

        assert result["path"] == "\\\\?\\unc\\server\\share\\x"
        assert result["format"] == "windows"

    async def test_error_response(self):
        async with stdio_client(server_params()) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()
                result = await call(session, "parent_uri", {"uri": "https://example.com/"})

        assert result["status"] == "error"
        assert result["error_code"] == "ERR_INVALID_FILE_URI"
