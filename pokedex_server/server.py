"""Expose the Pokédex lookups as FastMCP tools."""

import inspect
from typing import Annotated, Any, Awaitable, Callable, Dict

import anyio
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from pokemon_tools.gateway import TOOLS, PokemonGateway

SERVER_NAME = "Pokedex MCP Server"


def _tool_function(gateway: PokemonGateway, tool: Dict[str, Any]) -> Callable[..., Awaitable[str]]:
    """Build the async callable FastMCP registers for one TOOLS entry.

    The callable's signature carries the tool's single string parameter and
    its description, so FastMCP derives the input schema from the registry.
    """
    definition = tool["function"]
    tool_name = definition["name"]
    param = definition["parameters"]["required"][0]
    param_description = definition["parameters"]["properties"][param]["description"]

    # requests blocks, so each call runs in a worker thread. A cancelled call
    # returns at once; the thread finishes within the request timeout.
    async def call(**arguments: str) -> str:
        return await anyio.to_thread.run_sync(
            gateway.invoke, tool_name, arguments, abandon_on_cancel=True
        )

    annotation = Annotated[str, Field(description=param_description)]
    call.__name__ = tool["handler"]
    call.__signature__ = inspect.Signature(
        [inspect.Parameter(param, inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=annotation)],
        return_annotation=str,
    )
    call.__annotations__ = {param: annotation, "return": str}
    return call


def build_server(gateway: PokemonGateway, server_name: str = SERVER_NAME) -> FastMCP:
    """Register every tool in TOOLS on a new FastMCP server.

    Args:
        gateway: Shared gateway serving all calls.
        server_name: Name announced to the host.

    Returns:
        FastMCP server ready to run.
    """
    server = FastMCP(server_name)
    for tool in TOOLS:
        definition = tool["function"]
        server.add_tool(
            _tool_function(gateway, tool),
            name=definition["name"],
            description=definition["description"],
        )
    return server
