"""
Tool handlers exposed to the agent host, plus their definitions.

Each handler turns one tool call into one PokéAPI lookup and always returns
a string: the raw upstream body, or a fixed error message the agent can read.
"""

from typing import Any, Callable, Dict, List

from pokemon_tools.models import ToolKind, ToolRequest
from pokemon_tools.pokemon_client import PokemonAPIClient

POKEMON_TOOL_NAME = "get-pokemon-info"
POKEMON_TOOL_DESCRIPTION = (
    "Get information about a Pokemon by its name (e.g., pikachu, charizard)"
)
POKEMON_PARAM_DESCRIPTION = "The name of the Pokemon in lowercase"

ABILITY_TOOL_NAME = "get-ability-info"
ABILITY_TOOL_DESCRIPTION = "Get information about a Pokemon move or ability"
ABILITY_PARAM_DESCRIPTION = "The name of the ability (e.g., static, overgrow)"

POKEMON_ERROR = (
    "Error: Could not find Pokemon with name '{name}'. Please check the spelling."
)
ABILITY_ERROR = "Error: Could not find ability details."


class PokemonGateway:
    """
    Stateless front for the two tools. Safe to call from several threads at
    once since it only reads the shared client.
    """

    def __init__(self, client: PokemonAPIClient):
        self.client = client

    def fetch_pokemon_info(self, name: str) -> str:
        """
        Retrieves the raw PokéAPI document for a Pokemon.
        """
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name=name))
        if result.ok:
            return result.body
        # Echo the name exactly as the caller typed it
        return POKEMON_ERROR.format(name=name)

    def fetch_ability_info(self, ability: str) -> str:
        """
        Retrieves the raw PokéAPI document for an ability.
        """
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.ABILITY, raw_name=ability))
        if result.ok:
            return result.body
        return ABILITY_ERROR

    def handler_for(self, tool_name: str) -> Callable[[str], str]:
        for tool in TOOLS:
            if tool["function"]["name"] == tool_name:
                return getattr(self, tool["handler"])
        raise ValueError(f"Unknown tool: {tool_name}")

    def invoke(self, tool_name: str, arguments: Dict[str, Any]) -> str:
        """
        Dispatches a tool call by name.

        Args:
            tool_name: One of the names in TOOLS.
            arguments: The call arguments, keyed by parameter name.

        Returns:
            str: The handler's result.

        Raises:
            ValueError: If the tool is unknown or its parameter is missing.
        """
        handler = self.handler_for(tool_name)
        param = tool_parameter(tool_name)
        if param not in arguments:
            raise ValueError(f"Missing required argument '{param}' for {tool_name}")
        return handler(str(arguments[param]))


def tool_parameter(tool_name: str) -> str:
    """Name of the single required parameter of a tool."""
    for tool in TOOLS:
        if tool["function"]["name"] == tool_name:
            return tool["function"]["parameters"]["required"][0]
    raise ValueError(f"Unknown tool: {tool_name}")


# Tool definitions, each pointing at the gateway method that serves it
TOOLS: List[Dict[str, Any]] = [
    {
        "type": "function",
        "handler": "fetch_pokemon_info",
        "function": {
            "name": POKEMON_TOOL_NAME,
            "description": POKEMON_TOOL_DESCRIPTION,
            "strict": True,
            "parameters": {
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": POKEMON_PARAM_DESCRIPTION,
                    }
                },
                "required": ["name"],
                "additionalProperties": False,
            },
        },
    },
    {
        "type": "function",
        "handler": "fetch_ability_info",
        "function": {
            "name": ABILITY_TOOL_NAME,
            "description": ABILITY_TOOL_DESCRIPTION,
            "strict": True,
            "parameters": {
                "type": "object",
                "properties": {
                    "ability": {
                        "type": "string",
                        "description": ABILITY_PARAM_DESCRIPTION,
                    }
                },
                "required": ["ability"],
                "additionalProperties": False,
            },
        },
    },
]
