import unittest
from unittest import mock

import requests

from pokemon_tools.config import Settings
from pokemon_tools.models import ErrorKind, ToolKind, ToolRequest
from pokemon_tools.pokemon_client import PokemonAPIClient


def make_response(status_code=200, text="{}"):
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.url = "https://pokeapi.co/api/v2/test"
    return response


class TestPokemonAPIClient(unittest.TestCase):
    def setUp(self):
        self.session = mock.create_autospec(requests.Session, instance=True)
        self.session.headers = {}
        self.session.cookies = mock.Mock()
        self.client = PokemonAPIClient(Settings(timeout=5), session=self.session)

    def test_default_headers(self):
        self.assertEqual(self.session.headers["Accept"], "application/json")
        self.assertEqual(self.session.headers["User-Agent"], "SpringAI-Agent/1.0")

    def test_lowercases_name_in_url(self):
        self.session.get.return_value = make_response(text='{"name":"pikachu"}')
        self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="PIKACHU"))
        self.session.get.assert_called_once_with(
            "https://pokeapi.co/api/v2/pokemon/pikachu", timeout=5
        )

    def test_same_url_for_any_case(self):
        self.session.get.return_value = make_response()
        self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="PIKACHU"))
        self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="pikachu"))
        first, second = self.session.get.call_args_list
        self.assertEqual(first, second)

    def test_ability_url(self):
        self.session.get.return_value = make_response()
        self.client.lookup(ToolRequest(tool_kind=ToolKind.ABILITY, raw_name="Overgrow"))
        self.session.get.assert_called_once_with(
            "https://pokeapi.co/api/v2/ability/overgrow", timeout=5
        )

    def test_path_segment_is_encoded(self):
        self.session.get.return_value = make_response()
        self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="Mr. Mime/../x"))
        url = self.session.get.call_args.args[0]
        self.assertEqual(url, "https://pokeapi.co/api/v2/pokemon/mr.%20mime%2F..%2Fx")

    def test_body_passed_through_verbatim(self):
        body = '{ "name" : "charizard",\n  "id":6 }'
        self.session.get.return_value = make_response(text=body)
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="charizard"))
        self.assertTrue(result.ok)
        self.assertEqual(result.body, body)

    def test_non_json_body_is_not_parsed(self):
        self.session.get.return_value = make_response(text="not json at all")
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.ABILITY, raw_name="static"))
        self.assertTrue(result.ok)
        self.assertEqual(result.body, "not json at all")

    def test_404_is_not_found(self):
        self.session.get.return_value = make_response(404, "Not Found")
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="notapokemon123"))
        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, ErrorKind.NOT_FOUND)

    def test_server_error_is_http_error(self):
        self.session.get.return_value = make_response(503, "busy")
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="pikachu"))
        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, ErrorKind.HTTP_ERROR)

    def test_connection_error_is_transport(self):
        self.session.get.side_effect = requests.exceptions.ConnectionError("refused")
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="pikachu"))
        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, ErrorKind.TRANSPORT)

    def test_timeout_is_transport(self):
        self.session.get.side_effect = requests.exceptions.ReadTimeout("slow")
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.ABILITY, raw_name="static"))
        self.assertEqual(result.error_kind, ErrorKind.TRANSPORT)

    def test_unexpected_error_is_absorbed(self):
        self.session.get.side_effect = RuntimeError("boom")
        result = self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="pikachu"))
        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, ErrorKind.TRANSPORT)

    def test_failure_is_logged(self):
        self.session.get.return_value = make_response(404, "Not Found")
        with self.assertLogs("pokemon_tools.pokemon_client", level="WARNING") as logs:
            self.client.lookup(ToolRequest(tool_kind=ToolKind.POKEMON, raw_name="missingno"))
        self.assertIn("not_found", logs.output[0])

    def test_context_manager_closes_session(self):
        with self.client as client:
            self.assertIs(client, self.client)
        self.session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
