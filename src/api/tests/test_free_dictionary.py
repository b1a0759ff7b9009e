"""Tests for the Free Dictionary API adapter.

Tests cover URL building, status/payload pass-through, non-JSON bodies,
and translation of httpx and unexpected errors into DictionaryTransportError.
"""

import unittest

import httpx

from adapter.external.free_dictionary import FreeDictionaryAdapter
from port.dictionary import DictionaryTransportError

BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


class TestBuildUrl(unittest.TestCase):

    def test_word_is_appended(self):
        adapter = FreeDictionaryAdapter(base_url=BASE_URL)
        self.assertEqual(adapter.build_url("dog"), f"{BASE_URL}/dog")

    def test_word_is_quoted(self):
        adapter = FreeDictionaryAdapter(base_url=BASE_URL + "/")
        self.assertEqual(adapter.build_url("ice cream"), f"{BASE_URL}/ice%20cream")
        self.assertEqual(adapter.build_url("a/b"), f"{BASE_URL}/a%2Fb")


class TestFetch(unittest.IsolatedAsyncioTestCase):
    """Test FreeDictionaryAdapter.fetch() against a mock transport."""

    def _adapter(self, handler) -> FreeDictionaryAdapter:
        return FreeDictionaryAdapter(base_url=BASE_URL, transport=httpx.MockTransport(handler))

    async def test_success_returns_parsed_payload(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=[{"word": "dog"}])

        response = await self._adapter(handler).fetch("dog")

        self.assertEqual(seen, [f"{BASE_URL}/dog"])
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.is_success)
        self.assertEqual(response.payload, [{"word": "dog"}])

    async def test_404_is_returned_not_raised(self):
        body = {"title": "No Definitions Found", "message": "Sorry pal", "resolution": "Try again"}
        adapter = self._adapter(lambda request: httpx.Response(404, json=body))

        response = await adapter.fetch("qwzx")

        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.is_success)
        self.assertEqual(response.payload, body)

    async def test_non_json_error_body_gives_none_payload(self):
        adapter = self._adapter(lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"))

        response = await adapter.fetch("dog")

        self.assertEqual(response.status_code, 502)
        self.assertIsNone(response.payload)

    async def test_single_attempt_per_fetch(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500, json={})

        await self._adapter(handler).fetch("dog")

        self.assertEqual(len(calls), 1)

    async def test_connect_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(DictionaryTransportError):
            await self._adapter(handler).fetch("dog")

    async def test_timeout_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with self.assertRaises(DictionaryTransportError):
            await self._adapter(handler).fetch("dog")

    async def test_non_json_success_body_raises_transport_error(self):
        adapter = self._adapter(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with self.assertRaises(DictionaryTransportError):
            await adapter.fetch("dog")

    async def test_invalid_url_raises_transport_error(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json=[])

        with self.assertRaises(DictionaryTransportError):
            await self._adapter(handler).fetch("a" * 70000)
        self.assertEqual(calls, [])

    async def test_unexpected_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("transport exploded")

        with self.assertRaises(DictionaryTransportError):
            await self._adapter(handler).fetch("dog")


if __name__ == "__main__":
    unittest.main()
