"""Tests for DictionaryService.

Tests cover:
1. Blank query handling (warning severity, no fetch)
2. HTTP status classification (404, other non-2xx, transport and unexpected failures)
3. Payload classification (explicit not-found, unknown error shape, empty list)
4. Successful merge into a one-element entry list
"""

import unittest
from unittest.mock import AsyncMock, MagicMock

import httpx

from adapter.external.free_dictionary import FreeDictionaryAdapter
from adapter.fake.dictionary import FakeDictionaryAdapter
from domain.model import messages
from domain.model.search import SearchState
from port.dictionary import DictionaryTransportError
from services.dictionary_service import DictionaryService


DOG_ENTRIES = [
    {
        "word": "dog",
        "phonetics": [{"text": "/dɒɡ/"}],
        "meanings": [{
            "partOfSpeech": "noun",
            "definitions": [{"definition": "a domestic animal", "synonyms": ["pet", "animal"]}],
        }],
    },
    {
        "word": "dog",
        "meanings": [{
            "partOfSpeech": "noun",
            "definitions": [{"definition": "a domestic animal", "synonyms": ["creature"]}],
        }],
    },
]


class TestDictionaryServiceLookup(unittest.IsolatedAsyncioTestCase):
    """Test lookup() outcome classification."""

    async def _lookup(self, word="dog", **fake_kwargs):
        self.adapter = FakeDictionaryAdapter(**fake_kwargs)
        service = DictionaryService(self.adapter)
        return await service.lookup(word)

    async def test_success_returns_single_merged_entry(self):
        outcome = await self._lookup("  dog ", payload=DOG_ENTRIES)

        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.state, SearchState.SUCCESS)
        self.assertEqual(outcome.word, "dog")
        self.assertEqual(self.adapter.last_word, "dog")
        self.assertEqual(len(outcome.entries), 1)
        noun = outcome.entry.meanings[0]
        self.assertEqual(noun.definitions[0].synonyms, ("pet", "animal", "creature"))
        self.assertIsNone(outcome.error)

    async def test_blank_query_is_warning_without_fetch(self):
        for word in ("", "   ", "\t\n"):
            with self.subTest(word=word):
                outcome = await self._lookup(word, payload=DOG_ENTRIES)

                self.assertEqual(outcome.state, SearchState.BLANK_QUERY)
                self.assertEqual(outcome.error.severity, "warning")
                self.assertEqual(outcome.error.title, messages.ENTER_WORD_TITLE)
                self.assertEqual(self.adapter.calls, [])
                self.assertIsNone(outcome.entries)

    async def test_http_404_is_word_not_found(self):
        outcome = await self._lookup("qwzx", status_code=404, payload={"title": "No Definitions Found"})

        self.assertEqual(outcome.state, SearchState.NOT_FOUND)
        self.assertEqual(outcome.error.title, messages.WORD_NOT_FOUND_TITLE)
        self.assertEqual(outcome.error.message, messages.word_not_found("qwzx"))
        self.assertEqual(outcome.error.severity, "error")

    async def test_http_500_is_api_error_with_status(self):
        outcome = await self._lookup(status_code=500, payload=None)

        self.assertEqual(outcome.state, SearchState.HTTP_ERROR)
        self.assertEqual(outcome.status_code, 500)
        self.assertEqual(outcome.error.title, messages.api_error_title(500))
        self.assertEqual(outcome.error.message, messages.api_error(500))

    async def test_other_non_2xx_statuses_are_api_errors(self):
        for status in (400, 429, 503):
            with self.subTest(status=status):
                outcome = await self._lookup(status_code=status, payload=DOG_ENTRIES)
                self.assertEqual(outcome.state, SearchState.HTTP_ERROR)
                self.assertEqual(outcome.status_code, status)

    async def test_transport_failure_is_network_error(self):
        outcome = await self._lookup(error=DictionaryTransportError("connection refused"))

        self.assertEqual(outcome.state, SearchState.NETWORK_ERROR)
        self.assertEqual(outcome.error.title, messages.NETWORK_ERROR_TITLE)
        self.assertEqual(outcome.error.message, messages.NETWORK_ERROR)

    async def test_unexpected_port_error_is_network_error(self):
        port = MagicMock()
        port.fetch = AsyncMock(side_effect=ValueError("boom"))

        outcome = await DictionaryService(port).lookup("dog")

        self.assertEqual(outcome.state, SearchState.NETWORK_ERROR)
        self.assertEqual(outcome.error.title, messages.NETWORK_ERROR_TITLE)
        self.assertIsNone(outcome.entries)

    async def test_non_json_success_body_is_network_error(self):
        adapter = FreeDictionaryAdapter(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>")),
        )

        outcome = await DictionaryService(adapter).lookup("dog")

        self.assertEqual(outcome.state, SearchState.NETWORK_ERROR)
        self.assertEqual(outcome.error.message, messages.NETWORK_ERROR)

    async def test_explicit_not_found_payload(self):
        outcome = await self._lookup(payload={"title": "No Definitions Found"})

        self.assertEqual(outcome.state, SearchState.NOT_FOUND)
        self.assertEqual(outcome.error.title, messages.WORD_NOT_FOUND_TITLE)

    async def test_unknown_error_payload_is_no_definition(self):
        outcome = await self._lookup(payload={"title": "Something Else"})

        self.assertEqual(outcome.state, SearchState.MALFORMED)
        self.assertEqual(outcome.error.title, messages.NO_DEFINITION_FOUND_TITLE)
        self.assertEqual(outcome.error.message, messages.no_definition_found("dog"))

    async def test_empty_list_is_no_definition(self):
        outcome = await self._lookup(payload=[])

        self.assertEqual(outcome.state, SearchState.EMPTY)
        self.assertEqual(outcome.error.title, messages.NO_DEFINITION_FOUND_TITLE)

    async def test_list_without_objects_is_no_definition(self):
        outcome = await self._lookup(payload=["junk"])

        self.assertEqual(outcome.state, SearchState.MALFORMED)
        self.assertEqual(outcome.error.title, messages.NO_DEFINITION_FOUND_TITLE)

    async def test_each_lookup_starts_clean(self):
        """A failed lookup leaves no trace on the next one."""
        adapter = FakeDictionaryAdapter(status_code=500)
        service = DictionaryService(adapter)

        failed = await service.lookup("dog")
        adapter.status_code = 200
        adapter.payload = DOG_ENTRIES
        succeeded = await service.lookup("dog")

        self.assertEqual(failed.state, SearchState.HTTP_ERROR)
        self.assertTrue(succeeded.ok)
        self.assertIsNone(succeeded.error)
        self.assertIsNone(succeeded.status_code)


if __name__ == "__main__":
    unittest.main()
