"""Look a word up against the live Free Dictionary API and print the merged entry.

Not collected by pytest (manual use only).

Usage:
    PYTHONPATH=src python scripts/lookup_word.py serendipity
    PYTHONPATH=src python scripts/lookup_word.py --random
"""

import argparse
import asyncio
import json

from dotenv import load_dotenv

load_dotenv()

from adapter.external.free_dictionary import FreeDictionaryAdapter
from domain.model.search import SearchOutcome
from services.dictionary_service import DictionaryService
from services.entry_merge import to_raw_entry
from services.search_session import SearchSession


def _render(outcome: SearchOutcome) -> dict:
    if outcome.ok:
        return {"state": outcome.state.value, "entries": [to_raw_entry(e) for e in outcome.entries]}
    return {
        "state": outcome.state.value,
        "word": outcome.word,
        "error": {
            "title": outcome.error.title,
            "message": outcome.error.message,
            "severity": outcome.error.severity,
        },
    }


async def main() -> None:
    parser = argparse.ArgumentParser(description="Merged dictionary lookup")
    parser.add_argument("word", nargs="?", default="", help="Word to look up")
    parser.add_argument("--random", action="store_true", help="Look up a random word instead")
    args = parser.parse_args()

    session = SearchSession(DictionaryService(FreeDictionaryAdapter()))
    if args.random:
        outcome = await session.search_random()
    else:
        outcome = await session.search(args.word)

    print(json.dumps(_render(outcome), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    asyncio.run(main())
