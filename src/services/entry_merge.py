"""Entry merge pipeline — folds raw dictionary entries into one canonical entry.

The dictionary service returns one raw entry per etymological source. This
module classifies the payload, then merges every entry into a single
CanonicalEntry:

    classify_payload -> dedupe_phonetics / first_present
                     -> aggregate_meanings (merge_definition per definition)
                     -> cap_meaning -> build_canonical_entry

merge_entries is the same merge without caps, and also accepts entries
that were already merged.

Raw entries are type-erased dicts straight from JSON. Every field is read
defensively; missing or mistyped optional fields are treated as absent.
All functions are pure and allocate fresh structures per call.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable

from domain.model.entry import CanonicalEntry, CanonicalMeaning, Definition, License, Phonetic
from domain.model.ordered import OrderedMap, UniqueList

logger = logging.getLogger(__name__)

MAX_DEFINITIONS_PER_PART_OF_SPEECH = 3
MAX_SYNONYMS_ANTONYMS_TO_SHOW = 4

NO_DEFINITIONS_TITLE = "No Definitions Found"


# ── Raw field readers ────────────────────────────────────────


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def _records(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


# ── Payload classification ───────────────────────────────────


class PayloadKind(str, Enum):
    VALID_LIST = "valid_list"
    EXPLICIT_NOT_FOUND = "explicit_not_found"
    MALFORMED_SHAPE = "malformed_shape"
    EMPTY_LIST = "empty_list"


@dataclass(frozen=True)
class ClassifiedPayload:
    kind: PayloadKind
    entries: list[Any] = field(default_factory=list)


def classify_payload(body: Any) -> ClassifiedPayload:
    """Classify a parsed 2xx response body.

    A list is accepted as-is (elements are validated lazily while merging).
    A non-list is an explicit not-found only when its ``title`` is the
    service's "No Definitions Found" sentinel; anything else is malformed.
    """
    if not isinstance(body, list):
        if isinstance(body, dict) and body.get("title") == NO_DEFINITIONS_TITLE:
            return ClassifiedPayload(PayloadKind.EXPLICIT_NOT_FOUND)
        return ClassifiedPayload(PayloadKind.MALFORMED_SHAPE)
    if not body:
        return ClassifiedPayload(PayloadKind.EMPTY_LIST)
    return ClassifiedPayload(PayloadKind.VALID_LIST, entries=list(body))


# ── Phonetics ────────────────────────────────────────────────


def dedupe_phonetics(entries: Iterable[dict[str, Any]]) -> tuple[Phonetic, ...]:
    """Concatenate every entry's phonetics and keep first occurrences of (text, audio)."""
    seen: UniqueList[tuple[str | None, str | None]] = UniqueList()
    phonetics: list[Phonetic] = []
    for entry in entries:
        for raw in _records(entry.get("phonetics")):
            phonetic = Phonetic(
                text=_optional_str(raw.get("text")),
                audio=_optional_str(raw.get("audio")),
            )
            if seen.add(phonetic.key):
                phonetics.append(phonetic)
    return tuple(phonetics)


def first_present(entries: Iterable[dict[str, Any]], key: str) -> str | None:
    """First non-empty string value of `key` across entries, in entry order."""
    for entry in entries:
        value = _optional_str(entry.get(key))
        if value:
            return value
    return None


# ── Definition merging ───────────────────────────────────────


@dataclass
class DefinitionAccumulator:
    definition: str
    example: str | None = None
    synonyms: UniqueList[str] = field(default_factory=UniqueList)
    antonyms: UniqueList[str] = field(default_factory=UniqueList)

    def freeze(self) -> Definition:
        return Definition(
            definition=self.definition,
            example=self.example,
            synonyms=self.synonyms.to_tuple(),
            antonyms=self.antonyms.to_tuple(),
        )


def merge_definition(definitions: list[DefinitionAccumulator], raw: dict[str, Any]) -> None:
    """Fold one raw definition into `definitions` in place.

    Identical definition text merges into the existing record: synonyms and
    antonyms are unioned, and the incoming example only fills a missing one.
    New text is appended with its own related-word lists deduplicated.
    """
    text = raw.get("definition")
    if not isinstance(text, str):
        logger.debug("Skipping definition without text", extra={"raw_keys": sorted(raw)})
        return

    example = _optional_str(raw.get("example"))
    for existing in definitions:
        if existing.definition == text:
            existing.synonyms.extend(_string_list(raw.get("synonyms")))
            existing.antonyms.extend(_string_list(raw.get("antonyms")))
            if not existing.example and example:
                existing.example = example
            return

    definitions.append(DefinitionAccumulator(
        definition=text,
        example=example,
        synonyms=UniqueList(_string_list(raw.get("synonyms"))),
        antonyms=UniqueList(_string_list(raw.get("antonyms"))),
    ))


# ── Meaning aggregation ──────────────────────────────────────


@dataclass
class MeaningAccumulator:
    """Per part-of-speech accumulator.

    Meaning-level synonyms/antonyms are collected raw and deduplicated only
    in to_meaning(), after every entry has been folded in.
    """
    part_of_speech: str
    definitions: list[DefinitionAccumulator] = field(default_factory=list)
    synonyms_raw: list[str] = field(default_factory=list)
    antonyms_raw: list[str] = field(default_factory=list)

    def to_meaning(self) -> CanonicalMeaning:
        return CanonicalMeaning(
            part_of_speech=self.part_of_speech,
            definitions=tuple(d.freeze() for d in self.definitions),
            synonyms=UniqueList(self.synonyms_raw).to_tuple(),
            antonyms=UniqueList(self.antonyms_raw).to_tuple(),
        )


def aggregate_meanings(entries: Iterable[dict[str, Any]]) -> OrderedMap[str, MeaningAccumulator]:
    """Group meanings from all entries by part of speech, in first-seen order."""
    groups: OrderedMap[str, MeaningAccumulator] = OrderedMap()
    for entry in entries:
        for raw_meaning in _records(entry.get("meanings")):
            pos = raw_meaning.get("partOfSpeech")
            if not isinstance(pos, str) or not pos:
                logger.debug("Skipping meaning without part of speech",
                             extra={"word": entry.get("word")})
                continue

            group = groups.get_or_create(pos, lambda: MeaningAccumulator(part_of_speech=pos))
            for raw_def in _records(raw_meaning.get("definitions")):
                merge_definition(group.definitions, raw_def)
            group.synonyms_raw.extend(_string_list(raw_meaning.get("synonyms")))
            group.antonyms_raw.extend(_string_list(raw_meaning.get("antonyms")))
    return groups


# ── Capping ──────────────────────────────────────────────────


def cap_meaning(
    meaning: CanonicalMeaning,
    max_definitions: int | None = MAX_DEFINITIONS_PER_PART_OF_SPEECH,
    max_related: int | None = MAX_SYNONYMS_ANTONYMS_TO_SHOW,
) -> CanonicalMeaning:
    """Dedup related words, then prefix-cut every list. None disables a cap."""
    definitions = meaning.definitions
    if max_definitions is not None:
        definitions = definitions[:max_definitions]
    return replace(
        meaning,
        definitions=definitions,
        synonyms=UniqueList(meaning.synonyms).to_tuple(max_related),
        antonyms=UniqueList(meaning.antonyms).to_tuple(max_related),
    )


# ── Canonical entry ──────────────────────────────────────────


def _license(entry: dict[str, Any]) -> License:
    raw = entry.get("license")
    if not isinstance(raw, dict):
        return License()
    return License(
        name=_optional_str(raw.get("name")) or "",
        url=_optional_str(raw.get("url")) or "",
    )


def build_canonical_entry(
    entries: list[Any],
    max_definitions: int | None = MAX_DEFINITIONS_PER_PART_OF_SPEECH,
    max_related: int | None = MAX_SYNONYMS_ANTONYMS_TO_SHOW,
) -> CanonicalEntry:
    """Merge a non-empty list of raw entries into one CanonicalEntry.

    Top-level word, license and source URLs come from the first entry;
    phonetic and origin are the first non-empty values across entries.

    Raises:
        ValueError: If no element of `entries` is a mapping.
    """
    records = _records(entries)
    if len(records) != len(entries):
        logger.debug("Ignoring non-object elements in entry list",
                     extra={"dropped": len(entries) - len(records)})
    if not records:
        raise ValueError("No mergeable entries in payload")

    first = records[0]
    meanings = tuple(
        cap_meaning(group.to_meaning(), max_definitions, max_related)
        for group in aggregate_meanings(records).values()
    )
    return CanonicalEntry(
        word=_optional_str(first.get("word")) or "",
        phonetic=first_present(records, "phonetic"),
        phonetics=dedupe_phonetics(records),
        origin=first_present(records, "origin"),
        meanings=meanings,
        license=_license(first),
        source_urls=tuple(_string_list(first.get("sourceUrls"))),
    )


def to_raw_entry(entry: CanonicalEntry) -> dict[str, Any]:
    """Serialize a CanonicalEntry back to the dictionary service's JSON shape.

    Feeding the result to build_canonical_entry together with further raw
    entries gives the same merge as merging all raw entries at once.
    """
    return {
        "word": entry.word,
        "phonetic": entry.phonetic,
        "phonetics": [{"text": p.text, "audio": p.audio} for p in entry.phonetics],
        "origin": entry.origin,
        "meanings": [
            {
                "partOfSpeech": m.part_of_speech,
                "definitions": [
                    {
                        "definition": d.definition,
                        "example": d.example,
                        "synonyms": list(d.synonyms),
                        "antonyms": list(d.antonyms),
                    }
                    for d in m.definitions
                ],
                "synonyms": list(m.synonyms),
                "antonyms": list(m.antonyms),
            }
            for m in entry.meanings
        ],
        "license": {"name": entry.license.name, "url": entry.license.url},
        "sourceUrls": list(entry.source_urls),
    }


def merge_entries(entries: list[Any]) -> CanonicalEntry:
    """Uncapped merge of raw entries and/or already-merged CanonicalEntry values.

    Associative: merge_entries([merge_entries([a, b]), c]) equals
    merge_entries([a, b, c]).
    """
    records = [to_raw_entry(e) if isinstance(e, CanonicalEntry) else e for e in entries]
    return build_canonical_entry(records, max_definitions=None, max_related=None)
