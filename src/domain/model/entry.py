"""Canonical dictionary entry models.

These are the display-ready, immutable values produced by merging the raw
entries returned by the dictionary service. Optional fields are None when
absent; an empty string is never used to mean "not recorded".
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Phonetic:
    """A pronunciation transcription, optionally paired with an audio URL."""
    text: str | None = None
    audio: str | None = None

    @property
    def key(self) -> tuple[str | None, str | None]:
        """Dedup identity: two phonetics are duplicates iff both fields match."""
        return (self.text, self.audio)


@dataclass(frozen=True)
class License:
    name: str = ""
    url: str = ""


@dataclass(frozen=True)
class Definition:
    """One definition within a part-of-speech group."""
    definition: str
    example: str | None = None
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()


@dataclass(frozen=True)
class CanonicalMeaning:
    """All definitions for one part of speech, with unioned related words."""
    part_of_speech: str
    definitions: tuple[Definition, ...] = ()
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()


@dataclass(frozen=True)
class CanonicalEntry:
    """The single, deduplicated, capped result of one search."""
    word: str
    phonetic: str | None = None
    phonetics: tuple[Phonetic, ...] = ()
    origin: str | None = None
    meanings: tuple[CanonicalMeaning, ...] = ()
    license: License = field(default_factory=License)
    source_urls: tuple[str, ...] = ()

    def meaning_for(self, part_of_speech: str) -> CanonicalMeaning | None:
        for meaning in self.meanings:
            if meaning.part_of_speech == part_of_speech:
                return meaning
        return None
