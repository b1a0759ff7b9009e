"""Pydantic models for API request/response."""

from typing import Optional, Literal
from pydantic import BaseModel, Field

from domain.model.entry import CanonicalEntry
from domain.model.search import ErrorRecord


class PhoneticResponse(BaseModel):
    """Pronunciation transcription."""
    text: Optional[str] = Field(None, description="IPA transcription")
    audio: Optional[str] = Field(None, description="Audio file URL")


class LicenseResponse(BaseModel):
    name: str = ""
    url: str = ""


class DefinitionResponse(BaseModel):
    """Response model for a merged definition."""
    definition: str
    example: Optional[str] = Field(None, description="First example seen for this definition")
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class MeaningResponse(BaseModel):
    """Response model for one part-of-speech group."""
    part_of_speech: str = Field(..., description="Part of speech: noun, verb, adjective, etc.")
    definitions: list[DefinitionResponse] = Field(default_factory=list, description="At most 3 definitions")
    synonyms: list[str] = Field(default_factory=list, description="At most 4 synonyms")
    antonyms: list[str] = Field(default_factory=list, description="At most 4 antonyms")


class EntryResponse(BaseModel):
    """Response model for the canonical entry of a search."""
    word: str
    phonetic: Optional[str] = Field(None, description="First phonetic string across source entries")
    phonetics: list[PhoneticResponse] = Field(default_factory=list)
    origin: Optional[str] = Field(None, description="Etymology, when any source recorded one")
    meanings: list[MeaningResponse] = Field(default_factory=list)
    license: LicenseResponse = Field(default_factory=LicenseResponse)
    source_urls: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, entry: CanonicalEntry) -> "EntryResponse":
        return cls(
            word=entry.word,
            phonetic=entry.phonetic,
            phonetics=[PhoneticResponse(text=p.text, audio=p.audio) for p in entry.phonetics],
            origin=entry.origin,
            meanings=[
                MeaningResponse(
                    part_of_speech=m.part_of_speech,
                    definitions=[
                        DefinitionResponse(
                            definition=d.definition,
                            example=d.example,
                            synonyms=list(d.synonyms),
                            antonyms=list(d.antonyms),
                        )
                        for d in m.definitions
                    ],
                    synonyms=list(m.synonyms),
                    antonyms=list(m.antonyms),
                )
                for m in entry.meanings
            ],
            license=LicenseResponse(name=entry.license.name, url=entry.license.url),
            source_urls=list(entry.source_urls),
        )


class ErrorResponse(BaseModel):
    """Structured error record shown in the error panel."""
    title: str
    message: str
    severity: Literal["warning", "error"] = "error"

    @classmethod
    def from_domain(cls, record: ErrorRecord) -> "ErrorResponse":
        return cls(title=record.title, message=record.message, severity=record.severity)
