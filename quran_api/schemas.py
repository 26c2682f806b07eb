"""
Pydantic schemas for tool arguments.

One model per tool; numeric identifiers accept either an int or a string
of ASCII digits and are range-checked against the Mushaf structure.
"""
import re
from typing import Annotated, Any, Mapping, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel, BeforeValidator, Field, StringConstraints

from quran_api.errors import ValidationError

_DIGITS = re.compile(r"[0-9]+")


def _coerce_identifier(value: Any) -> Any:
    """Accept ints and digit strings; booleans are not numbers here."""
    if isinstance(value, bool):
        raise ValueError("must be an integer or a string of digits, not a boolean")
    if isinstance(value, str):
        text = value.strip()
        if not _DIGITS.fullmatch(text):
            raise ValueError("must be an integer or a string of digits")
        return int(text)
    return value


# ===== FIELD TYPES =====

Identifier = BeforeValidator(_coerce_identifier)

LanguageCode = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=2,
        max_length=10,
        pattern=r"^[a-zA-Z-]+$",
    ),
    Field(description="Language code (e.g. 'en', 'ar', 'fr-CA')"),
]
ChapterNumber = Annotated[int, Identifier, Field(ge=1, le=114, description="Chapter number (1-114)")]
PageNumber = Annotated[int, Identifier, Field(ge=1, le=604, description="Madani Mushaf page number (1-604)")]
JuzNumber = Annotated[int, Identifier, Field(ge=1, le=30, description="Juz number (1-30)")]
HizbNumber = Annotated[int, Identifier, Field(ge=1, le=60, description="Hizb number (1-60)")]
RubElHizbNumber = Annotated[int, Identifier, Field(ge=1, le=240, description="Rub el Hizb number (1-240)")]
ResourceId = Annotated[int, Identifier, Field(ge=1, description="Resource id")]
PositiveCount = Annotated[int, Identifier, Field(ge=1)]
VerseKey = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=r"^[0-9]{1,3}:[0-9]{1,3}$"),
    Field(description="Verse key (chapter:verse), e.g. '2:255'"),
]
SearchQuery = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ToolParams(BaseModel):
    """Base for all tool argument models"""

    class Config:
        extra = "forbid"


class EmptyParams(ToolParams):
    """Tools that take no arguments"""
    pass


class LanguageParams(ToolParams):
    """Whole-resource lists scoped by an optional language"""
    language: Optional[LanguageCode] = None


# ===== CHAPTER SCHEMAS =====

class ListChaptersParams(ToolParams):
    language: LanguageCode = "en"


class GetChapterParams(ToolParams):
    language: LanguageCode = "en"
    id: ChapterNumber = 1


class ChapterInfoParams(ToolParams):
    language: LanguageCode = "en"
    chapter_id: ChapterNumber = 1


# ===== VERSE SCHEMAS =====

class VerseOptions(ToolParams):
    """Common parameters for verse endpoints"""
    language: Optional[LanguageCode] = None
    words: Optional[str] = Field(None, description="Include words of each ayah")
    translations: Optional[str] = Field(None, description="Comma separated ids of translations")
    audio: Optional[str] = Field(None, description="Id of recitation")
    tafsirs: Optional[str] = Field(None, description="Comma separated ids of tafsirs")
    word_fields: Optional[str] = Field(None, description="Comma separated list of word fields")
    translation_fields: Optional[str] = Field(None, description="Comma separated list of translation fields")
    fields: Optional[str] = Field(None, description="Comma separated list of ayah fields")


class PaginatedVerseOptions(VerseOptions):
    page: Optional[PositiveCount] = None
    per_page: Optional[PositiveCount] = None


class VersesByChapterParams(PaginatedVerseOptions):
    chapter_number: ChapterNumber


class VersesByPageParams(PaginatedVerseOptions):
    page_number: PageNumber


class VersesByJuzParams(PaginatedVerseOptions):
    juz_number: JuzNumber


class VersesByHizbParams(PaginatedVerseOptions):
    hizb_number: HizbNumber


class VersesByRubElHizbParams(VerseOptions):
    rub_el_hizb_number: RubElHizbNumber


class VersesByKeyParams(VerseOptions):
    verse_key: VerseKey


class RandomVerseParams(VerseOptions):
    pass


# ===== SEARCH SCHEMAS =====

class SearchParams(ToolParams):
    q: SearchQuery
    size: Optional[PositiveCount] = None
    page: Optional[PositiveCount] = None
    language: Optional[LanguageCode] = None


# ===== TRANSLATION / TAFSIR / AUDIO SCHEMAS =====

class VerseFilterParams(ToolParams):
    """Narrows a text or audio listing to one division of the Mushaf"""
    chapter_number: Optional[ChapterNumber] = None
    juz_number: Optional[JuzNumber] = None
    page_number: Optional[PageNumber] = None
    hizb_number: Optional[HizbNumber] = None
    rub_el_hizb_number: Optional[RubElHizbNumber] = None
    verse_key: Optional[VerseKey] = None


class TranslationParams(VerseFilterParams):
    translation_id: ResourceId
    fields: Optional[str] = None


class TranslationInfoParams(ToolParams):
    translation_id: ResourceId


class TafsirParams(VerseFilterParams):
    tafsir_id: ResourceId
    fields: Optional[str] = None


class TafsirInfoParams(ToolParams):
    tafsir_id: ResourceId


class RecitationInfoParams(ToolParams):
    recitation_id: ResourceId


class RecitationAudioFilesParams(VerseFilterParams):
    recitation_id: ResourceId
    fields: Optional[str] = None


class ChapterReciterAudioFileParams(ToolParams):
    id: ResourceId
    chapter_number: ChapterNumber


class ChapterReciterAudioFilesParams(ToolParams):
    id: ResourceId
    language: Optional[LanguageCode] = None


class SurahRecitationParams(ToolParams):
    recitation_id: ResourceId
    chapter_number: ChapterNumber


class JuzRecitationParams(ToolParams):
    recitation_id: ResourceId
    juz_number: JuzNumber


class PageRecitationParams(ToolParams):
    recitation_id: ResourceId
    page_number: PageNumber


class RubElHizbRecitationParams(ToolParams):
    recitation_id: ResourceId
    rub_el_hizb_number: RubElHizbNumber


class HizbRecitationParams(ToolParams):
    recitation_id: ResourceId
    hizb_number: HizbNumber


class AyahRecitationParams(ToolParams):
    recitation_id: ResourceId
    ayah_key: VerseKey


# ===== QURAN TEXT SCHEMAS =====

class QuranTextParams(VerseFilterParams):
    pass


# ===== VALIDATION =====

ParamsT = TypeVar("ParamsT", bound=ToolParams)


def _format_location(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "(root)"


def validate_arguments(model: Type[ParamsT], arguments: Optional[Mapping[str, Any]]) -> ParamsT:
    """
    Parse tool arguments into ``model``.

    Raises:
        ValidationError: With one (field path, message) pair per problem
    """
    try:
        return model.model_validate(arguments if arguments is not None else {})
    except pydantic.ValidationError as e:
        raise ValidationError(
            [(_format_location(err["loc"]), err["msg"]) for err in e.errors()]
        ) from e
