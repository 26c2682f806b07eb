"""
Tests for tool argument schemas and static fallback data.
"""
import pytest

from quran_api import fallback, schemas
from quran_api.errors import ValidationError
from quran_api.schemas import validate_arguments


def test_numeric_strings_are_coerced():
    params = validate_arguments(schemas.GetChapterParams, {"id": "18"})
    assert params.id == 18
    assert params.language == "en"


def test_digit_strings_with_whitespace_are_coerced():
    params = validate_arguments(schemas.TranslationInfoParams, {"translation_id": " 131 "})
    assert params.translation_id == 131


def test_boolean_identifier_reports_field():
    with pytest.raises(ValidationError) as exc_info:
        validate_arguments(schemas.GetChapterParams, {"id": True})

    assert exc_info.value.to_list()[0]["field"] == "id"
    assert "not a boolean" in exc_info.value.to_list()[0]["message"]


def test_none_arguments_use_defaults():
    params = validate_arguments(schemas.ChapterInfoParams, None)
    assert params.chapter_id == 1


@pytest.mark.parametrize("model, arguments", [
    (schemas.GetChapterParams, {"id": 0}),
    (schemas.VersesByPageParams, {"page_number": 605}),
    (schemas.VersesByJuzParams, {"juz_number": 31}),
    (schemas.VersesByHizbParams, {"hizb_number": 61}),
    (schemas.VersesByRubElHizbParams, {"rub_el_hizb_number": 241}),
    (schemas.VersesByKeyParams, {"verse_key": "1-1"}),
    (schemas.SearchParams, {"q": "   "}),
    (schemas.LanguageParams, {"language": "e n"}),
    (schemas.EmptyParams, {"page": 1}),
    (schemas.VersesByKeyParams, {"verse_key": "١:١"}),
    (schemas.AyahRecitationParams, {"recitation_id": 7, "ayah_key": "٢:٢٥٥"}),
    (schemas.GetChapterParams, {"id": True}),
    (schemas.TafsirInfoParams, {"tafsir_id": False}),
    (schemas.VersesByChapterParams, {"chapter_number": "١٨"}),
    (schemas.VersesByChapterParams, {"chapter_number": 1, "page": True}),
    (schemas.GetChapterParams, {"id": "1.5"}),
])
def test_invalid_arguments_are_rejected(model, arguments):
    with pytest.raises(ValidationError):
        validate_arguments(model, arguments)


def test_missing_required_field_reports_path():
    with pytest.raises(ValidationError) as exc_info:
        validate_arguments(schemas.TafsirParams, {"verse_key": "1:1"})

    assert exc_info.value.status_code == 400
    assert exc_info.value.to_list()[0]["field"] == "tafsir_id"
    assert exc_info.value.message.startswith("Validation error: tafsir_id:")


def test_verse_key_is_stripped():
    params = validate_arguments(schemas.VersesByKeyParams, {"verse_key": " 2:255 "})
    assert params.verse_key == "2:255"


# ===== FALLBACK DATA =====

@pytest.mark.parametrize("name, field, count", [
    (fallback.CHAPTERS, "chapters", 10),
    (fallback.CHAPTER_RECITERS, "reciters", 10),
    (fallback.TAFSIRS, "tafsirs", 5),
    (fallback.TRANSLATIONS, "translations", 10),
    (fallback.LANGUAGES, "languages", 10),
])
def test_fallback_datasets_have_entries(name, field, count):
    assert len(fallback.get_fallback(name)[field]) == count


def test_fallback_chapters_start_with_al_fatihah():
    first = fallback.get_fallback(fallback.CHAPTERS)["chapters"][0]
    assert first["id"] == 1
    assert first["name_simple"] == "Al-Fatihah"


def test_unknown_fallback_raises():
    assert fallback.has_fallback("verses") is False
    with pytest.raises(KeyError):
        fallback.get_fallback("verses")
