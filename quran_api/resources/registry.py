"""
Tool catalogue: one ResourceSpec per tool, and the wiring that turns the
catalogue into ResourceService instances.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from config.settings import Settings, settings as default_settings
from quran_api import fallback, schemas
from quran_api.api_client import QuranApiClient
from quran_api.cache import TTLCache, language_key, static_key

from .examples import get_examples
from .models import ResourceKind, ResourceSpec
from .service import ResourceService

logger = logging.getLogger("resources.registry")


def reduce_chapters(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the essential fields of each chapter."""
    return {
        "chapters": [
            {
                "id": chapter.get("id"),
                "name_arabic": chapter.get("name_arabic"),
                "name_simple": chapter.get("name_simple"),
                "translated_name": {
                    "name": (chapter.get("translated_name") or {}).get("name", ""),
                },
            }
            for chapter in data["chapters"]
        ]
    }


# =============================================================================
# CHAPTERS
# =============================================================================

CHAPTER_SPECS = [
    ResourceSpec(
        tool="list-chapters",
        kind=ResourceKind.CHAPTERS,
        description="List Chapters",
        path="chapters",
        params_model=schemas.ListChaptersParams,
        cache_key=language_key,
        fallback=fallback.CHAPTERS,
        reducer=reduce_chapters,
    ),
    ResourceSpec(
        tool="GET-chapter",
        kind=ResourceKind.CHAPTERS,
        description="Get Chapter",
        path="chapters/{id}",
        params_model=schemas.GetChapterParams,
    ),
    ResourceSpec(
        tool="info",
        kind=ResourceKind.CHAPTERS,
        description="Get Chapter Info",
        path="chapters/{chapter_id}/info",
        params_model=schemas.ChapterInfoParams,
    ),
]

# =============================================================================
# VERSES
# =============================================================================

VERSE_SPECS = [
    ResourceSpec(
        tool="verses-by_chapter_number",
        kind=ResourceKind.VERSES,
        description="Get list of verses by Chapter / Surah number",
        path="verses/by_chapter/{chapter_number}",
        params_model=schemas.VersesByChapterParams,
    ),
    ResourceSpec(
        tool="verses-by_page_number",
        kind=ResourceKind.VERSES,
        description="Get all verses of a specific Madani Mushaf page (1 to 604)",
        path="verses/by_page/{page_number}",
        params_model=schemas.VersesByPageParams,
    ),
    ResourceSpec(
        tool="verses-by_juz_number",
        kind=ResourceKind.VERSES,
        description="Get all verses from a specific juz (1-30)",
        path="verses/by_juz/{juz_number}",
        params_model=schemas.VersesByJuzParams,
    ),
    ResourceSpec(
        tool="verses-by_hizb_number",
        kind=ResourceKind.VERSES,
        description="Get all verses from a specific Hizb (1-60)",
        path="verses/by_hizb/{hizb_number}",
        params_model=schemas.VersesByHizbParams,
    ),
    ResourceSpec(
        tool="verses-by_rub_el_hizb_number",
        kind=ResourceKind.VERSES,
        description="Get all verses of a specific Rub el Hizb number (1-240)",
        path="verses/by_rub/{rub_el_hizb_number}",
        params_model=schemas.VersesByRubElHizbParams,
    ),
    ResourceSpec(
        tool="verses-by_verse_key",
        kind=ResourceKind.VERSES,
        description="Get a specific ayah by key (chapter:verse)",
        path="verses/by_key/{verse_key}",
        params_model=schemas.VersesByKeyParams,
    ),
    ResourceSpec(
        tool="random_verse",
        kind=ResourceKind.VERSES,
        description="Get a random verse",
        path="verses/random",
        params_model=schemas.RandomVerseParams,
    ),
]

# =============================================================================
# JUZS / SEARCH / LANGUAGES
# =============================================================================

MISC_SPECS = [
    ResourceSpec(
        tool="juzs",
        kind=ResourceKind.JUZS,
        description="Get list of all juzs",
        path="juzs",
        params_model=schemas.EmptyParams,
    ),
    ResourceSpec(
        tool="search",
        kind=ResourceKind.SEARCH,
        description="Search the Quran for specific terms",
        path="search",
        params_model=schemas.SearchParams,
    ),
    ResourceSpec(
        tool="languages",
        kind=ResourceKind.LANGUAGES,
        description="Get all languages",
        path="resources/languages",
        params_model=schemas.LanguageParams,
        cache_key=language_key,
        fallback=fallback.LANGUAGES,
    ),
]

# =============================================================================
# TRANSLATIONS / TAFSIRS
# =============================================================================

TEXT_RESOURCE_SPECS = [
    ResourceSpec(
        tool="translations",
        kind=ResourceKind.TRANSLATIONS,
        description="Get list of available translations",
        path="resources/translations",
        params_model=schemas.LanguageParams,
        cache_key=language_key,
        fallback=fallback.TRANSLATIONS,
    ),
    ResourceSpec(
        tool="translation-info",
        kind=ResourceKind.TRANSLATIONS,
        description="Get information of a specific translation",
        path="resources/translations/{translation_id}/info",
        params_model=schemas.TranslationInfoParams,
    ),
    ResourceSpec(
        tool="translation",
        kind=ResourceKind.TRANSLATIONS,
        description="Get a single translation",
        path="quran/translations/{translation_id}",
        params_model=schemas.TranslationParams,
    ),
    ResourceSpec(
        tool="tafsirs",
        kind=ResourceKind.TAFSIRS,
        description="Get list of available tafsirs",
        path="resources/tafsirs",
        params_model=schemas.LanguageParams,
        cache_key=language_key,
        fallback=fallback.TAFSIRS,
    ),
    ResourceSpec(
        tool="tafsir-info",
        kind=ResourceKind.TAFSIRS,
        description="Get the information of a specific tafsir",
        path="resources/tafsirs/{tafsir_id}/info",
        params_model=schemas.TafsirInfoParams,
    ),
    ResourceSpec(
        tool="tafsir",
        kind=ResourceKind.TAFSIRS,
        description="Get a single tafsir",
        path="quran/tafsirs/{tafsir_id}",
        params_model=schemas.TafsirParams,
    ),
]

# =============================================================================
# AUDIO
# =============================================================================

AUDIO_SPECS = [
    ResourceSpec(
        tool="chapter-reciters",
        kind=ResourceKind.AUDIO,
        description="List of Chapter Reciters",
        path="resources/chapter_reciters",
        params_model=schemas.LanguageParams,
        cache_key=language_key,
        fallback=fallback.CHAPTER_RECITERS,
    ),
    ResourceSpec(
        tool="recitation-styles",
        kind=ResourceKind.AUDIO,
        description="Get the available recitation styles",
        path="resources/recitation_styles",
        params_model=schemas.EmptyParams,
        cache_key=static_key,
        fallback=fallback.RECITATION_STYLES,
    ),
    ResourceSpec(
        tool="recitations",
        kind=ResourceKind.AUDIO,
        description="Get list of recitations",
        path="resources/recitations",
        params_model=schemas.LanguageParams,
        cache_key=language_key,
    ),
    ResourceSpec(
        tool="recitation-info",
        kind=ResourceKind.AUDIO,
        description="Get information of a specific recitation",
        path="resources/recitations/{recitation_id}/info",
        params_model=schemas.RecitationInfoParams,
    ),
    ResourceSpec(
        tool="chapter-reciter-audio-file",
        kind=ResourceKind.AUDIO,
        description="Get a reciter's audio file for one chapter",
        path="chapter_recitations/{id}/{chapter_number}",
        params_model=schemas.ChapterReciterAudioFileParams,
    ),
    ResourceSpec(
        tool="chapter-reciter-audio-files",
        kind=ResourceKind.AUDIO,
        description="Get all chapter audio files of a reciter",
        path="chapter_recitations/{id}",
        params_model=schemas.ChapterReciterAudioFilesParams,
    ),
    ResourceSpec(
        tool="recitation-audio-files",
        kind=ResourceKind.AUDIO,
        description="Get ayah audio files of a recitation",
        path="quran/recitations/{recitation_id}",
        params_model=schemas.RecitationAudioFilesParams,
        aliases=("recitation-autio-files",),
    ),
    ResourceSpec(
        tool="list-surah-recitation",
        kind=ResourceKind.AUDIO,
        description="Get ayah recitations of a surah",
        path="recitations/{recitation_id}/by_chapter/{chapter_number}",
        params_model=schemas.SurahRecitationParams,
    ),
    ResourceSpec(
        tool="list-juz-recitation",
        kind=ResourceKind.AUDIO,
        description="Get ayah recitations of a juz",
        path="recitations/{recitation_id}/by_juz/{juz_number}",
        params_model=schemas.JuzRecitationParams,
        aliases=("list-juz-recitaiton",),
    ),
    ResourceSpec(
        tool="list-page-recitation",
        kind=ResourceKind.AUDIO,
        description="Get ayah recitations of a Mushaf page",
        path="recitations/{recitation_id}/by_page/{page_number}",
        params_model=schemas.PageRecitationParams,
        aliases=("list-page-recitaiton",),
    ),
    ResourceSpec(
        tool="list-rub-el-hizb-recitation",
        kind=ResourceKind.AUDIO,
        description="Get ayah recitations of a Rub el Hizb",
        path="recitations/{recitation_id}/by_rub/{rub_el_hizb_number}",
        params_model=schemas.RubElHizbRecitationParams,
        aliases=("list-rub-el-hizb-recitaiton",),
    ),
    ResourceSpec(
        tool="list-hizb-recitation",
        kind=ResourceKind.AUDIO,
        description="Get ayah recitations of a hizb",
        path="recitations/{recitation_id}/by_hizb/{hizb_number}",
        params_model=schemas.HizbRecitationParams,
        aliases=("list-hizb-recitaiton",),
    ),
    ResourceSpec(
        tool="list-ayah-recitation",
        kind=ResourceKind.AUDIO,
        description="Get recitations of a single ayah",
        path="recitations/{recitation_id}/by_ayah/{ayah_key}",
        params_model=schemas.AyahRecitationParams,
        aliases=("list-ayah-recitaiton",),
    ),
]

# =============================================================================
# QURAN TEXT
# =============================================================================

QURAN_TEXT_SCRIPTS = {
    "indopak": "Indopak script",
    "uthmani_tajweed": "Uthmani script with tajweed rules",
    "uthmani": "Uthmani script",
    "uthmani_simple": "Uthmani script without diacritics",
    "imlaei": "Imlaei script",
    "code_v1": "Glyph codes for QCF V1 fonts",
    "code_v2": "Glyph codes for QCF V2 fonts",
}

# Names the tools were first published under
QURAN_TEXT_ALIASES = {
    "uthmani_tajweed": ("QURAN-verses-uthmani-tajweed",),
    "imlaei": ("QURAN-verses-Imlaei",),
}

QURAN_TEXT_SPECS = [
    ResourceSpec(
        tool=f"QURAN-verses-{script}",
        kind=ResourceKind.QURAN_TEXT,
        description=f"Get verse text in {label}",
        path=f"quran/verses/{script}",
        params_model=schemas.QuranTextParams,
        aliases=QURAN_TEXT_ALIASES.get(script, ()),
    )
    for script, label in QURAN_TEXT_SCRIPTS.items()
]


RESOURCE_SPECS: List[ResourceSpec] = [
    *CHAPTER_SPECS,
    *VERSE_SPECS,
    *MISC_SPECS,
    *TEXT_RESOURCE_SPECS,
    *AUDIO_SPECS,
    *QURAN_TEXT_SPECS,
]

SPECS_BY_TOOL: Dict[str, ResourceSpec] = {spec.tool: spec for spec in RESOURCE_SPECS}

TOOL_ALIASES: Dict[str, str] = {
    alias: spec.tool for spec in RESOURCE_SPECS for alias in spec.aliases
}


def resolve_tool(name: str) -> str:
    """Map an alias to its tool name; other names pass through unchanged."""
    return TOOL_ALIASES.get(name, name)


def get_spec(tool: str) -> ResourceSpec:
    """
    Look up a tool's spec.

    Raises:
        KeyError: If the tool is unknown
    """
    return SPECS_BY_TOOL[resolve_tool(tool)]


def list_tools() -> List[Dict[str, Any]]:
    """Describe every tool for listing endpoints."""
    return [
        {
            "name": spec.tool,
            "description": spec.description,
            "kind": spec.kind.value,
            "cacheable": spec.cacheable,
            "hasFallback": spec.fallback is not None,
            "inputSchema": spec.params_model.model_json_schema(),
            "aliases": list(spec.aliases),
            "examples": get_examples(spec.tool),
        }
        for spec in RESOURCE_SPECS
    ]


def build_services(
    client: Optional[QuranApiClient] = None,
    config: Optional[Settings] = None,
    clock: Optional[Callable[[], float]] = None,
) -> Dict[str, ResourceService]:
    """
    Create one ResourceService per tool.

    Each cacheable tool gets its own TTLCache sized from its ResourceSpec, capped by
    CACHE_MAX_ENTRIES, and living for the configured TTL.

    Args:
        client: Shared fetcher; built from settings when omitted
        config: Settings to read TTL from, defaults to the global settings
        clock: Time source for the caches, injectable for tests
    """
    config = config or default_settings
    client = client or QuranApiClient(
        base_url=config.quran_api_base_url,
        api_key=config.api_key,
        timeout_seconds=config.request_timeout_seconds,
    )

    services: Dict[str, ResourceService] = {}
    for spec in RESOURCE_SPECS:
        cache = None
        if spec.cacheable:
            cache_kwargs = {
                "capacity": min(spec.cache_capacity, config.cache_max_entries),
                "ttl_seconds": config.cache_ttl_seconds,
                "name": spec.tool,
            }
            if clock is not None:
                cache_kwargs["clock"] = clock
            cache = TTLCache(**cache_kwargs)
        services[spec.tool] = ResourceService(spec, client, cache)

    logger.info(
        f"Registered {len(services)} tools "
        f"({sum(1 for s in RESOURCE_SPECS if s.cacheable)} cached)"
    )
    return services
