"""
Usage examples attached to tool listings.

Each example pairs valid arguments with an abridged response envelope so
callers can see the expected shape before making a request.
"""
from typing import Any, Dict, List

SAHEEH_INTERNATIONAL = "Saheeh International"

AL_FATIHAH_1 = {
    "id": 1,
    "verse_key": "1:1",
    "text_uthmani": "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ",
    "translations": [
        {
            "text": "In the name of Allah, the Entirely Merciful, the Especially Merciful.",
            "resource_name": SAHEEH_INTERNATIONAL,
        }
    ],
}


def _envelope(tool: str, data: Dict[str, Any]) -> Dict[str, Any]:
    return {"success": True, "message": f"{tool} executed successfully", "data": data}


TOOL_EXAMPLES: Dict[str, List[Dict[str, Any]]] = {
    "list-chapters": [
        {
            "description": "Get chapters in English",
            "parameters": {"language": "en"},
            "result": _envelope("list-chapters", {
                "chapters": [
                    {"id": 1, "name_arabic": "الفاتحة", "name_simple": "Al-Fatihah", "translated_name": {"name": "The Opening"}},
                    {"id": 2, "name_arabic": "البقرة", "name_simple": "Al-Baqarah", "translated_name": {"name": "The Cow"}},
                ]
            }),
        },
        {
            "description": "Get chapters in Arabic",
            "parameters": {"language": "ar"},
            "result": _envelope("list-chapters", {
                "chapters": [
                    {"id": 1, "name_arabic": "الفاتحة", "name_simple": "Al-Fatihah", "translated_name": {"name": "الفاتحة"}},
                    {"id": 2, "name_arabic": "البقرة", "name_simple": "Al-Baqarah", "translated_name": {"name": "البقرة"}},
                ]
            }),
        },
    ],
    "GET-chapter": [
        {
            "description": "Get Al-Fatihah (Chapter 1) in English",
            "parameters": {"language": "en", "id": 1},
            "result": _envelope("GET-chapter", {
                "chapter": {
                    "id": 1,
                    "revelation_place": "makkah",
                    "revelation_order": 5,
                    "bismillah_pre": False,
                    "name_simple": "Al-Fatihah",
                    "name_complex": "Al-Fātiĥah",
                    "name_arabic": "الفاتحة",
                    "verses_count": 7,
                    "pages": [1, 1],
                    "translated_name": {"language_name": "english", "name": "The Opening"},
                }
            }),
        },
    ],
    "verses-by_chapter_number": [
        {
            "description": "Get first 3 verses of Al-Fatihah with English translation",
            "parameters": {
                "chapter_number": 1,
                "language": "en",
                "translations": "131",
                "per_page": 3,
                "page": 1,
            },
            "result": _envelope("verses-by_chapter_number", {
                "verses": [
                    AL_FATIHAH_1,
                    {
                        "id": 2,
                        "verse_key": "1:2",
                        "text_uthmani": "الْحَمْدُ لِلَّهِ رَبِّ الْعَالَمِينَ",
                        "translations": [
                            {"text": "All praise is due to Allah, Lord of the worlds -", "resource_name": SAHEEH_INTERNATIONAL}
                        ],
                    },
                ]
            }),
        },
    ],
    "verses-by_verse_key": [
        {
            "description": "Get verse 1:1 with English translation",
            "parameters": {"verse_key": "1:1", "language": "en", "translations": "131"},
            "result": _envelope("verses-by_verse_key", {"verse": AL_FATIHAH_1}),
        },
    ],
    "random_verse": [
        {
            "description": "Get a random verse with English translation",
            "parameters": {"language": "en", "translations": "131"},
            "result": _envelope("random_verse", {
                "verse": {
                    "id": 2583,
                    "verse_key": "20:39",
                    "translations": [
                        {
                            "text": "[Saying], 'Cast him into the chest and cast it into the river...'",
                            "resource_name": SAHEEH_INTERNATIONAL,
                        }
                    ],
                }
            }),
        },
    ],
    "search": [
        {
            "description": "Search for 'mercy' in English translation",
            "parameters": {"q": "mercy", "language": "en", "size": 5, "page": 1},
            "result": _envelope("search", {
                "search": {
                    "query": "mercy",
                    "total_results": 79,
                    "results": [
                        {
                            "verse_key": "1:3",
                            "text_uthmani": "الرَّحْمَٰنِ الرَّحِيمِ",
                            "translations": [
                                {"text": "The Entirely Merciful, the Especially Merciful,", "resource_name": SAHEEH_INTERNATIONAL}
                            ],
                        }
                    ],
                }
            }),
        },
    ],
    "juzs": [
        {
            "description": "Get list of all juzs",
            "parameters": {},
            "result": _envelope("juzs", {
                "juzs": [
                    {
                        "id": 1,
                        "juz_number": 1,
                        "verse_mapping": {"1": "1-7", "2": "1-141"},
                        "first_verse_id": 1,
                        "last_verse_id": 148,
                        "verses_count": 148,
                    },
                    {
                        "id": 2,
                        "juz_number": 2,
                        "verse_mapping": {"2": "142-252"},
                        "first_verse_id": 149,
                        "last_verse_id": 259,
                        "verses_count": 111,
                    },
                ]
            }),
        },
    ],
    "translations": [
        {
            "description": "Get list of available translations",
            "parameters": {"language": "en"},
            "result": _envelope("translations", {
                "translations": [
                    {"id": 131, "name": SAHEEH_INTERNATIONAL, "author_name": SAHEEH_INTERNATIONAL, "slug": "saheeh-international", "language_name": "english"},
                    {"id": 20, "name": "Yusuf Ali", "author_name": "Abdullah Yusuf Ali", "slug": "yusuf-ali", "language_name": "english"},
                ]
            }),
        },
    ],
    "tafsirs": [
        {
            "description": "Get list of available tafsirs",
            "parameters": {"language": "en"},
            "result": _envelope("tafsirs", {
                "tafsirs": [
                    {"id": 1, "name": "Tafsir Ibn Kathir", "author_name": "Ibn Kathir", "slug": "ibn-kathir", "language_name": "english"},
                    {"id": 2, "name": "Tafsir al-Jalalayn", "author_name": "Jalal ad-Din al-Mahalli and Jalal ad-Din as-Suyuti", "slug": "jalalayn", "language_name": "english"},
                ]
            }),
        },
    ],
    "languages": [
        {
            "description": "Get all available languages",
            "parameters": {},
            "result": _envelope("languages", {
                "languages": [
                    {"id": 1, "name": "English", "iso_code": "en", "native_name": "English", "direction": "ltr"},
                    {"id": 2, "name": "Arabic", "iso_code": "ar", "native_name": "العربية", "direction": "rtl"},
                ]
            }),
        },
    ],
}


def get_examples(tool: str) -> List[Dict[str, Any]]:
    """Examples for ``tool``; empty when none are documented."""
    return TOOL_EXAMPLES.get(tool, [])
