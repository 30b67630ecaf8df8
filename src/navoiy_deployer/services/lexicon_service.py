"""PLT lexicon expansion.

Adds Uyghur, Dari, Pashto and Farsi equivalents to every term of the
semantic lexicon and records the full language list in its metadata.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from ..utils import now_utc, to_iso

logger = logging.getLogger(__name__)

LEXICON_PATH = Path("annotations") / "semantic_lexicon_v1.json"
LANGUAGE_DOC_PATH = Path("docs") / "PLT_EXPANSION.md"

PLT_LANGUAGES = [
    "chagatai",
    "uzbek",
    "russian",
    "english",
    "german",
    "uyghur",
    "dari",
    "pashto",
    "farsi",
]

# term id -> equivalents, per added language
PLT_TRANSLATIONS: dict[str, dict[str, list[str]]] = {
    "uyghur": {
        "ishq": ["ئەشق", "مۇھەببەت"],
        "ko'ngul": ["كۆڭۈل", "قەلب"],
        "hijron": ["ھىجران", "ئايرىلىق"],
        "ma'rifat": ["مەرىپەت", "دانىشمەنلىك"],
        "yor": ["يار", "سۆيۈملۈك"],
    },
    "dari": {
        "ishq": ["عشق", "محبت"],
        "ko'ngul": ["دل", "قلب"],
        "hijron": ["هجران", "جدایی"],
        "ma'rifat": ["معرفت", "دانش"],
        "yor": ["یار", "معشوق"],
    },
    "pashto": {
        "ishq": ["عشق", "مینه"],
        "ko'ngul": ["زړه", "دل"],
        "hijron": ["جدایی", "لرېوالی"],
        "ma'rifat": ["پوهه", "معرفت"],
        "yor": ["یار", "محبوب"],
    },
    "farsi": {
        "ishq": ["عشق", "محبت"],
        "ko'ngul": ["دل", "قلب"],
        "hijron": ["هجران", "جدایی"],
        "ma'rifat": ["معرفت", "شناخت"],
        "yor": ["یار", "معشوق"],
    },
}


class LexiconError(Exception):
    """The lexicon document is malformed."""

    pass


def expand_terms(lexicon: dict[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """Add the PLT translations and metadata to a lexicon document in place.

    Terms without an entry in the tables get an empty list per language.

    Raises:
        LexiconError: If the document has no 'terms' list
    """
    terms = lexicon.get("terms")
    if not isinstance(terms, list):
        raise LexiconError("Lexicon has no 'terms' list")

    for term in terms:
        if not isinstance(term, dict):
            raise LexiconError(f"Lexicon term is not an object: {term!r}")
        translations = term.get("translations")
        if not isinstance(translations, dict):
            translations = {}
            term["translations"] = translations
        for language, table in PLT_TRANSLATIONS.items():
            translations[language] = list(table.get(term.get("id", ""), []))

    metadata = lexicon.get("metadata")
    if not isinstance(metadata, dict):
        metadata = {}
        lexicon["metadata"] = metadata
    metadata["languages"] = list(PLT_LANGUAGES)
    metadata["language_count"] = len(PLT_LANGUAGES)
    metadata["expanded_at"] = to_iso(now or now_utc())
    return lexicon


def expand_lexicon(corpus_path: Path, now: datetime | None = None) -> dict[str, Any]:
    """Expand the corpus lexicon file to nine languages and save it.

    Args:
        corpus_path: Corpus directory containing annotations/semantic_lexicon_v1.json
        now: Timestamp recorded as metadata.expanded_at (default: current UTC time)

    Returns:
        The expanded lexicon document

    Raises:
        FileNotFoundError: If the lexicon file does not exist
        LexiconError: If the file is not UTF-8 JSON or has no 'terms' list
    """
    lexicon_path = corpus_path / LEXICON_PATH
    try:
        lexicon = json.loads(lexicon_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LexiconError(f"Invalid JSON in {lexicon_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise LexiconError(f"{lexicon_path} is not valid UTF-8: {e}") from e
    if not isinstance(lexicon, dict):
        raise LexiconError(f"{lexicon_path} must contain a JSON object")

    expand_terms(lexicon, now)

    lexicon_path.write_text(json.dumps(lexicon, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(
        "Expanded %d term(s) in %s to %d languages",
        len(lexicon["terms"]),
        lexicon_path,
        len(PLT_LANGUAGES),
    )
    return lexicon


def write_language_doc(corpus_path: Path, text: str) -> Path:
    """Write the PLT expansion document under docs/."""
    target = corpus_path / LANGUAGE_DOC_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", target)
    return target
