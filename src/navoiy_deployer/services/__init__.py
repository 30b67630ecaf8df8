"""Service layer for configuration, asset rendering and lexicon expansion."""

from .config_service import ConfigService
from .lexicon_service import LexiconError, expand_lexicon, write_language_doc
from .template_service import TemplateService

__all__ = [
    "ConfigService",
    "LexiconError",
    "TemplateService",
    "expand_lexicon",
    "write_language_doc",
]
