"""Keyword, action-verb and pattern tables used by the analysers."""

from cover_lens.lexicon.data import default_lexicon_data
from cover_lens.lexicon.loader import get_lexicon, load_lexicon

__all__ = ["default_lexicon_data", "get_lexicon", "load_lexicon"]
