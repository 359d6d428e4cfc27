"""Build and validate the process-wide Lexicon."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from cover_lens.exceptions import LexiconValidationError
from cover_lens.lexicon.data import default_lexicon_data
from cover_lens.models.lexicon import Lexicon

logger = logging.getLogger(__name__)


def load_lexicon(path: str | Path | None = None) -> Lexicon:
    """Build a validated Lexicon from the built-in tables or a JSON file.

    Args:
        path: Optional JSON file with the same shape as default_lexicon_data().
            When omitted, the built-in AI/ML tables are used.

    Returns:
        Immutable Lexicon with all patterns precompiled.

    Raises:
        LexiconValidationError: If the file cannot be read or any table is
            malformed (non-positive weight, duplicate keyword, verb in two
            buckets, regex that does not compile).
    """
    if path is None:
        source = "built-in tables"
        data = default_lexicon_data()
    else:
        source = str(path)
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read lexicon from {source}: {e}")
            raise LexiconValidationError(f"Could not read lexicon from {source}: {e}") from e

    try:
        lexicon = Lexicon.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid lexicon in {source}: {e}")
        raise LexiconValidationError(f"Invalid lexicon in {source}:\n{e}") from e

    logger.info(
        f"Loaded lexicon from {source}: {len(lexicon.keyword_categories)} keyword categories, "
        f"{len(lexicon.role_keywords)} roles, "
        f"{len(lexicon.action_verbs.all_verbs())} action verbs, "
        f"{len(lexicon.red_flags)} red-flag rules"
    )
    return lexicon


@lru_cache
def get_lexicon(path: str | None = None) -> Lexicon:
    """Get cached lexicon instance."""
    return load_lexicon(path)
