"""Top-level cover letter analysis."""

import logging
from concurrent.futures import ThreadPoolExecutor

from cover_lens.config import get_settings
from cover_lens.lexicon import get_lexicon
from cover_lens.models.analysis import CoverLetterAnalysis
from cover_lens.models.lexicon import Lexicon
from cover_lens.models.roles import AIRole, parse_role
from cover_lens.scoring import (
    analyse_action_verbs,
    analyse_keywords,
    analyse_personalisation,
    analyse_readability,
    analyse_structure,
    calculate_overall_score,
    calculate_stats,
    detect_red_flags,
    generate_recommendations,
    get_score_label,
)
from cover_lens.utils.text import round_half_up

logger = logging.getLogger(__name__)


class CoverLetterAnalyser:
    """Run every analyser over a letter and combine the results.

    The analyser holds no per-letter state, so one instance can be shared
    between threads. Stages only read the text, its stats and the lexicon,
    so with parallel=True they run concurrently on a thread pool; the result
    is identical to the sequential run.
    """

    def __init__(self, lexicon: Lexicon | None = None, parallel: bool | None = None):
        """Create an analyser.

        Args:
            lexicon: Lexicon to score against. Defaults to the cached lexicon
                selected by settings (built-in tables unless lexicon_path is set).
            parallel: Run stages on a thread pool. Defaults to the
                parallel_analysers setting.
        """
        if lexicon is None or parallel is None:
            settings = get_settings()
            if lexicon is None:
                path = settings.lexicon_path
                lexicon = get_lexicon(str(path) if path else None)
            if parallel is None:
                parallel = settings.parallel_analysers

        self.lexicon = lexicon
        self.parallel = parallel

    def analyse(
        self,
        text: str,
        role: AIRole | str | None = None,
        company_name: str | None = None,
    ) -> CoverLetterAnalysis:
        """Analyse a cover letter.

        Args:
            text: Letter text (plain text, surrounding whitespace ignored).
            role: Optional target role, as an AIRole or its name.
            company_name: Optional company name to look for. Blank names count as
                not supplied.

        Returns:
            CoverLetterAnalysis with dimension scores, red flags and recommendations.

        Raises:
            UnknownRoleError: If role is a string that names no supported role.
        """
        target_role = parse_role(role)
        company_name = (company_name or "").strip() or None
        normalized_text = text.strip()
        stats = calculate_stats(normalized_text)
        lexicon = self.lexicon

        logger.debug(
            f"Analysing letter: {stats.word_count} words, {stats.paragraph_count} paragraphs, "
            f"role={target_role.value if target_role else None}, company={company_name!r}"
        )

        stages = {
            "structure": lambda: analyse_structure(normalized_text, lexicon),
            "keywords": lambda: analyse_keywords(normalized_text, lexicon, target_role),
            "personalisation": lambda: analyse_personalisation(
                normalized_text, lexicon, company_name, target_role
            ),
            "action_verbs": lambda: analyse_action_verbs(normalized_text, lexicon),
            "readability": lambda: analyse_readability(stats),
            "red_flags": lambda: detect_red_flags(normalized_text, stats, lexicon),
        }

        if self.parallel:
            with ThreadPoolExecutor(max_workers=len(stages)) as executor:
                futures = {name: executor.submit(stage) for name, stage in stages.items()}
                results = {name: future.result() for name, future in futures.items()}
        else:
            results = {name: stage() for name, stage in stages.items()}

        structure = results["structure"]
        keywords = results["keywords"]
        personalisation = results["personalisation"]
        action_verbs = results["action_verbs"]
        readability = results["readability"]
        red_flags = results["red_flags"]

        overall_score = calculate_overall_score(
            structure, keywords, personalisation, action_verbs, readability
        )
        overall_percentage = round_half_up(overall_score * 100)

        recommendations = generate_recommendations(
            structure,
            keywords,
            personalisation,
            action_verbs,
            readability,
            red_flags,
            company_name,
        )

        lower_text = normalized_text.lower()
        weak_language = [phrase for phrase in lexicon.weak_language if phrase in lower_text]

        logger.debug(
            f"Scores: structure={structure.score}, keywords={keywords.score}, "
            f"personalisation={personalisation.score}, action_verbs={action_verbs.score}, "
            f"readability={readability.score}, overall={overall_percentage}%, "
            f"red_flags={len(red_flags)}"
        )

        return CoverLetterAnalysis(
            overall_score=overall_score,
            overall_percentage=overall_percentage,
            label=get_score_label(overall_percentage),
            structure=structure,
            keywords=keywords,
            personalisation=personalisation,
            action_verbs=action_verbs,
            readability=readability,
            red_flags=red_flags,
            recommendations=recommendations,
            weak_language=weak_language,
            stats=stats,
        )


def analyse_cover_letter(
    text: str,
    role: AIRole | str | None = None,
    company_name: str | None = None,
) -> CoverLetterAnalysis:
    """Analyse a cover letter with the default lexicon and settings."""
    return CoverLetterAnalyser().analyse(text, role=role, company_name=company_name)
