"""Built-in lexicon tables for AI/ML cover letters.

Plain data only. The tables are validated and compiled into a Lexicon by
cover_lens.lexicon.loader.
"""

from typing import Any

# Keywords by category with weights
KEYWORD_CATEGORIES: list[dict[str, Any]] = [
    {
        "name": "AI/ML Technical",
        "weight": 2.0,
        "keywords": [
            "machine learning",
            "deep learning",
            "neural networks",
            "natural language processing",
            "NLP",
            "computer vision",
            "reinforcement learning",
            "artificial intelligence",
            "AI",
            "predictive modeling",
            "statistical modeling",
            "data mining",
            "feature engineering",
            "model training",
            "model optimisation",
            "hyperparameter tuning",
        ],
    },
    {
        "name": "Frameworks & Tools",
        "weight": 1.5,
        "keywords": [
            "TensorFlow",
            "PyTorch",
            "Keras",
            "scikit-learn",
            "Pandas",
            "NumPy",
            "Python",
            "R",
            "SQL",
            "Spark",
            "Hadoop",
            "Docker",
            "Kubernetes",
            "AWS",
            "Azure",
            "GCP",
            "MLflow",
            "Airflow",
            "Jupyter",
            "Git",
        ],
    },
    {
        "name": "Industry Terms",
        "weight": 1.5,
        "keywords": [
            "model deployment",
            "production ML",
            "data pipeline",
            "ETL",
            "MLOps",
            "CI/CD",
            "model serving",
            "A/B testing",
            "experimentation",
            "scalable",
            "real-time",
            "batch processing",
            "data warehouse",
            "big data",
            "cloud infrastructure",
        ],
    },
    {
        "name": "Soft Skills",
        "weight": 1.0,
        "keywords": [
            "collaboration",
            "communication",
            "problem-solving",
            "analytical",
            "leadership",
            "mentoring",
            "stakeholder",
            "cross-functional",
            "agile",
            "initiative",
            "proactive",
            "attention to detail",
        ],
    },
]

# Keyed by AIRole value
ROLE_SPECIFIC_KEYWORDS: dict[str, list[str]] = {
    "Machine Learning Engineer": [
        "model training",
        "feature engineering",
        "hyperparameter tuning",
        "model optimisation",
        "PyTorch",
        "TensorFlow",
        "MLOps",
        "model deployment",
        "production ML",
        "scalable ML",
    ],
    "Data Scientist": [
        "statistical analysis",
        "data visualisation",
        "predictive modeling",
        "Python",
        "R",
        "SQL",
        "A/B testing",
        "insights",
        "business intelligence",
        "experimentation",
    ],
    "AI Researcher": [
        "research",
        "publications",
        "deep learning",
        "neural networks",
        "algorithm development",
        "novel approaches",
        "state-of-the-art",
        "academic",
        "experiments",
        "benchmarks",
    ],
    "MLOps Engineer": [
        "MLOps",
        "CI/CD",
        "model deployment",
        "infrastructure",
        "automation",
        "monitoring",
        "Docker",
        "Kubernetes",
        "AWS",
        "pipeline orchestration",
    ],
    "Data Engineer": [
        "data pipeline",
        "ETL",
        "Spark",
        "Airflow",
        "SQL",
        "data warehouse",
        "big data",
        "streaming",
        "batch processing",
        "data quality",
    ],
    "NLP Engineer": [
        "natural language processing",
        "NLP",
        "transformers",
        "BERT",
        "GPT",
        "LLM",
        "text processing",
        "sentiment analysis",
        "named entity recognition",
        "language models",
    ],
    "Computer Vision Engineer": [
        "computer vision",
        "image processing",
        "CNN",
        "object detection",
        "image segmentation",
        "OpenCV",
        "video analysis",
        "image classification",
        "visual recognition",
        "deep learning",
    ],
}

ROLE_CATEGORY_WEIGHT = 2.0

ACTION_VERBS: dict[str, list[str]] = {
    "achievement": [
        "achieved",
        "delivered",
        "exceeded",
        "improved",
        "increased",
        "reduced",
        "saved",
        "generated",
        "accelerated",
        "transformed",
        "drove",
        "enabled",
    ],
    "technical": [
        "developed",
        "built",
        "designed",
        "architected",
        "implemented",
        "engineered",
        "optimised",
        "deployed",
        "automated",
        "integrated",
        "scaled",
        "created",
    ],
    "leadership": [
        "led",
        "managed",
        "coordinated",
        "mentored",
        "guided",
        "directed",
        "supervised",
        "spearheaded",
        "championed",
        "established",
        "pioneered",
        "initiated",
    ],
    "collaboration": [
        "collaborated",
        "partnered",
        "worked",
        "contributed",
        "supported",
        "assisted",
        "facilitated",
        "presented",
        "communicated",
        "consulted",
        "advised",
        "liaised",
    ],
}

# Negative signals, matched as lower-case substrings
GENERIC_PHRASES: list[str] = [
    "i am writing to apply",
    "i am interested in",
    "to whom it may concern",
    "dear sir or madam",
    "dear hiring manager",
    "i think i would be",
    "i believe i would be",
    "any company",
    "this position",
    "the position",
    "perfect fit",
    "great fit",
    "i am the ideal",
    "i am confident",
    "re: application",
    "please find attached",
    "attached please find",
]

WEAK_LANGUAGE: list[str] = [
    "i think",
    "i believe",
    "i feel",
    "maybe",
    "perhaps",
    "might be",
    "could be",
    "sort of",
    "kind of",
    "trying to",
    "hoping to",
]

# Tested against the first paragraph
STRONG_OPENING_PATTERNS: list[str] = [
    r"^when i (?:saw|read|discovered|learned)",
    r"^as a (?:\w+\s){0,3}(?:engineer|scientist|researcher|developer)",
    r"^with (?:\d+\+?\s*)?years? of experience",
    r"^having (?:led|developed|built|designed|delivered)",
    r"^i (?:recently|just) (?:led|developed|built|deployed|delivered)",
    r"^(?:at|during) my (?:time|role|tenure) at",
    r"^your (?:company|team|organisation|mission)",
    r"^the opportunity to",
    r"^i am excited",
    r"^i was thrilled",
]

GENERIC_OPENING_PATTERN = r"^(?:i am writing to apply|dear sir|to whom)"

# Tested against the last paragraph
STRONG_CLOSING_PATTERNS: list[str] = [
    r"i (?:would|'d) (?:welcome|love|appreciate) the (?:opportunity|chance)",
    r"i (?:am|'m) available",
    r"please (?:feel free to )?contact me",
    r"i look forward to",
    r"let'?s (?:discuss|connect|chat)",
    r"happy to (?:discuss|provide|share)",
    r"thank you for (?:your )?(?:time|consideration)",
    r"i can be reached",
    r"available (?:at|for)",
]

# Reader-directed references used when no company name is supplied
COMPANY_REFERENCE_PATTERN = r"your (?:company|team|organisation|mission|product)"

# Concrete numbers: percentages or counts of something
SPECIFICITY_PATTERN = r"(?:\d+%|\d+\s*(?:years?|months?|projects?|models?|teams?|clients?))"

# Tested against the whole letter
RED_FLAG_PATTERNS: list[dict[str, str]] = [
    {
        "pattern": r"^i am writing to apply",
        "type": "generic_opening",
        "message": (
            "Generic opening - try a more engaging hook that showcases your "
            "enthusiasm or key achievement"
        ),
        "severity": "medium",
    },
    {
        "pattern": r"to whom it may concern",
        "type": "no_addressee",
        "message": 'Address your letter to a specific person or "Dear Hiring Team"',
        "severity": "high",
    },
    {
        "pattern": r"dear sir or madam",
        "type": "no_addressee",
        "message": "Use \"Dear Hiring Team\" or find the hiring manager's name",
        "severity": "medium",
    },
    {
        "pattern": r"i think i would be",
        "type": "weak_language",
        "message": 'Use confident language - "I am" or "I will" instead of "I think I would be"',
        "severity": "low",
    },
    {
        "pattern": r"i believe i would be",
        "type": "weak_language",
        "message": (
            'Use confident language - "I am" or "I will" instead of "I believe I would be"'
        ),
        "severity": "low",
    },
    {
        "pattern": r"salary|compensation|remuneration|pay rate",
        "type": "salary_mention",
        "message": (
            "Avoid discussing salary in your cover letter - save this for the interview stage"
        ),
        "severity": "medium",
    },
    {
        "pattern": r"analyze|optimize|organization|color|favor|center(?!ed on)",
        "type": "us_spelling",
        "message": (
            "Use Australian spelling (analyse, optimise, organisation, colour, favour, centre)"
        ),
        "severity": "low",
    },
    {
        "pattern": r"desperate|urgently need|need a job",
        "type": "desperation",
        "message": "Avoid language that conveys desperation - focus on what you can offer",
        "severity": "high",
    },
    {
        "pattern": r"unemployed|laid off|fired|let go",
        "type": "negative_framing",
        "message": (
            "Focus on your skills and what you can contribute rather than past employment status"
        ),
        "severity": "medium",
    },
    {
        "pattern": r"i don'?t have experience|lack experience|no experience",
        "type": "negative_self",
        "message": "Avoid negative self-statements - focus on transferable skills and enthusiasm",
        "severity": "medium",
    },
]


def default_lexicon_data() -> dict[str, Any]:
    """Assemble the built-in tables in the shape Lexicon.model_validate expects."""
    return {
        "keyword_categories": KEYWORD_CATEGORIES,
        "role_keywords": ROLE_SPECIFIC_KEYWORDS,
        "role_category_weight": ROLE_CATEGORY_WEIGHT,
        "action_verbs": ACTION_VERBS,
        "generic_phrases": GENERIC_PHRASES,
        "weak_language": WEAK_LANGUAGE,
        "strong_openings": [
            {"pattern": p, "type": "strong_opening"} for p in STRONG_OPENING_PATTERNS
        ],
        "generic_opening": {"pattern": GENERIC_OPENING_PATTERN, "type": "generic_opening"},
        "strong_closings": [
            {"pattern": p, "type": "strong_closing"} for p in STRONG_CLOSING_PATTERNS
        ],
        "red_flags": RED_FLAG_PATTERNS,
        "company_reference": {"pattern": COMPANY_REFERENCE_PATTERN, "type": "company_reference"},
        "specificity": {"pattern": SPECIFICITY_PATTERN, "type": "specificity"},
    }
