# resume_analyzer/config.py
import os
import logging
from dataclasses import dataclass, field, fields
from typing import Dict, Optional, Any
import yaml

from resume_analyzer.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class SegmenterConfig:
    """Heading detection thresholds"""
    max_heading_length: int = 40
    max_heading_words: int = 5
    heading_fuzzy_threshold: float = 88.0


@dataclass
class KeywordConfig:
    """Keyword extraction and matching"""
    max_keywords: int = 80
    min_phrase_count: int = 2
    max_ngram: int = 3
    fuzzy_threshold: float = 90.0
    fuzzy_min_length: int = 5


@dataclass
class ScoringConfig:
    """Heuristic scorer thresholds"""

    # Optional override of CompositeScorer.WEIGHTS (must sum to 1.0)
    weights: Optional[Dict[str, float]] = None

    min_words: int = 300
    max_words: int = 1200
    senior_max_words: int = 1500
    length_floor: int = 40

    baseline_keyword_target: int = 12
    summary_size: int = 5
    weak_score_threshold: int = 70


@dataclass
class ATSConfig:
    """Point deductions per failed ATS check"""
    impacts: Dict[str, int] = field(default_factory=lambda: {
        'file_format': 15,
        'file_name': 5,
        'complex_tables': 20,
        'columns': 15,
        'images': 10,
        'headers_footers': 10,
        'fancy_fonts': 5,
        'special_characters': 5,
        'text_boxes': 10,
        'section_headings': 10,
        'contact_info': 5,
    })
    contact_window: int = 500
    special_character_limit: int = 10
    min_standard_headings: int = 3


@dataclass
class IndustryConfig:
    """Industry detection"""
    min_term_hits: int = 3
    job_description_weight: float = 2.0


@dataclass
class AIConfig:
    """Generative provider used for supplementary suggestions"""
    enabled: bool = False
    base_url: str = "http://localhost:11434"
    model: str = "llama3.2:3b"
    timeout_seconds: float = 20.0
    max_retries: int = 2
    temperature: float = 0.4
    max_tokens: int = 600
    max_prompt_chars: int = 6000
    max_suggestions: int = 5


@dataclass
class AnalyzerConfig:
    """Configuration for the resume analysis engine"""

    segmenter: SegmenterConfig = field(default_factory=SegmenterConfig)
    keywords: KeywordConfig = field(default_factory=KeywordConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    ats: ATSConfig = field(default_factory=ATSConfig)
    industry: IndustryConfig = field(default_factory=IndustryConfig)
    ai: AIConfig = field(default_factory=AIConfig)

    # Thread pool used for the scorer fan-out
    max_workers: int = 8

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalyzerConfig':
        """Build config from a plain mapping, rejecting unknown keys"""
        nested = {
            'segmenter': SegmenterConfig,
            'keywords': KeywordConfig,
            'scoring': ScoringConfig,
            'ats': ATSConfig,
            'industry': IndustryConfig,
            'ai': AIConfig,
        }

        kwargs = {}
        for key, value in (data or {}).items():
            if key in nested:
                kwargs[key] = _build(nested[key], value or {}, key)
            elif key == 'max_workers':
                kwargs[key] = int(value)
            else:
                raise ConfigurationError(f"Unknown config key: {key}", config_key=key)

        config = cls(**kwargs)

        # ATS impacts are merged over the defaults so partial tables work
        if 'ats' in (data or {}) and 'impacts' in (data['ats'] or {}):
            impacts = ATSConfig().impacts
            impacts.update(data['ats']['impacts'])
            config.ats.impacts = impacts

        config.validate()
        return config

    def validate(self):
        """
        Reject values the scorers cannot work with

        Raises:
            ConfigurationError: On non-positive word limits, workers or
                ATS impacts, and on unknown ATS checks
        """
        scoring = self.scoring
        if scoring.min_words <= 0:
            raise ConfigurationError("scoring.min_words must be positive", config_key="scoring.min_words")
        if not scoring.min_words <= scoring.max_words <= scoring.senior_max_words:
            raise ConfigurationError(
                "Word limits must satisfy min_words <= max_words <= senior_max_words",
                config_key="scoring.max_words",
                details={
                    'min_words': scoring.min_words,
                    'max_words': scoring.max_words,
                    'senior_max_words': scoring.senior_max_words,
                }
            )

        known = set(ATSConfig().impacts)
        for check, impact in self.ats.impacts.items():
            if check not in known:
                raise ConfigurationError(f"Unknown ATS check: {check}", config_key=f"ats.impacts.{check}")
            if not isinstance(impact, int) or isinstance(impact, bool) or impact <= 0:
                raise ConfigurationError(
                    f"ATS impact for {check} must be a positive integer (got {impact!r})",
                    config_key=f"ats.impacts.{check}"
                )

        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1", config_key="max_workers")

    @classmethod
    def from_yaml(cls, path: str) -> 'AnalyzerConfig':
        """Load configuration from YAML file"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read config {path}: {e}", details={'path': path})

        return cls.from_dict(data.get('analyzer', {}))


def _build(config_cls, data: Dict[str, Any], prefix: str):
    known = {f.name for f in fields(config_cls)}
    unknown = set(data) - known
    if unknown:
        key = f"{prefix}.{sorted(unknown)[0]}"
        raise ConfigurationError(f"Unknown config key: {key}", config_key=key)
    return config_cls(**data)


def get_config() -> AnalyzerConfig:
    """Get analyzer configuration"""
    config_path = os.getenv('RESUME_ANALYZER_CONFIG', 'config/analyzer.yaml')

    if os.path.exists(config_path):
        logger.info(f"Loading analyzer config from {config_path}")
        return AnalyzerConfig.from_yaml(config_path)
    return AnalyzerConfig()
