# resume_analyzer/industry/classifier.py
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from resume_analyzer.config import IndustryConfig
from resume_analyzer.industry.profiles import (
    GENERAL, PRIORITY, PROFILES, IndustryProfile, get_profile
)
from resume_analyzer.models import IndustryFit, clamp_score
from resume_analyzer.scoring.base import BULLET_LINE, METRIC
from resume_analyzer.vocabulary import ACTION_VERBS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndustryMatch:
    """Detected industry with a 0-100 confidence"""
    industry: str
    confidence: int
    matched_terms: List[str] = field(default_factory=list)


class IndustryClassifier:
    """
    Detect the target industry and score the resume against its criteria
    """

    # Section-quality keys feeding each industry criterion
    CRITERIA_SOURCES = {
        'technical_skills': 'skills',
        'projects': 'projects',
        'experience': 'experience',
        'education': 'education',
        'certifications': 'certifications',
        'action_verbs': 'action_verbs',
        'formatting': 'formatting',
    }

    STRONG_THRESHOLD = 80
    WEAK_THRESHOLD = 60

    def __init__(self, config: Optional[IndustryConfig] = None, weak_score_threshold: int = 70):
        self.config = config or IndustryConfig()
        self.weak_score_threshold = weak_score_threshold

    def classify(self, resume_text: str, job_description_text: Optional[str] = None) -> IndustryMatch:
        """
        Pick the industry with the highest normalized term overlap

        Args:
            resume_text: Resume text
            job_description_text: Optional posting; its terms weigh more

        Returns:
            IndustryMatch, "general" when nothing clears the threshold
        """
        job_text = job_description_text or ""

        best: Optional[IndustryMatch] = None
        best_overlap = 0.0

        for name in PRIORITY:
            profile = PROFILES[name]
            hits = 0.0
            matched = []

            for term, pattern in profile.patterns.items():
                in_resume = len(pattern.findall(resume_text))
                in_job = len(pattern.findall(job_text)) if job_text else 0
                if in_resume or in_job:
                    matched.append(term)
                hits += in_resume + self.config.job_description_weight * in_job

            if len(matched) < self.config.min_term_hits:
                continue

            overlap = hits / len(profile.keywords)
            logger.debug(f"Industry {name}: {len(matched)} terms, overlap {overlap:.3f}")

            # Strictly greater keeps the earlier industry on ties
            if overlap > best_overlap:
                best_overlap = overlap
                confidence = clamp_score(100 * len(matched) / min(len(profile.keywords), 10))
                best = IndustryMatch(industry=name, confidence=confidence, matched_terms=matched)

        if best is None:
            logger.info("No industry cleared the threshold, using general")
            return IndustryMatch(industry=GENERAL, confidence=0, matched_terms=[])

        logger.info(f"Detected industry: {best.industry} (confidence {best.confidence})")
        return best

    def score(
        self,
        industry: str,
        section_scores: Dict[str, int],
        action_verb_score: int,
        formatting_score: int
    ) -> int:
        """
        Weight section-quality scores by the industry's criteria

        Args:
            industry: Industry name
            section_scores: Quality scores keyed by section name
            action_verb_score: Action verb sub-score
            formatting_score: Formatting sub-score

        Returns:
            Industry fit score 0-100; absent sections contribute nothing
        """
        criteria = get_profile(industry).criteria
        sources = dict(section_scores, action_verbs=action_verb_score, formatting=formatting_score)

        total = 0.0
        for criterion, weight in criteria.items():
            total += sources.get(self.CRITERIA_SOURCES[criterion], 0) * weight
        return clamp_score(total)

    def recommendations(self, industry: str, sub_scores: Dict[str, int]) -> List[str]:
        """
        Industry template recommendations, those tied to weak sub-scores first
        """
        profile = get_profile(industry)
        weak = {name for name, value in sub_scores.items() if value < self.weak_score_threshold}

        promoted = [r.text for r in profile.recommendations if weak.intersection(r.triggers)]
        remaining = [r.text for r in profile.recommendations if r.text not in promoted]
        return promoted + remaining

    def detailed_analysis(
        self,
        industry: str,
        industry_score: int,
        resume_text: str,
        section_scores: Dict[str, int],
        action_verb_score: int,
        formatting_score: int
    ) -> IndustryFit:
        """Explain how well the resume fits the industry"""
        profile = get_profile(industry)
        scores = dict(section_scores, action_verbs=action_verb_score, formatting=formatting_score)

        present = [t for t, p in profile.patterns.items() if p.search(resume_text)]
        missing = [t for t in profile.keywords if t not in present]

        strong = [s for s, v in section_scores.items() if v >= self.STRONG_THRESHOLD]
        weak = [s for s, v in section_scores.items() if v < self.WEAK_THRESHOLD]

        return IndustryFit(
            analysis=self._summary(profile, industry_score, strong, weak, len(present), len(missing)),
            strengths=self._strengths(profile, strong, present, scores),
            improvements=self._improvements(profile, weak, missing, scores),
            key_words=present[:15],
            missing_elements=self._missing_elements(profile, resume_text)
        )

    def _summary(
        self,
        profile: IndustryProfile,
        score: int,
        strong: List[str],
        weak: List[str],
        present: int,
        missing: int
    ) -> str:
        label = profile.label
        parts = [f"Your resume shows a {score}/100 fit for {label} positions."]

        if score >= 85:
            parts.append(f"This is an excellent match with strong alignment to {label} expectations.")
        elif score >= 70:
            parts.append(f"This is a good match with room for optimization for {label} roles.")
        elif score >= 55:
            parts.append(f"This is a moderate match; targeted improvements would better position you for {label} roles.")
        else:
            parts.append(f"This shows limited alignment with {label} requirements.")

        parts.append(f"You have {present} relevant industry keywords and are missing {missing}.")
        if strong:
            parts.append(f"Strongest areas: {', '.join(strong)}.")
        if weak:
            parts.append(f"Areas needing improvement: {', '.join(weak)}.")
        return ' '.join(parts)

    def _strengths(
        self,
        profile: IndustryProfile,
        strong: List[str],
        present: List[str],
        scores: Dict[str, int]
    ) -> List[str]:
        label = profile.label
        strengths = []

        if 'skills' in strong:
            strengths.append(f"Strong skills section showcases relevant {label} expertise")
        if 'experience' in strong:
            strengths.append(f"Well-developed experience section demonstrates practical {label} knowledge")
        if 'projects' in strong:
            strengths.append(f"Project portfolio highlights hands-on {label} experience")
        if 'education' in strong:
            strengths.append(f"Educational background aligns well with {label} requirements")
        if len(present) >= 10:
            strengths.append(f"Good use of industry terminology ({len(present)} relevant keywords found)")
        if scores.get('action_verbs', 0) >= 80:
            strengths.append("Strong use of action verbs demonstrates impact and initiative")
        if scores.get('formatting', 0) >= 85:
            strengths.append("Professional formatting supports readability and ATS parsing")

        return strengths or ["Resume demonstrates a basic professional structure"]

    def _improvements(
        self,
        profile: IndustryProfile,
        weak: List[str],
        missing: List[str],
        scores: Dict[str, int]
    ) -> List[str]:
        label = profile.label
        criteria = profile.criteria
        improvements = []

        focus = (
            ('skills', 'technical_skills', "Expand the skills section"),
            ('experience', 'experience', "Strengthen the experience section with detailed achievements"),
            ('projects', 'projects', "Add relevant projects to show practical application"),
            ('education', 'education', "Enhance the education section with relevant coursework and honours"),
        )
        for section, criterion, advice in focus:
            if section in weak and criteria[criterion] > 0.15:
                share = round(criteria[criterion] * 100)
                improvements.append(f"{advice}; it drives {share}% of the {label} score")

        if len(missing) > 10:
            improvements.append(f"Incorporate more industry-specific keywords (missing {len(missing)} common terms)")
        if scores.get('action_verbs', 100) < 70:
            improvements.append("Use stronger action verbs to describe achievements")
        if scores.get('formatting', 100) < 80:
            improvements.append("Improve formatting consistency")

        return improvements or ["Add more quantifiable achievements and industry-specific terminology"]

    def _missing_elements(self, profile: IndustryProfile, resume_text: str) -> List[str]:
        lower = resume_text.lower()
        missing = []

        for check in profile.element_checks:
            if not any(keyword in lower for keyword in check.keywords):
                missing.append(check.description)

        if not METRIC.search(resume_text):
            missing.append("Quantifiable achievements with specific numbers and percentages")

        bullets = [m.group('text') for m in map(BULLET_LINE.match, resume_text.splitlines()) if m]
        if bullets:
            strong = [b for b in bullets if b.split()[0].lower().strip('.,;:') in ACTION_VERBS]
            if len(strong) / len(bullets) < 0.7:
                missing.append("More action verbs at the beginning of bullet points")

        return missing
