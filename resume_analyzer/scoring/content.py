# resume_analyzer/scoring/content.py
import math
import logging
from collections import Counter
from typing import Dict, Optional

from resume_analyzer.industry.profiles import get_profile
from resume_analyzer.keywords.matcher import KeywordMatcher, TermIndex, stem_phrase
from resume_analyzer.models import SectionName, Severity, SubScore
from resume_analyzer.scoring.base import Scorer, ScoringContext
from resume_analyzer.vocabulary import ACTION_VERBS, WEAK_OPENERS

logger = logging.getLogger(__name__)


class KeywordScorer(Scorer):
    """
    Importance-weighted share of job-description keywords found in the resume

    Without a job description the resume is measured against the detected
    industry's baseline vocabulary instead.
    """

    name = "keyword"
    category = "keywords"

    def __init__(self, matcher: Optional[KeywordMatcher] = None):
        self.matcher = matcher or KeywordMatcher()

    def score(self, context: ScoringContext) -> SubScore:
        job_keywords = context.extraction.job_keywords
        if not job_keywords:
            return self._score_against_baseline(context)

        total = sum(k.importance for k in job_keywords)
        matched = sum(k.importance for k in job_keywords if k.is_match)
        value = 100 * matched / total

        issues = []
        missing = [k for k in job_keywords if not k.is_match and k.importance >= 3]
        if missing:
            shown = missing[:5]
            issues.append(self._issue(
                Severity.HIGH,
                f"Missing important job keywords: {', '.join(k.text for k in shown)}",
                "Work these terms into your skills and experience where they truthfully apply",
                impact=round(100 * sum(k.importance for k in missing) / total)
            ))
        elif value < 70:
            unmatched = [k.text for k in job_keywords if not k.is_match][:5]
            issues.append(self._issue(
                Severity.MEDIUM,
                f"Low keyword match rate ({round(value)}%)",
                f"Include more of the job's wording, e.g. {', '.join(unmatched)}",
                impact=round(100 - value)
            ))

        return self._result(value, issues)

    def _score_against_baseline(self, context: ScoringContext) -> SubScore:
        profile = get_profile(context.industry)
        baseline = profile.baseline_terms
        target = min(len(baseline), context.config.baseline_keyword_target)

        index = context.extraction.resume_index
        found = [term for term in baseline if self.matcher.contains(term, index)]
        value = 100 * min(len(found), target) / target

        issues = [self._issue(
            Severity.LOW,
            f"No job description supplied; keywords scored against the {profile.label} baseline",
            "Provide the job description for a targeted keyword score",
            impact=0
        )]

        if value < 70:
            missing = [term for term in baseline if term not in found][:5]
            issues.append(self._issue(
                Severity.MEDIUM,
                f"Few common {profile.label} keywords found ({len(found)} of {target})",
                f"Consider adding relevant terms such as {', '.join(missing)}",
                impact=round(100 - value)
            ))

        return self._result(value, issues)


class ActionVerbScorer(Scorer):
    """
    Fraction of experience bullets that open with a strong action verb
    """

    name = "action_verb"
    category = "action_verbs"

    # Present-tense forms not derivable by adding -d/-ed
    IRREGULAR = {
        'lead': 'led', 'build': 'built', 'drive': 'drove', 'grow': 'grew',
        'write': 'wrote', 'win': 'won', 'oversee': 'oversaw', 'cut': 'cut',
    }

    def score(self, context: ScoringContext) -> SubScore:
        experience = context.section(SectionName.EXPERIENCE)
        lines = context.bullet_lines(experience.body) if experience else []
        if not lines:
            lines = context.bullet_lines()

        if not lines:
            return self._result(50, [self._issue(
                Severity.MEDIUM,
                "No bullet points found to evaluate action verbs",
                "Describe achievements as bullets that start with verbs like 'Led', 'Built', 'Reduced'",
                impact=50
            )])

        strong = [line for line in lines if self.is_action_verb(self._first_word(line))]
        weak = [line for line in lines if line.lower().startswith(WEAK_OPENERS)]
        value = 100 * len(strong) / len(lines)

        issues = []
        if weak:
            issues.append(self._issue(
                Severity.MEDIUM,
                f"{len(weak)} bullet(s) open with weak phrases like '{self._opener(weak[0])}'",
                "Replace 'Responsible for' or 'Worked on' with a strong verb that shows ownership",
                impact=round(100 * len(weak) / len(lines)),
                line_number=self._line_of(context.text, weak[0])
            ))
        if value < 70:
            issues.append(self._issue(
                Severity.MEDIUM if value >= 40 else Severity.HIGH,
                f"Only {len(strong)} of {len(lines)} bullets start with an action verb",
                "Start each bullet with a past-tense action verb",
                impact=round(100 - value)
            ))

        return self._result(value, issues)

    def is_action_verb(self, word: str) -> bool:
        if not word:
            return False
        if word in ACTION_VERBS or self.IRREGULAR.get(word) in ACTION_VERBS:
            return True

        candidates = [word + 'd', word + 'ed']
        if word.endswith('ing'):
            stem = word[:-3]
            if self.IRREGULAR.get(stem) in ACTION_VERBS:
                return True
            candidates.append(stem + 'ed')
        if word.endswith('s'):
            candidates.extend([word[:-1] + 'd', word[:-1] + 'ed'])
        if word.endswith('y'):
            candidates.append(word[:-1] + 'ied')
        return any(c in ACTION_VERBS for c in candidates)

    @staticmethod
    def _first_word(line: str) -> str:
        parts = line.split()
        return parts[0].strip('.,;:()').lower() if parts else ""

    @staticmethod
    def _opener(line: str) -> str:
        lower = line.lower()
        for opener in WEAK_OPENERS:
            if lower.startswith(opener):
                return line[:len(opener)]
        return line.split()[0]

    @staticmethod
    def _line_of(text: str, fragment: str) -> Optional[int]:
        position = text.find(fragment)
        return text.count('\n', 0, position) + 1 if position >= 0 else None


class RelevanceScorer(Scorer):
    """
    Cosine similarity between resume and target term distributions

    The target is the job description, or the industry baseline when no
    job description is supplied.
    """

    name = "relevance"
    category = "relevance"

    # Highest relevance reachable without a job description
    BASELINE_CEILING = 90

    def score(self, context: ScoringContext) -> SubScore:
        job_index = context.extraction.job_index
        resume_vector = self._unigram_vector(context.extraction.resume_index)

        issues = []
        reference = self._unigram_vector(job_index) if job_index else {}

        if reference:
            value = 100 * self.cosine(resume_vector, reference)
            if value < 60:
                issues.append(self._issue(
                    Severity.MEDIUM,
                    f"Resume content is weakly aligned with the job description ({round(value)}%)",
                    "Mirror the job's responsibilities and required skills in your experience bullets",
                    impact=round(100 - value)
                ))
        else:
            profile = get_profile(context.industry)
            reference = Counter()
            for term in profile.baseline_terms:
                for token in term.split():
                    reference[stem_phrase(token)] = 1
            value = min(self.BASELINE_CEILING, 100 * self.cosine(resume_vector, dict(reference)))
            issues.append(self._issue(
                Severity.LOW,
                f"No job description supplied; relevance estimated against the {profile.label} baseline",
                "Provide the job description for a targeted relevance score",
                impact=0
            ))

        return self._result(value, issues)

    @staticmethod
    def cosine(vector: Dict[str, int], reference: Dict[str, int]) -> float:
        """
        Cosine over the reference vocabulary with log-dampened counts

        Terms the reference does not contain are ignored, so extra resume
        content is not penalized.
        """
        def weight(count: int) -> float:
            return 1.0 + math.log(count) if count > 0 else 0.0

        keys = sorted(reference)
        ref = [weight(reference[k]) for k in keys]
        own = [weight(vector.get(k, 0)) for k in keys]

        dot = sum(a * b for a, b in zip(own, ref))
        norm_ref = math.sqrt(sum(b * b for b in ref))
        norm_own = math.sqrt(sum(a * a for a in own))
        if dot == 0 or norm_ref == 0 or norm_own == 0:
            return 0.0
        return min(1.0, dot / (norm_ref * norm_own))

    @staticmethod
    def _unigram_vector(index: Optional[TermIndex]) -> Dict[str, int]:
        vector: Counter = Counter()
        if index is None:
            return {}
        for term, count in index.terms.items():
            if ' ' not in term:
                vector[stem_phrase(term)] += count
        return dict(vector)
