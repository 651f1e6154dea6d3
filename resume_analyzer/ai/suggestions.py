# resume_analyzer/ai/suggestions.py
import re
import json
import logging
from typing import Any, Dict, List, Optional

from resume_analyzer.ai.client import AIProvider
from resume_analyzer.config import AIConfig
from resume_analyzer.exceptions import AIProviderFailure
from resume_analyzer.models import AISuggestion, AIResult, clamp_score
from resume_analyzer.section_segmenter import SectionSegmenter

logger = logging.getLogger(__name__)


class AISuggestionAdapter:
    """
    Ask a generative provider for improvement suggestions and normalize
    whatever it returns into an AIResult
    """

    SYSTEM_PROMPT = """You are an expert resume reviewer and ATS optimization specialist.
Your suggestions must be:
1. Specific to the resume you are given
2. Actionable in a single editing pass
3. Truthful: never invent experience, numbers or employers
4. One sentence each"""

    LIST_PREFIX = re.compile(r'^\s*(?:\d+\s*[.)]|[-*•])\s*')
    SCORE_LINE = re.compile(r'\bscore\s*[:=]\s*(\d{1,3})\b', re.IGNORECASE)
    JSON_BLOCK = re.compile(r'(\[.*\]|\{.*\})', re.DOTALL)

    # Heuristic score signals
    QUANTIFIED = re.compile(
        r'\d+%|\$\d+|\d+\+|(?:increased|reduced|improved)\D{0,40}\d+',
        re.IGNORECASE
    )

    CATEGORY_HINTS = (
        ('keywords', ('keyword', 'job description', 'terminology')),
        ('achievements', ('quantif', 'metric', 'number', 'percentage')),
        ('action_verbs', ('action verb', 'verb')),
        ('formatting', ('format', 'font', 'layout', 'applicant tracking', 'ats-')),
        ('summary', ('summary', 'objective')),
        ('skills', ('skill',)),
    )

    def __init__(self, provider: Optional[AIProvider] = None, config: Optional[AIConfig] = None):
        self.provider = provider
        self.config = config or AIConfig()

    @property
    def provider_name(self) -> str:
        name = getattr(self.provider, 'name', None)
        return name if isinstance(name, str) else "llm"

    def generate_suggestions(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
        base_analysis: Optional[Dict[str, int]] = None
    ) -> AIResult:
        """
        Get suggestions from the provider

        Args:
            resume_text: Resume text
            job_description: Optional target posting
            base_analysis: Heuristic sub-scores keyed by name, used to
                point the model at the weakest areas

        Returns:
            AIResult with provider suggestions

        Raises:
            AIProviderFailure: When the provider fails or nothing usable
                comes back
        """
        if self.provider is None:
            raise AIProviderFailure("No AI provider configured")

        prompt = self.build_prompt(resume_text, job_description, base_analysis)

        logger.info(f"Requesting AI suggestions from {self.provider_name}")
        reply = self.provider.complete(prompt, system_prompt=self.SYSTEM_PROMPT)

        suggestions = self.parse_suggestions(reply or "")
        if not suggestions:
            raise AIProviderFailure("No suggestions in provider response", provider=self.provider_name)

        score = self.extract_score(reply)
        if score is None:
            score = self.heuristic_score(resume_text, job_description)

        logger.info(f"Received {len(suggestions)} AI suggestions (score {score})")
        return AIResult(ai_suggestions=suggestions, ai_score=score, provider=self.provider_name)

    def build_prompt(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
        base_analysis: Optional[Dict[str, int]] = None
    ) -> str:
        limit = self.config.max_prompt_chars
        resume = resume_text[:limit]

        parts = [
            f"Analyze the following resume and return {self.config.max_suggestions} specific "
            "improvement suggestions to make it more ATS-friendly, impactful, and tailored "
            "to the job description.",
            "",
            "Resume:",
            resume,
        ]

        if job_description:
            parts += ["", "Job Description:", job_description[:limit]]

        if base_analysis:
            weakest = sorted(base_analysis.items(), key=lambda item: (item[1], item[0]))[:3]
            listed = ', '.join(f"{name.replace('_', ' ')} {value}/100" for name, value in weakest)
            parts += ["", f"An automated review found these weakest areas: {listed}."]

        parts += [
            "",
            "Return the suggestions as a numbered list, one per line.",
            "On the last line write 'Score: N' where N is your 0-100 rating of the resume.",
        ]
        return '\n'.join(parts)

    def parse_suggestions(self, reply: str) -> List[AISuggestion]:
        """JSON array or object first, numbered lines otherwise"""
        limit = self.config.max_suggestions

        texts = self._parse_json(reply)
        if texts is None:
            texts = []
            for line in reply.splitlines():
                if self.SCORE_LINE.search(line) and len(line.split()) <= 4:
                    continue
                text = self.LIST_PREFIX.sub('', line).strip()
                # Unnumbered "Here are 5 suggestions:" style preambles
                if text == line.strip() and text.endswith(':'):
                    continue
                if text:
                    texts.append(text)

        return [AISuggestion(text=text, category=self.categorize(text)) for text in texts[:limit]]

    def extract_score(self, reply: Optional[str]) -> Optional[int]:
        if not reply:
            return None
        match = self.SCORE_LINE.search(reply)
        return clamp_score(int(match.group(1))) if match else None

    def categorize(self, text: str) -> str:
        lower = text.lower()
        for category, hints in self.CATEGORY_HINTS:
            if any(hint in lower for hint in hints):
                return category
        return "general"

    def heuristic_score(self, resume_text: str, job_description: Optional[str] = None) -> int:
        """
        Rule-based score used when the provider gives none

        Returns:
            Score clamped to 20-100
        """
        lower = resume_text.lower()
        score = 50

        # 1. Contact details
        if '@' in resume_text and SectionSegmenter.PHONE_PATTERN.search(resume_text):
            score += 10

        # 2. Summary
        if 'summary' in lower or 'objective' in lower:
            score += 10

        # 3. Quantified achievements
        score += min(len(self.QUANTIFIED.findall(resume_text)) * 3, 15)

        # 4. Skills and education
        if 'skill' in lower or 'technical' in lower:
            score += 10
        if 'education' in lower or 'degree' in lower:
            score += 5

        # 5. Job description overlap
        if job_description:
            important = [w for w in job_description.lower().split() if len(w) > 4]
            if important:
                matching = [w for w in important if w in lower]
                score += round(15 * len(matching) / len(important))

        return clamp_score(score, low=20, high=100)

    def heuristic_result(self, resume_text: str, job_description: Optional[str] = None) -> AIResult:
        return AIResult(
            ai_suggestions=[],
            ai_score=self.heuristic_score(resume_text, job_description),
            provider="heuristic"
        )

    def _parse_json(self, reply: str) -> Optional[List[str]]:
        match = self.JSON_BLOCK.search(reply)
        if not match:
            return None
        try:
            data: Any = json.loads(match.group(1))
        except json.JSONDecodeError:
            return None

        if isinstance(data, dict):
            data = data.get('suggestions')
        if not isinstance(data, list):
            return None

        texts = []
        for item in data:
            if isinstance(item, dict):
                item = item.get('text') or item.get('suggestion') or ''
            if isinstance(item, str) and item.strip():
                texts.append(self.LIST_PREFIX.sub('', item).strip())
        return texts
