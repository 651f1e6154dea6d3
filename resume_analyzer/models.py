# resume_analyzer/models.py
import json
import os
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any
from enum import Enum


class FileType(Enum):
    """Source file type reported by the caller"""
    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Optional[str]) -> 'FileType':
        """Accept an enum value, file extension or MIME type"""
        if not value:
            return cls.OTHER

        value = value.strip().lower()
        aliases = {
            'pdf': cls.PDF,
            'application/pdf': cls.PDF,
            'docx': cls.DOCX,
            'doc': cls.DOCX,
            'application/msword': cls.DOCX,
            'application/vnd.openxmlformats-officedocument.wordprocessingml.document': cls.DOCX,
            'txt': cls.TXT,
            'text': cls.TXT,
            'text/plain': cls.TXT,
        }
        return aliases.get(value.lstrip('.'), cls.OTHER)

    @classmethod
    def from_file_name(cls, file_name: Optional[str]) -> 'FileType':
        if not file_name:
            return cls.OTHER
        return cls.from_value(os.path.splitext(file_name)[1])


class SectionName(Enum):
    """Canonical resume sections"""
    CONTACT = "contact"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    AWARDS = "awards"
    PUBLICATIONS = "publications"
    VOLUNTEER = "volunteer"
    LANGUAGES = "languages"
    INTERESTS = "interests"
    REFERENCES = "references"
    OTHER = "other"


class KeywordCategory(Enum):
    TECHNICAL = "technical"
    SOFT = "soft"
    CERTIFICATION = "certification"
    GENERAL = "general"


class KeywordSource(Enum):
    RESUME = "resume"
    JOB_DESCRIPTION = "jobDescription"
    BOTH = "both"


class MatchType(Enum):
    """How a job-description term was found in the resume"""
    EXACT = "exact"
    SYNONYM = "synonym"
    STEMMED = "stemmed"
    FUZZY = "fuzzy"
    MISSING = "missing"


class Severity(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return {'critical': 0, 'high': 1, 'medium': 2, 'low': 3}[self.value]


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round and clamp a score to [low, high]"""
    return int(max(low, min(high, round(value))))


@dataclass(frozen=True)
class ResumeDocument:
    """Resume text as handed over by the text extractor"""
    raw_text: str
    file_type: FileType = FileType.OTHER
    file_name: str = ""
    mime_type: str = ""            # Type string as declared by the caller

    @property
    def word_count(self) -> int:
        return len(self.raw_text.split())


@dataclass(frozen=True)
class JobDescription:
    """Optional target job posting"""
    raw_text: str

    @classmethod
    def from_text(cls, text: Optional[str]) -> Optional['JobDescription']:
        if text is None or not text.strip():
            return None
        return cls(raw_text=text)


@dataclass(frozen=True)
class Section:
    """Contiguous span of resume text under one heading"""
    name: SectionName
    heading: str
    content: str
    start_offset: int
    end_offset: int

    @property
    def body(self) -> str:
        """Content without the heading line"""
        if not self.heading:
            return self.content
        position = self.content.find(self.heading)
        if position < 0:
            return self.content
        line_end = self.content.find('\n', position)
        return self.content[line_end + 1:] if line_end >= 0 else ""

    @property
    def word_count(self) -> int:
        return len(self.body.split())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name.value,
            'heading': self.heading,
            'content': self.content,
            'startOffset': self.start_offset,
            'endOffset': self.end_offset,
        }


@dataclass(frozen=True)
class Keyword:
    """Extracted term with its job-description match status"""
    text: str
    normalized_text: str
    count: int
    is_from_job_description: bool
    is_match: bool
    category: KeywordCategory
    importance: int
    source: KeywordSource
    match_type: MatchType = MatchType.MISSING

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'normalizedText': self.normalized_text,
            'count': self.count,
            'isFromJobDescription': self.is_from_job_description,
            'isMatch': self.is_match,
            'category': self.category.value,
            'importance': self.importance,
            'source': self.source.value,
            'matchType': self.match_type.value,
        }


@dataclass(frozen=True)
class Issue:
    """A problem found in the resume and how to fix it"""
    category: str
    severity: Severity
    description: str
    suggestion: str
    line_number: Optional[int] = None
    impact: int = 0                  # Points this issue cost

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'severity': self.severity.value,
            'description': self.description,
            'lineNumber': self.line_number,
            'suggestion': self.suggestion,
            'impact': self.impact,
        }


@dataclass(frozen=True)
class SubScore:
    """One quality dimension, always within 0-100"""
    name: str
    value: int
    weight: float = 0.0             # Share of the total; 0 for unweighted components
    issues: List[Issue] = field(default_factory=list)

    def __post_init__(self):
        object.__setattr__(self, 'value', clamp_score(self.value))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'value': self.value,
            'weight': self.weight,
            'issues': [i.to_dict() for i in self.issues],
        }


@dataclass(frozen=True)
class ATSIssue:
    type: str
    description: str
    impact: int
    solution: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'description': self.description,
            'impact': self.impact,
            'solution': self.solution,
        }


@dataclass(frozen=True)
class ATSReport:
    """ATS compatibility outcome"""
    score: int
    issues: List[ATSIssue] = field(default_factory=list)
    passed_checks: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'issues': [i.to_dict() for i in self.issues],
            'passedChecks': list(self.passed_checks),
        }


@dataclass(frozen=True)
class SectionResult:
    """Section with its quality score"""
    name: str
    content: str
    score: int
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'content': self.content,
            'score': self.score,
            'suggestions': list(self.suggestions),
        }


@dataclass(frozen=True)
class HeatmapCell:
    name: str
    score: int
    weight: int

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'score': self.score, 'weight': self.weight}


@dataclass(frozen=True)
class AISuggestion:
    text: str
    category: str = "general"

    def to_dict(self) -> Dict[str, Any]:
        return {'text': self.text, 'category': self.category}


@dataclass(frozen=True)
class AIResult:
    """Output of the AI suggestion step"""
    ai_suggestions: List[AISuggestion]
    ai_score: int
    provider: str = "llm"           # "llm" or "heuristic"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'aiSuggestions': [s.to_dict() for s in self.ai_suggestions],
            'aiScore': self.ai_score,
            'provider': self.provider,
        }


@dataclass(frozen=True)
class IndustryFit:
    """Detailed industry alignment"""
    analysis: str
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    key_words: List[str] = field(default_factory=list)
    missing_elements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'analysis': self.analysis,
            'strengths': list(self.strengths),
            'improvements': list(self.improvements),
            'keyWords': list(self.key_words),
            'missingElements': list(self.missing_elements),
        }


@dataclass(frozen=True)
class KeyPhrase:
    phrase: str
    frequency: int
    importance: int                 # frequency x words in phrase

    def to_dict(self) -> Dict[str, Any]:
        return {'phrase': self.phrase, 'frequency': self.frequency, 'importance': self.importance}


@dataclass(frozen=True)
class LanguageMetrics:
    word_count: int = 0
    sentence_count: int = 0
    average_words_per_sentence: float = 0.0
    unique_word_ratio: float = 0.0
    formality_score: int = 50

    def to_dict(self) -> Dict[str, Any]:
        return {
            'wordCount': self.word_count,
            'sentenceCount': self.sentence_count,
            'averageWordsPerSentence': self.average_words_per_sentence,
            'uniqueWordRatio': self.unique_word_ratio,
            'formalityScore': self.formality_score,
        }


@dataclass(frozen=True)
class NLPAnalysis:
    """Descriptive language statistics; not part of the total score"""
    sentiment_score: int = 50
    sentiment_label: str = "neutral"
    readability_score: int = 50
    complexity_score: int = 50
    action_verb_count: int = 0
    technical_skills: List[str] = field(default_factory=list)
    language_metrics: LanguageMetrics = field(default_factory=LanguageMetrics)
    key_phrases: List[KeyPhrase] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sentimentScore': self.sentiment_score,
            'sentimentLabel': self.sentiment_label,
            'readabilityScore': self.readability_score,
            'complexityScore': self.complexity_score,
            'actionVerbCount': self.action_verb_count,
            'technicalSkillsFound': list(self.technical_skills),
            'languageMetrics': self.language_metrics.to_dict(),
            'keyPhrases': [p.to_dict() for p in self.key_phrases],
        }


@dataclass(frozen=True)
class ActionPlan:
    immediate: List[str] = field(default_factory=list)
    short_term: List[str] = field(default_factory=list)
    long_term: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'immediate': list(self.immediate),
            'shortTerm': list(self.short_term),
            'longTerm': list(self.long_term),
        }


@dataclass(frozen=True)
class ComprehensiveAnalysis:
    """Prioritized review of the whole resume"""
    overall_score: int
    issues: List[Issue] = field(default_factory=list)
    strengths: List[str] = field(default_factory=list)
    quick_wins: List[str] = field(default_factory=list)
    action_plan: ActionPlan = field(default_factory=ActionPlan)
    industry_fit: Optional[IndustryFit] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'overallScore': self.overall_score,
            'issues': [i.to_dict() for i in self.issues],
            'strengths': list(self.strengths),
            'quickWins': list(self.quick_wins),
            'actionPlan': self.action_plan.to_dict(),
            'industryFit': self.industry_fit.to_dict() if self.industry_fit else None,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis returned to callers"""

    # Scores (0-100)
    ats_score: int
    keyword_score: int
    grammar_score: int
    formatting_score: int
    section_score: int
    action_verb_score: int
    relevance_score: int
    bullet_point_score: int
    language_tone_score: int
    length_score: int
    total_score: int

    # Suggestions
    suggestions: str
    suggestion_list: List[Issue]

    # Industry
    industry: str
    industry_score: int
    industry_recommendations: List[str]

    # Details
    ats_details: ATSReport
    keywords: List[Keyword]
    sections: List[SectionResult]
    issues: List[Issue]
    sub_scores: List[SubScore] = field(default_factory=list)
    section_heatmap: List[HeatmapCell] = field(default_factory=list)
    comprehensive_analysis: Optional[ComprehensiveAnalysis] = None
    nlp_analysis: Optional[NLPAnalysis] = None

    # AI output, absent when the provider is disabled or failed
    ai_suggestions: Optional[List[AISuggestion]] = None
    ai_score: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'atsScore': self.ats_score,
            'keywordScore': self.keyword_score,
            'grammarScore': self.grammar_score,
            'formattingScore': self.formatting_score,
            'sectionScore': self.section_score,
            'actionVerbScore': self.action_verb_score,
            'relevanceScore': self.relevance_score,
            'bulletPointScore': self.bullet_point_score,
            'languageToneScore': self.language_tone_score,
            'lengthScore': self.length_score,
            'totalScore': self.total_score,
            'suggestions': self.suggestions,
            'suggestionList': [i.to_dict() for i in self.suggestion_list],
            'aiSuggestions': (
                [s.to_dict() for s in self.ai_suggestions]
                if self.ai_suggestions is not None else None
            ),
            'aiScore': self.ai_score,
            'industry': self.industry,
            'industryScore': self.industry_score,
            'industryRecommendations': list(self.industry_recommendations),
            'atsDetails': self.ats_details.to_dict(),
            'keywords': [k.to_dict() for k in self.keywords],
            'sections': [s.to_dict() for s in self.sections],
            'issues': [i.to_dict() for i in self.issues],
            'sectionHeatmap': [c.to_dict() for c in self.section_heatmap],
            'comprehensiveAnalysis': (
                self.comprehensive_analysis.to_dict()
                if self.comprehensive_analysis else None
            ),
            'nlpAnalysis': self.nlp_analysis.to_dict() if self.nlp_analysis else None,
            'subScores': [s.to_dict() for s in self.sub_scores],
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @property
    def grade(self) -> str:
        """Letter grade for the total score"""
        if self.total_score >= 90:
            return "A+"
        elif self.total_score >= 85:
            return "A"
        elif self.total_score >= 80:
            return "A-"
        elif self.total_score >= 75:
            return "B+"
        elif self.total_score >= 70:
            return "B"
        elif self.total_score >= 65:
            return "B-"
        elif self.total_score >= 60:
            return "C+"
        elif self.total_score >= 55:
            return "C"
        else:
            return "F"
