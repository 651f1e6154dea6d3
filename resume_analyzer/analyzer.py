# resume_analyzer/analyzer.py
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeout
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from resume_analyzer.ai.client import AIProvider, LLMClient
from resume_analyzer.ai.suggestions import AISuggestionAdapter
from resume_analyzer.ats.checker import ATSChecker
from resume_analyzer.comprehensive import ComprehensiveAnalyzer
from resume_analyzer.config import AnalyzerConfig
from resume_analyzer.exceptions import (
    AIProviderFailure, ExtractionUpstreamError, InvalidInputError, ScorerFailure
)
from resume_analyzer.industry.classifier import IndustryClassifier, IndustryMatch
from resume_analyzer.keywords.extractor import KeywordExtraction, KeywordExtractor
from resume_analyzer.keywords.matcher import KeywordMatcher
from resume_analyzer.models import (
    AIResult, ATSReport, AnalysisResult, FileType, Issue, JobDescription,
    NLPAnalysis, ResumeDocument, Section, Severity, SubScore
)
from resume_analyzer.nlp_analysis import NLPAnalyzer
from resume_analyzer.scoring.base import Scorer, ScoringContext
from resume_analyzer.scoring.composite import CompositeScorer
from resume_analyzer.scoring.content import ActionVerbScorer, KeywordScorer, RelevanceScorer
from resume_analyzer.scoring.language import GrammarScorer, LanguageToneScorer
from resume_analyzer.scoring.structure import (
    BulletPointScorer, FormattingScorer, LengthScorer, SectionScorer
)
from resume_analyzer.section_segmenter import SectionSegmenter
from resume_analyzer.text_cleaner import TextCleaner

MODES = ('full', 'ai', 'realtime')


class ResumeAnalyzer:
    """
    Resume analysis pipeline

    Segmentation, keyword extraction and industry detection run
    concurrently, then every scorer, the ATS checker and the language
    statistics fan out over the shared read-only context. Results are
    joined by component name so completion order never affects the output.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        ai_provider: Optional[AIProvider] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize analyzer

        Args:
            config: Analyzer configuration (defaults when None)
            ai_provider: Generative provider; built from config.ai when
                None and AI is enabled
            logger: Logger to report progress to
        """
        self.config = config or AnalyzerConfig()
        self.config.validate()
        self.logger = logger or logging.getLogger("resume_analyzer")

        if ai_provider is None and self.config.ai.enabled:
            ai_provider = LLMClient.from_config(self.config.ai)
        self.ai_provider = ai_provider

        matcher = KeywordMatcher(self.config.keywords)

        self.cleaner = TextCleaner()
        self.segmenter = SectionSegmenter(self.config.segmenter)
        self.extractor = KeywordExtractor(self.config.keywords, matcher)
        self.classifier = IndustryClassifier(
            self.config.industry,
            weak_score_threshold=self.config.scoring.weak_score_threshold
        )
        self.ats_checker = ATSChecker(self.config.ats, self.segmenter)
        self.composite = CompositeScorer(
            weights=self.config.scoring.weights,
            summary_size=self.config.scoring.summary_size
        )
        self.comprehensive = ComprehensiveAnalyzer()
        self.nlp_analyzer = NLPAnalyzer()
        self.ai_adapter = AISuggestionAdapter(self.ai_provider, self.config.ai)

        # Evaluation order; also the order issues are reported in
        self.scorers: List[Scorer] = [
            KeywordScorer(matcher),
            GrammarScorer(),
            FormattingScorer(),
            SectionScorer(),
            ActionVerbScorer(),
            RelevanceScorer(),
            BulletPointScorer(),
            LanguageToneScorer(),
            LengthScorer(),
        ]

    def run(
        self,
        resume_text: str,
        job_description_text: Optional[str] = None,
        file_type: Optional[str] = None,
        file_name: Optional[str] = None,
        mode: str = "full"
    ) -> Union[AnalysisResult, AIResult]:
        """Dispatch on mode: 'full' analysis or the 'ai'/'realtime' fast path"""
        if mode not in MODES:
            raise InvalidInputError(
                f"Unknown analysis mode: {mode}",
                field="mode",
                details={'allowed': list(MODES)}
            )

        if mode in ('ai', 'realtime'):
            return self.analyze_realtime(resume_text, job_description_text)
        return self.analyze(resume_text, job_description_text, file_type, file_name)

    def analyze(
        self,
        resume_text: str,
        job_description_text: Optional[str] = None,
        file_type: Optional[str] = None,
        file_name: Optional[str] = None
    ) -> AnalysisResult:
        """
        Run the full analysis

        Args:
            resume_text: Plain resume text
            job_description_text: Optional target posting
            file_type: Declared file type (extension, enum value or MIME type)
            file_name: Original file name

        Returns:
            AnalysisResult

        Raises:
            InvalidInputError: When the resume text is empty
            ExtractionUpstreamError: Surfaced unchanged
        """
        document, job = self._prepare(resume_text, job_description_text, file_type, file_name)
        job_text = job.raw_text if job else None
        self.logger.info(f"Analyzing resume ({document.word_count} words, job description: {job is not None})")

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            # 1. Segmentation, keywords and industry detection
            sections_future = pool.submit(self.segmenter.segment, document.raw_text)
            extraction_future = pool.submit(self.extractor.extract_with_index, document.raw_text, job_text)
            industry_future = pool.submit(self._classify, document.raw_text, job_text)

            sections = sections_future.result()
            extraction = extraction_future.result()
            industry_match, stage_issues = industry_future.result()

            context = self._context(document, sections, extraction, job, industry_match)

            # 2. Scorers and ATS checks over the shared context
            score_futures = {
                scorer.name: pool.submit(self._score, scorer, context)
                for scorer in self.scorers
            }
            ats_future = pool.submit(self._check_ats, document, sections)
            nlp_future = pool.submit(self._describe_language, context)

            sub_scores = {name: future.result() for name, future in score_futures.items()}
            ats_report, ats_stage_issues = ats_future.result()
            nlp_analysis, nlp_stage_issues = nlp_future.result()

        result = self._assemble(
            context, sub_scores, ats_report, nlp_analysis,
            stage_issues + ats_stage_issues + nlp_stage_issues
        )

        # 3. Optional AI suggestions, bounded by the configured timeout
        ai_result = self._generate_ai(document.raw_text, job_text, sub_scores)
        return self._with_ai(result, ai_result)

    async def analyze_async(
        self,
        resume_text: str,
        job_description_text: Optional[str] = None,
        file_type: Optional[str] = None,
        file_name: Optional[str] = None
    ) -> AnalysisResult:
        """Same as analyze(), fanned out with asyncio instead of a thread pool"""
        document, job = self._prepare(resume_text, job_description_text, file_type, file_name)
        job_text = job.raw_text if job else None
        self.logger.info(f"Analyzing resume async ({document.word_count} words)")

        # 1. Segmentation, keywords and industry detection
        sections, extraction, (industry_match, stage_issues) = await asyncio.gather(
            asyncio.to_thread(self.segmenter.segment, document.raw_text),
            asyncio.to_thread(self.extractor.extract_with_index, document.raw_text, job_text),
            asyncio.to_thread(self._classify, document.raw_text, job_text),
        )

        context = self._context(document, sections, extraction, job, industry_match)

        # 2. Scorers and ATS checks
        results = await asyncio.gather(
            *(asyncio.to_thread(self._score, scorer, context) for scorer in self.scorers),
            asyncio.to_thread(self._check_ats, document, sections),
            asyncio.to_thread(self._describe_language, context),
        )
        sub_scores = {scorer.name: score for scorer, score in zip(self.scorers, results[:-2])}
        ats_report, ats_stage_issues = results[-2]
        nlp_analysis, nlp_stage_issues = results[-1]

        result = self._assemble(
            context, sub_scores, ats_report, nlp_analysis,
            stage_issues + ats_stage_issues + nlp_stage_issues
        )

        # 3. Optional AI suggestions
        ai_result = None
        if self.ai_provider is not None:
            try:
                ai_result = await asyncio.wait_for(
                    asyncio.to_thread(
                        self.ai_adapter.generate_suggestions,
                        document.raw_text,
                        job_text,
                        self._score_values(sub_scores)
                    ),
                    timeout=self.config.ai.timeout_seconds
                )
            except asyncio.TimeoutError:
                self.logger.warning(f"AI suggestions timed out after {self.config.ai.timeout_seconds}s")
            except Exception as e:
                self.logger.warning(f"AI suggestions unavailable: {e}")

        return self._with_ai(result, ai_result)

    def analyze_realtime(
        self,
        resume_text: str,
        job_description_text: Optional[str] = None
    ) -> AIResult:
        """
        AI-only fast path

        Returns:
            Provider suggestions, or the heuristic score with no
            suggestions when no provider is configured or it fails
        """
        document, job = self._prepare(resume_text, job_description_text, None, None)
        job_text = job.raw_text if job else None

        ai_result = self._generate_ai(document.raw_text, job_text, None)
        if ai_result is None:
            return self.ai_adapter.heuristic_result(document.raw_text, job_text)
        return ai_result

    # Pipeline steps

    def _prepare(
        self,
        resume_text: str,
        job_description_text: Optional[str],
        file_type: Optional[str],
        file_name: Optional[str]
    ) -> Tuple[ResumeDocument, Optional[JobDescription]]:
        if not isinstance(resume_text, str):
            raise InvalidInputError("Resume text must be a string", field="resume_text")

        text = self.cleaner.clean(resume_text)
        if TextCleaner.is_blank(text):
            raise InvalidInputError("Resume text is empty", field="resume_text")

        if file_type:
            resolved = FileType.from_value(file_type)
        else:
            resolved = FileType.from_file_name(file_name)

        document = ResumeDocument(
            raw_text=text,
            file_type=resolved,
            file_name=file_name or "",
            mime_type=file_type or ""
        )

        job_text = self.cleaner.clean(job_description_text) if job_description_text else None
        return document, JobDescription.from_text(job_text)

    def _context(
        self,
        document: ResumeDocument,
        sections: List[Section],
        extraction: KeywordExtraction,
        job: Optional[JobDescription],
        industry_match: IndustryMatch
    ) -> ScoringContext:
        return ScoringContext(
            document=document,
            sections=sections,
            extraction=extraction,
            job_description=job,
            industry=industry_match.industry,
            config=self.config.scoring
        )

    def _classify(self, resume_text: str, job_text: Optional[str]) -> Tuple[IndustryMatch, List[Issue]]:
        issues: List[Issue] = []
        match = self._guard(
            "industry",
            lambda: self.classifier.classify(resume_text, job_text),
            IndustryMatch(industry="general", confidence=0),
            issues
        )
        return match, issues

    def _score(self, scorer: Scorer, context: ScoringContext) -> SubScore:
        issues: List[Issue] = []
        score = self._guard(
            scorer.name,
            lambda: scorer.score(context),
            None,
            issues
        )
        if score is None:
            return SubScore(name=scorer.name, value=0, issues=issues)
        return score

    def _check_ats(self, document: ResumeDocument, sections: List[Section]) -> Tuple[ATSReport, List[Issue]]:
        issues: List[Issue] = []
        report = self._guard(
            "ats",
            lambda: self.ats_checker.check(document, sections),
            ATSReport(score=0),
            issues
        )
        return report, issues

    def _describe_language(self, context: ScoringContext) -> Tuple[Optional[NLPAnalysis], List[Issue]]:
        issues: List[Issue] = []
        analysis = self._guard(
            "nlp",
            lambda: self.nlp_analyzer.analyze(context),
            None,
            issues
        )
        return analysis, issues

    def _assemble(
        self,
        context: ScoringContext,
        sub_scores: Dict[str, SubScore],
        ats_report: ATSReport,
        nlp_analysis: Optional[NLPAnalysis],
        stage_issues: List[Issue]
    ) -> AnalysisResult:
        industry = context.industry
        sub_scores = self.composite.with_weights(sub_scores)
        values = self._score_values(sub_scores)

        # 1. Totals and ranked issues
        ats_issues = ATSChecker.to_issues(ats_report) + stage_issues
        total = self.composite.total(sub_scores)
        issues = CompositeScorer.collect_issues(sub_scores, ats_issues)
        ranked = CompositeScorer.rank(issues)

        # 2. Section quality and heatmap
        section_results = self.composite.section_results(context.sections)
        section_scores = CompositeScorer.section_scores(section_results)
        heatmap = CompositeScorer.heatmap(section_results, industry)

        # 3. Industry score, recommendations and fit
        action_verb = values.get('action_verb', 0)
        formatting = values.get('formatting', 0)
        industry_issues: List[Issue] = []

        industry_score = self._guard(
            "industry",
            lambda: self.classifier.score(industry, section_scores, action_verb, formatting),
            0,
            industry_issues
        )
        recommendations = self._guard(
            "industry",
            lambda: self.classifier.recommendations(industry, values),
            [],
            industry_issues
        )
        industry_fit = self._guard(
            "industry",
            lambda: self.classifier.detailed_analysis(
                industry, industry_score, context.text, section_scores, action_verb, formatting
            ),
            None,
            industry_issues
        )

        # 4. Comprehensive review
        comprehensive_issues: List[Issue] = []
        comprehensive = self._guard(
            "comprehensive",
            lambda: self.comprehensive.analyze(context, sub_scores, ats_report, ats_issues, industry_fit),
            None,
            comprehensive_issues
        )

        extra = industry_issues + comprehensive_issues
        if extra:
            issues = issues + extra
            ranked = CompositeScorer.rank(issues)

        self.logger.info(f"Analysis complete: total {total}, ATS {ats_report.score}, industry {industry}")

        return AnalysisResult(
            ats_score=ats_report.score,
            keyword_score=values.get('keyword', 0),
            grammar_score=values.get('grammar', 0),
            formatting_score=formatting,
            section_score=values.get('section', 0),
            action_verb_score=action_verb,
            relevance_score=values.get('relevance', 0),
            bullet_point_score=values.get('bullet_point', 0),
            language_tone_score=values.get('language_tone', 0),
            length_score=values.get('length', 0),
            total_score=total,
            suggestions=self.composite.summary(ranked),
            suggestion_list=ranked,
            industry=industry,
            industry_score=industry_score,
            industry_recommendations=recommendations,
            ats_details=ats_report,
            keywords=context.keywords,
            sections=section_results,
            issues=issues,
            section_heatmap=heatmap,
            sub_scores=list(sub_scores.values()),
            comprehensive_analysis=comprehensive,
            nlp_analysis=nlp_analysis
        )

    def _generate_ai(
        self,
        resume_text: str,
        job_text: Optional[str],
        sub_scores: Optional[Dict[str, SubScore]]
    ) -> Optional[AIResult]:
        if self.ai_provider is None:
            return None

        timeout = self.config.ai.timeout_seconds
        base = self._score_values(sub_scores) if sub_scores else None

        # Not a context manager: leaving one would wait on a hung provider
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self.ai_adapter.generate_suggestions, resume_text, job_text, base)
        try:
            return future.result(timeout=timeout)
        except FuturesTimeout:
            future.cancel()
            self.logger.warning(f"AI suggestions timed out after {timeout}s")
        except AIProviderFailure as e:
            self.logger.warning(f"AI suggestions unavailable: {e.message}")
        except Exception as e:
            self.logger.warning(f"AI provider error: {e}")
        finally:
            executor.shutdown(wait=False)
        return None

    # Helpers

    def _guard(self, name: str, step: Callable[[], Any], fallback: Any, issues: List[Issue]) -> Any:
        """
        Run one step; a failure degrades it to the fallback plus a
        HIGH 'unavailable' issue instead of failing the analysis
        """
        try:
            try:
                return step()
            except (InvalidInputError, ExtractionUpstreamError, ScorerFailure):
                raise
            except Exception as e:
                raise ScorerFailure(name, str(e), details={'error_type': type(e).__name__}) from e
        except ScorerFailure as e:
            self.logger.warning(f"{e.scorer_name} step failed: {e.message}")
            issues.append(Issue(
                category="system",
                severity=Severity.HIGH,
                description=f"{e.scorer_name} scorer unavailable",
                suggestion="Re-run the analysis; this score could not be computed",
                impact=0
            ))
            return fallback

    @staticmethod
    def _score_values(sub_scores: Dict[str, SubScore]) -> Dict[str, int]:
        return {name: score.value for name, score in sub_scores.items()}

    @staticmethod
    def _with_ai(result: AnalysisResult, ai_result: Optional[AIResult]) -> AnalysisResult:
        if ai_result is None:
            return result
        return replace(result, ai_suggestions=ai_result.ai_suggestions, ai_score=ai_result.ai_score)


def analyze(
    resume_text: str,
    job_description_text: Optional[str] = None,
    file_type: Optional[str] = None,
    file_name: Optional[str] = None,
    *,
    mode: str = "full",
    ai_provider: Optional[AIProvider] = None,
    logger: Optional[logging.Logger] = None,
    config: Optional[AnalyzerConfig] = None
) -> Union[AnalysisResult, AIResult]:
    """
    Analyze a resume

    Args:
        resume_text: Plain resume text
        job_description_text: Optional target posting
        file_type: Declared file type
        file_name: Original file name
        mode: 'full', or 'ai'/'realtime' for the AI-only fast path
        ai_provider: Optional generative provider
        logger: Optional logger
        config: Optional configuration

    Returns:
        AnalysisResult in full mode, AIResult otherwise
    """
    analyzer = ResumeAnalyzer(config=config, ai_provider=ai_provider, logger=logger)
    return analyzer.run(resume_text, job_description_text, file_type, file_name, mode=mode)


def analyze_realtime(
    resume_text: str,
    job_description_text: Optional[str] = None,
    *,
    ai_provider: Optional[AIProvider] = None,
    logger: Optional[logging.Logger] = None,
    config: Optional[AnalyzerConfig] = None
) -> AIResult:
    """AI-only analysis; falls back to the heuristic score"""
    analyzer = ResumeAnalyzer(config=config, ai_provider=ai_provider, logger=logger)
    return analyzer.analyze_realtime(resume_text, job_description_text)
