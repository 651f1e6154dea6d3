"""
Unit tests for descriptive language statistics
"""
import pytest
from unittest.mock import Mock, patch

from resume_analyzer.keywords.extractor import KeywordExtractor
from resume_analyzer.models import JobDescription, NLPAnalysis, ResumeDocument
from resume_analyzer.nlp_analysis import NLPAnalyzer
from resume_analyzer.scoring import ScoringContext
from resume_analyzer.section_segmenter import SectionSegmenter


SHORT_RESUME = (
    "EXPERIENCE\n"
    "- Built APIs for payments\n"
    "- Led a team of five\n"
    "- Cut costs by 20%\n"
)


def make_context(text, job=None):
    return ScoringContext(
        document=ResumeDocument(raw_text=text),
        sections=SectionSegmenter().segment(text),
        extraction=KeywordExtractor().extract_with_index(text, job),
        job_description=JobDescription.from_text(job)
    )


def sentiment(compound):
    analyzer = Mock()
    analyzer.polarity_scores.return_value = {'compound': compound}
    return analyzer


class TestNLPAnalyzer:

    def test_language_metrics(self):
        result = NLPAnalyzer(sentiment(0.0)).analyze(make_context(SHORT_RESUME))
        metrics = result.language_metrics

        assert metrics.word_count == 13
        assert metrics.sentence_count == 3
        assert metrics.average_words_per_sentence == 4.3
        assert metrics.unique_word_ratio == 1.0
        assert metrics.formality_score == 60
        assert result.action_verb_count == 3
        assert result.readability_score == 87
        assert result.complexity_score == 100

    def test_key_phrases(self):
        result = NLPAnalyzer(sentiment(0.0)).analyze(make_context(SHORT_RESUME))

        assert [p.phrase for p in result.key_phrases] == ['built apis', 'cut costs']
        assert all(p.importance == 2 * p.frequency for p in result.key_phrases)

    def test_key_phrases_ranked(self, resume_text):
        phrases = NLPAnalyzer(sentiment(0.0)).analyze(make_context(resume_text)).key_phrases
        importances = [p.importance for p in phrases]

        assert 0 < len(phrases) <= NLPAnalyzer.MAX_KEY_PHRASES
        assert importances == sorted(importances, reverse=True)
        assert all(' ' in p.phrase for p in phrases)
        assert 'data pipelines' in [p.phrase for p in phrases]

    def test_technical_skills(self, resume_text):
        skills = NLPAnalyzer(sentiment(0.0)).analyze(make_context(resume_text)).technical_skills

        assert {'python', 'sql', 'docker', 'kubernetes'} <= set(skills)
        assert skills == sorted(skills)

    @pytest.mark.parametrize("compound,score,label", [
        (0.6, 80, "positive"),
        (0.0, 50, "neutral"),
        (-0.5, 25, "negative"),
    ])
    def test_sentiment(self, compound, score, label):
        analyzer = sentiment(compound)
        context = make_context(SHORT_RESUME)
        result = NLPAnalyzer(analyzer).analyze(context)

        assert result.sentiment_score == score
        assert result.sentiment_label == label
        analyzer.polarity_scores.assert_called_once_with(context.text)

    def test_neutral_without_lexicon(self):
        with patch('resume_analyzer.nlp_analysis._load_vader', return_value=None) as load:
            analyzer = NLPAnalyzer()
            first = analyzer.analyze(make_context(SHORT_RESUME))
            analyzer.analyze(make_context(SHORT_RESUME))

        assert first.sentiment_score == 50
        assert first.sentiment_label == "neutral"
        load.assert_called_once()

    def test_text_without_words(self):
        result = NLPAnalyzer(sentiment(0.9)).analyze(make_context("2019 - 2023\n+1 555 0100\n"))

        assert result == NLPAnalysis()

    def test_to_dict(self):
        data = NLPAnalyzer(sentiment(0.0)).analyze(make_context(SHORT_RESUME)).to_dict()

        assert data['languageMetrics']['wordCount'] == 13
        assert data['keyPhrases'][0] == {'phrase': 'built apis', 'frequency': 1, 'importance': 2}
        assert set(data) >= {'sentimentScore', 'readabilityScore', 'complexityScore', 'technicalSkillsFound'}


class TestScoringHelpers:

    def test_readability(self):
        assert NLPAnalyzer().readability(['built', 'apis'], 10) == 80
        assert NLPAnalyzer().readability(['implemented', 'built'], 10) == 65

    def test_complexity(self):
        assert NLPAnalyzer.complexity(['go', 'go']) == 50

    @pytest.mark.parametrize("words,expected", [
        (['professional', 'expertise', 'stuff'], 50 + 10),
        (['stuff'] * 10, 0),
        (['python'], 50),
    ])
    def test_formality(self, words, expected):
        assert NLPAnalyzer.formality(words) == expected
