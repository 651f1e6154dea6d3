# resume_analyzer/nlp_analysis.py
import logging
import threading
from collections import Counter
from typing import List, Optional
import nltk
from nltk.sentiment.vader import SentimentIntensityAnalyzer

from resume_analyzer.models import KeyPhrase, LanguageMetrics, NLPAnalysis, clamp_score
from resume_analyzer.scoring.base import ScoringContext
from resume_analyzer.scoring.language import split_sentences
from resume_analyzer.vocabulary import (
    ACTION_VERBS, FORMAL_WORDS, INFORMAL_WORDS, TECHNICAL_SKILLS
)

logger = logging.getLogger(__name__)

_vader_lock = threading.Lock()


def _load_vader() -> Optional[SentimentIntensityAnalyzer]:
    """VADER analyzer, downloading its lexicon on first use"""
    try:
        nltk.data.find('sentiment/vader_lexicon.zip')
    except LookupError:
        logger.info("Downloading NLTK data: vader_lexicon")
        nltk.download('vader_lexicon', quiet=True)

    try:
        return SentimentIntensityAnalyzer()
    except LookupError:
        logger.warning("NLTK vader_lexicon unavailable, reporting neutral sentiment")
        return None


class NLPAnalyzer:
    """
    Descriptive language statistics for a resume

    Readability, vocabulary complexity, sentiment, formality and the
    most prominent multi-word phrases. Purely informational: nothing
    here feeds the total score.
    """

    COMPLEX_WORD_LENGTH = 6
    SENTIMENT_THRESHOLD = 0.1
    MAX_KEY_PHRASES = 20

    def __init__(self, sentiment_analyzer=None):
        """
        Args:
            sentiment_analyzer: Object with polarity_scores(text); nltk
                VADER is loaded lazily when None
        """
        self._sentiment = sentiment_analyzer
        self._sentiment_loaded = sentiment_analyzer is not None

    def analyze(self, context: ScoringContext) -> NLPAnalysis:
        words = [w.lower() for w in context.words]
        if not words:
            return NLPAnalysis()

        sentences = split_sentences(context.body_lines())
        sentence_count = max(1, len(sentences))
        average = len(words) / sentence_count

        sentiment_score, sentiment_label = self._sentiment_of(context.text)

        return NLPAnalysis(
            sentiment_score=sentiment_score,
            sentiment_label=sentiment_label,
            readability_score=self.readability(words, average),
            complexity_score=self.complexity(words),
            action_verb_count=sum(1 for w in words if w in ACTION_VERBS),
            technical_skills=sorted(
                term for term in context.extraction.resume_index.terms if term in TECHNICAL_SKILLS
            ),
            language_metrics=LanguageMetrics(
                word_count=len(words),
                sentence_count=len(sentences),
                average_words_per_sentence=round(average, 1),
                unique_word_ratio=round(len(set(words)) / len(words), 2),
                formality_score=self.formality(words)
            ),
            key_phrases=self.key_phrases(context)
        )

    def readability(self, words: List[str], average_sentence: float) -> int:
        """Shorter sentences and shorter words read more easily"""
        complex_ratio = sum(1 for w in words if len(w) > self.COMPLEX_WORD_LENGTH) / len(words)
        return clamp_score(100 - average_sentence * 2 - complex_ratio * 30)

    @staticmethod
    def complexity(words: List[str]) -> int:
        """Vocabulary diversity plus average word length"""
        diversity = len(set(words)) / len(words)
        average_length = sum(len(w) for w in words) / len(words)
        return clamp_score(diversity * 80 + average_length * 5)

    @staticmethod
    def formality(words: List[str]) -> int:
        formal = sum(1 for w in words if w in FORMAL_WORDS)
        informal = sum(1 for w in words if w in INFORMAL_WORDS)
        return clamp_score(50 + (formal - informal) * 10)

    def key_phrases(self, context: ScoringContext) -> List[KeyPhrase]:
        """Multi-word resume terms; longer and more frequent phrases rank first"""
        phrases = Counter({
            term: count
            for term, count in context.extraction.resume_index.terms.items()
            if ' ' in term
        })
        ranked = sorted(
            (KeyPhrase(phrase, count, count * len(phrase.split())) for phrase, count in phrases.items()),
            key=lambda p: (-p.importance, -p.frequency, p.phrase)
        )
        return ranked[:self.MAX_KEY_PHRASES]

    def _sentiment_of(self, text: str):
        analyzer = self._sentiment_analyzer()
        if analyzer is None:
            return 50, "neutral"

        compound = analyzer.polarity_scores(text)['compound']
        if compound > self.SENTIMENT_THRESHOLD:
            label = "positive"
        elif compound < -self.SENTIMENT_THRESHOLD:
            label = "negative"
        else:
            label = "neutral"
        return clamp_score((compound + 1) * 50), label

    def _sentiment_analyzer(self):
        if not self._sentiment_loaded:
            with _vader_lock:
                if not self._sentiment_loaded:
                    self._sentiment = _load_vader()
                    self._sentiment_loaded = True
        return self._sentiment
