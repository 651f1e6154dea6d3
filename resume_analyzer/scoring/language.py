# resume_analyzer/scoring/language.py
import re
import logging
import statistics
from collections import Counter
from typing import List
from nltk.tokenize.punkt import PunktSentenceTokenizer

from resume_analyzer.keywords.extractor import STOP_WORDS
from resume_analyzer.models import Severity, SubScore
from resume_analyzer.scoring.base import Scorer, ScoringContext, first_line_of, word_pattern
from resume_analyzer.vocabulary import (
    BUZZWORDS, FILLER_WORDS, FIRST_PERSON, INFORMAL_WORDS, MISSPELLINGS,
    TECHNICAL_SKILLS, VAGUE_TERMS
)

logger = logging.getLogger(__name__)

_sentence_tokenizer = PunktSentenceTokenizer()


def split_sentences(lines: List[str]) -> List[str]:
    """Sentences from every non-empty line; resume lines rarely end with a period"""
    sentences = []
    for line in lines:
        if line.strip():
            sentences.extend(s for s in _sentence_tokenizer.tokenize(line) if s.strip())
    return sentences


class GrammarScorer(Scorer):
    """
    Heuristic grammar checks, each costing a fixed number of points
    """

    name = "grammar"
    category = "grammar"

    PASSIVE = re.compile(
        r"\b(?:am|is|are|was|were|be|been|being)\s+(?:\w+ly\s+)?\w+(?:ed|en)\b",
        re.IGNORECASE
    )

    PRONOUN_LIMIT = 3
    PASSIVE_LIMIT = 5
    FILLER_LIMIT = 3
    LONG_SENTENCE_WORDS = 35
    LONG_SENTENCE_LIMIT = 2
    VARIANCE_LIMIT = 15.0
    REPEAT_LIMIT = 8

    def score(self, context: ScoringContext) -> SubScore:
        text = context.text
        words = [w.lower() for w in context.words]
        counts = Counter(words)
        issues = []
        value = 100

        # 1. First-person pronouns
        pronouns = sum(counts[w] for w in FIRST_PERSON)
        if pronouns > self.PRONOUN_LIMIT:
            value -= 10
            issues.append(self._issue(
                Severity.MEDIUM,
                f"First-person pronouns used {pronouns} times",
                "Drop 'I', 'me' and 'my'; start statements with the action instead",
                impact=10,
                line_number=first_line_of(text, re.compile(r'\b(?:I|me|my|we|our)\b'))
            ))

        # 2. Passive voice
        passive = self.PASSIVE.findall(text)
        if len(passive) > self.PASSIVE_LIMIT:
            value -= 10
            issues.append(self._issue(
                Severity.MEDIUM,
                f"Passive voice used {len(passive)} times",
                "Rewrite passive phrases ('was responsible for') in active voice ('Led', 'Built')",
                impact=10,
                line_number=first_line_of(text, self.PASSIVE)
            ))

        # 3. Filler words
        fillers = sum(counts[w] for w in FILLER_WORDS)
        if fillers > self.FILLER_LIMIT:
            value -= 8
            issues.append(self._issue(
                Severity.LOW,
                f"Filler words ('very', 'really', 'just') used {fillers} times",
                "Remove filler words so each statement is concise",
                impact=8
            ))

        # 4. Sentence length
        sentences = split_sentences(context.body_lines())
        lengths = [len(s.split()) for s in sentences]
        long_sentences = [n for n in lengths if n > self.LONG_SENTENCE_WORDS]
        if len(long_sentences) > self.LONG_SENTENCE_LIMIT:
            value -= 8
            issues.append(self._issue(
                Severity.MEDIUM,
                f"{len(long_sentences)} sentences are longer than {self.LONG_SENTENCE_WORDS} words",
                "Break long sentences into short bullet points",
                impact=8
            ))

        if len(lengths) >= 5 and statistics.pstdev(lengths) > self.VARIANCE_LIMIT:
            value -= 5
            issues.append(self._issue(
                Severity.LOW,
                "Sentence length varies widely",
                "Keep statements a similar, readable length (10-25 words)",
                impact=5
            ))

        # 5. Misspellings
        misspelled = sorted(w for w in counts if w in MISSPELLINGS)
        if misspelled:
            penalty = min(5 * len(misspelled), 15)
            value -= penalty
            corrections = ', '.join(f"{w} -> {MISSPELLINGS[w]}" for w in misspelled[:5])
            issues.append(self._issue(
                Severity.HIGH,
                f"Possible misspellings: {corrections}",
                "Proofread the resume and fix spelling errors",
                impact=penalty,
                line_number=first_line_of(text, word_pattern(misspelled[0]))
            ))

        # 6. Repetition
        repeated = sorted(
            w for w, c in counts.items()
            if c > self.REPEAT_LIMIT and len(w) > 3
            and w not in STOP_WORDS and w not in TECHNICAL_SKILLS
        )
        if repeated:
            value -= 5
            issues.append(self._issue(
                Severity.LOW,
                f"Repetitive wording: {', '.join(repeated[:5])}",
                "Vary word choice with synonyms",
                impact=5
            ))

        logger.debug(f"Grammar score {value} with {len(issues)} issues")
        return self._result(value, issues)


class LanguageToneScorer(Scorer):
    """
    Professional tone: informal words, buzzwords, vague terms, shouting
    """

    name = "language_tone"
    category = "language"

    BUZZWORD_LIMIT = 3
    VAGUE_LIMIT = 2
    CAPS_RATIO_LIMIT = 0.3

    def score(self, context: ScoringContext) -> SubScore:
        text = context.text
        lower = text.lower()
        counts = Counter(w.lower() for w in context.words)
        issues = []
        value = 100

        # 1. Informal words
        informal = sorted(w for w in counts if w in INFORMAL_WORDS)
        if informal:
            penalty = min(5 * len(informal), 20)
            value -= penalty
            issues.append(self._issue(
                Severity.MEDIUM,
                f"Informal language: {', '.join(informal[:5])}",
                "Replace casual words with precise professional terms",
                impact=penalty,
                line_number=first_line_of(text, word_pattern(informal[0]))
            ))

        # 2. Buzzwords
        buzzwords = [b for b in BUZZWORDS if word_pattern(b).search(lower)]
        buzz_count = sum(len(word_pattern(b).findall(lower)) for b in buzzwords)
        if buzz_count > self.BUZZWORD_LIMIT:
            value -= 10
            issues.append(self._issue(
                Severity.MEDIUM,
                f"Overused buzzwords: {', '.join(buzzwords[:5])}",
                "Show these qualities with concrete achievements instead of labels",
                impact=10
            ))

        # 3. Vague terms
        vague = sum(counts[w] for w in VAGUE_TERMS)
        if vague > self.VAGUE_LIMIT:
            value -= 8
            issues.append(self._issue(
                Severity.LOW,
                f"Vague quantifiers used {vague} times ('various', 'several', 'many')",
                "Replace vague quantifiers with specific numbers",
                impact=8
            ))

        # 4. Exclamation marks
        if '!' in text:
            value -= 5
            issues.append(self._issue(
                Severity.LOW,
                "Exclamation marks found",
                "Keep punctuation neutral and professional",
                impact=5,
                line_number=first_line_of(text, re.compile('!'))
            ))

        # 5. Shouting outside headings
        body_words = [w for line in context.body_lines() for w in line.split() if w.isalpha()]
        caps = [w for w in body_words if len(w) > 1 and w.isupper()]
        if body_words and len(caps) / len(body_words) > self.CAPS_RATIO_LIMIT:
            value -= 10
            issues.append(self._issue(
                Severity.MEDIUM,
                "Large parts of the text are in ALL CAPS",
                "Use sentence case for body text; reserve capitals for headings and acronyms",
                impact=10
            ))

        return self._result(value, issues)
