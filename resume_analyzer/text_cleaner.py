# resume_analyzer/text_cleaner.py
import re
import logging
import ftfy

logger = logging.getLogger(__name__)


class TextCleaner:
    """Repair extraction artifacts while keeping the resume layout intact"""

    ZERO_WIDTH = re.compile('[\u200b\u200c\u200d\u2060\ufeff]')
    CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
    LINE_BREAKS = re.compile(r'\r\n?')

    def __init__(self, unicode_norm: str = "NFC"):
        """
        Args:
            unicode_norm: Unicode normalization form passed to ftfy
        """
        self.unicode_norm = unicode_norm

    def clean(self, text: str) -> str:
        """
        Fix broken unicode and stray control characters

        Whitespace inside lines is preserved because formatting and ATS
        checks inspect spacing.

        Args:
            text: Text produced by the extractor

        Returns:
            Cleaned text (may be empty)
        """
        if not text:
            return ""

        text = ftfy.fix_text(text, normalization=self.unicode_norm)
        text = self.LINE_BREAKS.sub('\n', text)
        text = self.ZERO_WIDTH.sub('', text)
        text = self.CONTROL_CHARS.sub('', text)

        return text

    @staticmethod
    def is_blank(text: str) -> bool:
        return not text or not text.strip()
