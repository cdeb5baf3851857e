"""
Keyword tokenization utilities.

Turns free text into a keyword -> count mapping:
1. Lowercase
2. Compound acronym capture ("ci/cd", "tcp/ip") before word splitting
3. Tokenization (alphanumeric runs with internal hyphens)
4. Stopword removal (closed list from vocabulary.yaml)
5. Acronym normalization to canonical long forms

Usage:
    from atscribe.utils.token_processing import KeywordExtractor

    extractor = KeywordExtractor()
    extractor.count("Experienced in AWS and K8s")
    # {'experienced': 1, 'amazon web services': 1, 'kubernetes': 1}
"""

import re
from collections import Counter
from typing import Dict, Iterable, List, Optional

from atscribe.utils.vocabulary import Vocabulary, load_vocabulary

# Alphanumeric runs joined by single internal hyphens ("full-stack", "x86-64")
WORD_PATTERN = re.compile(r"\b[a-z0-9]+(?:-[a-z0-9]+)*\b")


def _compile_compound_patterns(compounds: Iterable[str]) -> List[tuple[re.Pattern, str]]:
    """Compile whole-word patterns for slash acronyms, longest first."""
    return [
        (re.compile(r"(?<![a-z0-9/])" + re.escape(compound) + r"(?![a-z0-9/])"), compound)
        for compound in sorted(compounds, key=len, reverse=True)
    ]


class KeywordExtractor:
    """
    Frequency-based keyword extractor with acronym normalization.

    Holds only read-only state after construction, so one instance can be
    shared by concurrent callers. The extractor is callable and returns the
    normalized token list, mirroring tokenizer-style APIs.
    """

    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        """
        Initialize extractor.

        Args:
            vocabulary: Stopwords and acronym table. Defaults to the bundled
                        vocabulary, loaded once per process
        """
        self.vocabulary = vocabulary if vocabulary is not None else load_vocabulary()
        self._compound_patterns = _compile_compound_patterns(self.vocabulary.compound_acronyms)

    def normalize(self, keyword: str) -> str:
        """
        Map a keyword to its canonical form.

        Lookup is case-insensitive; unknown keywords are returned lowercased.

        Example:
            >>> KeywordExtractor().normalize("K8s")
            'kubernetes'
        """
        folded = keyword.lower()
        return self.vocabulary.acronyms.get(folded, folded)

    def is_stopword(self, token: str) -> bool:
        return token in self.vocabulary.stopwords

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into normalized keywords, in order of appearance.

        Args:
            text: Arbitrary free text

        Returns:
            Normalized keywords with stopwords removed
        """
        folded = text.lower()
        tokens: List[tuple[int, str]] = []

        # Slash acronyms would otherwise be split into meaningless halves
        for pattern, compound in self._compound_patterns:
            for match in pattern.finditer(folded):
                tokens.append((match.start(), self.normalize(compound)))
            folded = pattern.sub(lambda m: " " * len(m.group(0)), folded)

        for match in WORD_PATTERN.finditer(folded):
            word = match.group(0)
            if not self.is_stopword(word):
                tokens.append((match.start(), self.normalize(word)))

        return [token for _, token in sorted(tokens, key=lambda item: item[0])]

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def count(self, text: str) -> Dict[str, int]:
        """
        Count normalized keywords in text.

        Args:
            text: Arbitrary free text

        Returns:
            Dict mapping normalized keyword -> occurrence count
        """
        return dict(Counter(self.tokenize(text)))

    def count_with_importance(self, text: str, phrases: Iterable[str]) -> Dict[str, int]:
        """
        Count keywords and boost known phrases (used for job descriptions).

        Every phrase found as a case-insensitive substring of the text is
        recorded under its normalized form with weight occurrences + 1, so
        industry terms count as important even when mentioned once. Phrase
        weights replace plain token counts for the same keyword.

        Args:
            text: Job description text
            phrases: Industry keywords/phrases (may contain spaces, e.g. "rest api")

        Returns:
            Dict mapping normalized keyword -> importance weight
        """
        keywords = self.count(text)
        folded = text.lower()

        boosted: Dict[str, int] = {}
        for phrase in sorted({phrase for phrase in phrases if phrase}):
            occurrences = folded.count(phrase.lower())
            if occurrences > 0:
                key = self.normalize(phrase)
                boosted[key] = max(boosted.get(key, 0), occurrences + 1)

        keywords.update(boosted)
        return keywords
