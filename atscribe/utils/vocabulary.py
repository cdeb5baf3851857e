"""
Keyword vocabulary tables.

Stopwords and the technical acronym table are process-wide lookup data. They
are loaded once from vocabulary.yaml and handed out as a frozen value, so the
same instance can be shared by every extractor without copying or locking.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional

from omegaconf import OmegaConf

VOCABULARY_PATH = Path(__file__).parent / "vocabulary.yaml"


@dataclass(frozen=True)
class Vocabulary:
    """
    Immutable keyword vocabulary.

    Attributes:
        stopwords: Lowercase tokens dropped during tokenization
        acronyms: Lowercase acronym -> lowercase canonical long form
    """

    stopwords: FrozenSet[str] = frozenset()
    acronyms: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def compound_acronyms(self) -> FrozenSet[str]:
        """Acronyms spelled with a slash (e.g. 'ci/cd'), which the word tokenizer would split."""
        return frozenset(key for key in self.acronyms if "/" in key)


def build_vocabulary(stopwords, acronyms: Mapping[str, str]) -> Vocabulary:
    """
    Build a Vocabulary from raw tables, case-folding keys and canonical forms.

    Args:
        stopwords: Iterable of stopwords
        acronyms: Mapping of acronym -> long form, any casing

    Returns:
        Frozen Vocabulary
    """
    folded = {str(key).lower(): str(value).lower() for key, value in acronyms.items()}
    return Vocabulary(
        stopwords=frozenset(str(word).lower() for word in stopwords),
        acronyms=MappingProxyType(folded),
    )


@lru_cache(maxsize=None)
def load_vocabulary(path: Optional[Path] = None) -> Vocabulary:
    """
    Load the vocabulary YAML file (cached, so each path is read once per process).

    Args:
        path: YAML file with 'stopwords' and 'acronyms' keys. Defaults to the
              bundled vocabulary.yaml

    Returns:
        Frozen Vocabulary shared by all callers
    """
    config = OmegaConf.load(path or VOCABULARY_PATH)
    data = OmegaConf.to_container(config, resolve=True)

    return build_vocabulary(data.get("stopwords") or [], data.get("acronyms") or {})
