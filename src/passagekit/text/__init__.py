"""Text primitives shared by the builder and the scorers."""

from .lexical import lexical_diversity, round_half_up, split_words
from .sentences import SentenceSplitter, Sentences, split_sentences

__all__ = [
    "SentenceSplitter",
    "Sentences",
    "lexical_diversity",
    "round_half_up",
    "split_sentences",
    "split_words",
]
