"""Bag-of-words frequency analysis of recipe titles and descriptions."""

import logging
import re
from typing import Iterable, List

import numpy as np
import pandas as pd
from sklearn.feature_extraction.text import CountVectorizer


logger = logging.getLogger(__name__)

# Series numbering on repeated titles, e.g. "Alfredo Sauce IV"
_ROMAN_SUFFIX = re.compile(r"\s*\b[IVX]+$")


def strip_roman_suffix(text: str) -> str:
    """Remove a trailing roman numeral token from a title."""
    return _ROMAN_SUFFIX.sub("", text.rstrip())


def _build_vectorizer(strip_numerals: bool = True) -> CountVectorizer:
    return CountVectorizer(
        lowercase=True,
        stop_words="english",
        preprocessor=(lambda text: strip_roman_suffix(text).lower()) if strip_numerals else None,
    )


def tokenize(text: str, strip_numerals: bool = True) -> List[str]:
    """Lowercased tokens of ``text`` with English stopwords removed."""
    analyzer = _build_vectorizer(strip_numerals).build_analyzer()
    return analyzer(text)


def term_frequencies(
    texts: Iterable,
    strip_numerals: bool = True,
    min_frequency: int = 0,
) -> pd.Series:
    """Count tokens across a corpus.

    Returns a Series indexed by token, sorted by descending count, holding
    only tokens that occur more than ``min_frequency`` times.
    """
    corpus = [text for text in texts if isinstance(text, str) and text.strip()]
    if not corpus:
        return pd.Series(dtype=int)

    vectorizer = _build_vectorizer(strip_numerals)
    try:
        matrix = vectorizer.fit_transform(corpus)
    except ValueError:
        # Corpus contained nothing but stopwords
        logger.warning("No tokens left after stopword removal")
        return pd.Series(dtype=int)

    counts = pd.Series(
        np.asarray(matrix.sum(axis=0)).ravel(),
        index=vectorizer.get_feature_names_out(),
    )
    counts = counts[counts > min_frequency]
    # Ties broken alphabetically so output is stable between runs
    counts = counts.sort_index().sort_values(ascending=False, kind="stable")

    logger.info(
        f"Counted {len(vectorizer.vocabulary_)} distinct tokens across {len(corpus)} texts; "
        f"{len(counts)} above frequency {min_frequency}"
    )
    return counts.astype(int)
