"""Cleaning of the scraped recipe columns.

The scrape stores several numeric fields as display strings:

* ``readyin`` is a duration such as ``"1 d 2 h 30 m"``
* ``madeit`` and ``photos`` are counts that may be abbreviated (``"1.2K"``)
* ``year`` is the Hall of Fame list label, normally a four digit year

Nutrition fields (calories, fat, carbohydrate, protein) are numeric but may
be missing and are filled with the column median.
"""

import logging
import re
from typing import Any, List

import pandas as pd


logger = logging.getLogger(__name__)

BIRTHDAY_LIST_LABEL = "20th-birthday-hall-of-fame"
BIRTHDAY_LIST_YEAR = 2017
FIRST_YEAR = 1997
LAST_YEAR = 2017

# Minutes per duration marker, in the order they appear in the string
DURATION_UNITS = (("d", 24 * 60), ("h", 60), ("m", 1))

_DURATION_SEGMENT = re.compile(r"(\d+(?:\.\d+)?)\s*([dhm])\b")


def parse_duration(text: Any) -> int:
    """Convert a ``"<N> d <N> h <N> m"`` duration string to minutes.

    Any segment may be absent and contributes nothing. Missing values and
    strings without markers are 0 minutes.
    """
    if isinstance(text, (int, float)) and not pd.isna(text):
        return int(round(text))
    if not isinstance(text, str):
        return 0

    segments = {unit: float(value) for value, unit in _DURATION_SEGMENT.findall(text)}
    total = sum(segments.get(unit, 0) * minutes for unit, minutes in DURATION_UNITS)
    return int(round(total))


def parse_count(text: Any) -> float:
    """Convert a count such as ``"500"`` or ``"1.2K"`` to a number."""
    if not isinstance(text, str):
        return text

    text = text.strip()
    if "K" in text:
        value = float(text.replace("K", "")) * 1000
    else:
        value = float(text)

    # Keep whole counts as ints so "1.2K" reads back as 1200
    rounded = round(value)
    return int(rounded) if abs(value - rounded) < 1e-9 else value


def normalize_year(label: Any) -> int:
    """Map a Hall of Fame list label to its year."""
    if isinstance(label, str) and label.strip() == BIRTHDAY_LIST_LABEL:
        return BIRTHDAY_LIST_YEAR

    try:
        year = int(str(label).strip())
    except ValueError:
        raise ValueError(f"Unrecognized Hall of Fame year label: {label!r}")

    if not FIRST_YEAR <= year <= LAST_YEAR:
        raise ValueError(f"Year {year} outside {FIRST_YEAR}-{LAST_YEAR}")
    return year


def impute_median(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """Fill missing values in each column with that column's median."""
    df = df.copy()
    medians = {column: df[column].median() for column in columns}

    for column, median in medians.items():
        missing = int(df[column].isna().sum())
        if missing:
            logger.info(f"Imputing {missing} missing '{column}' values with median {median:.2f}")
        df[column] = df[column].fillna(median)

    return df


def clean_recipes(df: pd.DataFrame, nutrition_columns: List[str]) -> pd.DataFrame:
    """Impute nutrition fields and normalize the duration, count and year columns."""
    logger.info("Cleaning recipe dataset...")

    df = impute_median(df, nutrition_columns)

    df["readyin"] = df["readyin"].apply(parse_duration).astype(int)
    for column in ("madeit", "photos"):
        df[column] = pd.to_numeric(df[column].apply(parse_count))
    df["year"] = df["year"].apply(normalize_year).astype(int)

    logger.info(
        f"Cleaned {len(df):,} recipes spanning {df['year'].min()}-{df['year'].max()}"
    )
    return df
