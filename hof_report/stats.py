"""Descriptive statistics and console summaries for the recipe report."""

import logging
import warnings
from typing import Any, Dict, List

import numpy as np
import pandas as pd
from scipy.stats import pearsonr


logger = logging.getLogger(__name__)


def completeness_summary(df: pd.DataFrame) -> Dict[str, Any]:
    """Count years, titles, duplicate titles and missing values."""
    distinct_titles = int(df["title"].nunique())
    return {
        "total_recipes": len(df),
        "distinct_years": int(df["year"].nunique()),
        "distinct_titles": distinct_titles,
        "duplicate_titles": len(df) - distinct_titles,
        "missing_by_column": {column: int(count) for column, count in df.isna().sum().items()},
    }


def describe_numeric(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """Standard descriptive statistics for the given numeric columns."""
    return df[columns].describe().T


def correlation_matrix(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """Pearson correlation matrix over the given columns."""
    return df[columns].corr(method="pearson")


def yearly_means(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """Average of each column per Hall of Fame year."""
    return df.groupby("year")[columns].mean().sort_index()


def yearly_trends(yearly: pd.DataFrame) -> pd.DataFrame:
    """Pearson r and p-value of each yearly mean against the year."""
    years = np.asarray(yearly.index, dtype=float)
    rows = []

    for column in yearly.columns:
        values = yearly[column].to_numpy(dtype=float)
        r, p = np.nan, np.nan
        if len(values) >= 3 and np.nanstd(values) > 0:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore")
                r, p = pearsonr(years, values)
        rows.append({"column": column, "r": float(r), "p_value": float(p)})

    return pd.DataFrame(rows).set_index("column")


def print_completeness(summary: Dict[str, Any]) -> None:
    """Print dataset completeness counts."""
    print("📊 DATASET COMPLETENESS")
    print("=" * 30)
    print(f"Total recipes: {summary['total_recipes']:,}")
    print(f"Distinct years: {summary['distinct_years']}")
    print(f"Distinct titles: {summary['distinct_titles']:,}")
    print(f"Duplicate titles: {summary['duplicate_titles']:,}")

    missing = {col: n for col, n in summary["missing_by_column"].items() if n > 0}
    print(f"\n❓ Missing Values:")
    if not missing:
        print("   None")
    for column, count in missing.items():
        percentage = (count / summary["total_recipes"]) * 100 if summary["total_recipes"] else 0.0
        print(f"   {column:<25} {count:5d} ({percentage:4.1f}%)")


def print_descriptive_stats(described: pd.DataFrame) -> None:
    print(f"\n📈 DESCRIPTIVE STATISTICS")
    print("=" * 30)
    print(described.round(2).to_string())


def print_yearly_trends(trends: pd.DataFrame) -> None:
    """Print the direction of each yearly trend."""
    print(f"\n📅 YEARLY TRENDS (1997-2017)")
    print("=" * 30)
    for column, row in trends.iterrows():
        if np.isnan(row["r"]):
            print(f"   {column:<15} not enough data")
            continue
        direction = "⬆️ rising" if row["r"] > 0 else "⬇️ falling"
        print(f"   {column:<15} r={row['r']:+.2f} (p={row['p_value']:.3f}) {direction}")


def print_top_words(frequencies: pd.Series, label: str, count: int = 15) -> None:
    """Print the most frequent tokens of a corpus."""
    print(f"\n🔤 Most Common {label} Words:")
    total = frequencies.sum()
    for i, (word, n) in enumerate(frequencies.head(count).items(), 1):
        percentage = (n / total) * 100 if total else 0.0
        print(f"   {i:2d}. {word:<15} {n:4d} uses ({percentage:4.1f}%)")
