#!/usr/bin/env python3
"""
Recipe Statistics

Prints console statistics for the Hall of Fame dataset without rendering
any charts.

Usage:
    python scripts/recipe_stats.py [--data path/to/recipes.csv]
"""

import argparse
import sys
from pathlib import Path

import pandas as pd

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hof_report.cleaning import clean_recipes
from hof_report.config import Config
from hof_report.loading import load_recipes
from hof_report.stats import (
    completeness_summary,
    print_completeness,
    print_top_words,
    yearly_means,
)
from hof_report.text import term_frequencies


def analyze_popularity(df: pd.DataFrame) -> None:
    """Summarize the made-it and photo counts."""
    print(f"\n⭐ POPULARITY")
    print("=" * 20)

    for column, label in (("madeit", "Made it"), ("photos", "Photos")):
        print(f"{label}:")
        print(f"   Mean: {df[column].mean():,.0f}")
        print(f"   Median: {df[column].median():,.0f}")
        print(f"   Max: {df[column].max():,.0f}")

    print(f"\n🔝 Top 5 Most Made Recipes:")
    top = df.nlargest(5, "madeit")
    for i, (_, recipe) in enumerate(top.iterrows(), 1):
        print(f"   {i}. {recipe['title']:<35} {recipe['madeit']:>8,.0f} ({recipe['year']})")


def analyze_ready_time(df: pd.DataFrame) -> None:
    """Summarize the total preparation time in minutes."""
    print(f"\n⏱️ READY-IN TIME")
    print("=" * 20)
    minutes = df["readyin"]
    print(f"   Mean: {minutes.mean():.0f} minutes")
    print(f"   Median: {minutes.median():.0f} minutes")
    print(f"   Min: {minutes.min()} minutes")
    print(f"   Max: {minutes.max()} minutes")

    quick = (minutes <= 30).sum()
    print(f"   Ready in 30 minutes or less: {quick:,} ({quick / len(df) * 100:.1f}%)")


def analyze_years(df: pd.DataFrame, columns) -> None:
    """Print per-year recipe counts and average nutrition."""
    print(f"\n📅 BY YEAR")
    print("=" * 20)
    yearly = yearly_means(df, columns)
    yearly.insert(0, "recipes", df.groupby("year").size())
    print(yearly.round(1).to_string())


def main(argv=None) -> int:
    """Main statistics function."""
    parser = argparse.ArgumentParser(description="Hall of Fame recipe statistics")
    parser.add_argument("--config", default=None, help="Path to config YAML")
    parser.add_argument("--data", default=None, help="Path to input CSV")
    args = parser.parse_args(argv)

    cfg = Config(args.config)
    recipes_path = Path(args.data) if args.data else cfg.dataset_path

    if not recipes_path.exists():
        print("❌ Recipe file not found!")
        print(f"Expected dataset at {recipes_path}")
        return 1

    raw = load_recipes(recipes_path)

    print("📈 HALL OF FAME RECIPE STATISTICS")
    print("=" * 45)
    print(f"📁 Analyzing: {recipes_path}")
    print(f"📊 Dataset size: {len(raw):,} recipes")
    print()

    print_completeness(completeness_summary(raw))
    df = clean_recipes(raw, cfg.nutrition_columns)

    analyze_popularity(df)
    analyze_ready_time(df)
    analyze_years(df, cfg.yearly_columns)

    print_top_words(term_frequencies(df["title"]), "Title", cfg.top_words)
    print_top_words(
        term_frequencies(df["submitter_description"], strip_numerals=False),
        "Description",
        cfg.top_words,
    )

    print(f"\n✅ Statistical analysis complete!")
    print(f"💡 Use scripts/run_report.py to render the charts")
    return 0


if __name__ == "__main__":
    sys.exit(main())
