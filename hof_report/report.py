"""End-to-end Hall of Fame recipe report."""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

from hof_report.cleaning import clean_recipes
from hof_report.config import Config
from hof_report.loading import load_recipes
from hof_report.plots import plot_correlation_heatmap, plot_word_cloud, plot_yearly_lines
from hof_report.stats import (
    completeness_summary,
    correlation_matrix,
    describe_numeric,
    print_completeness,
    print_descriptive_stats,
    print_top_words,
    print_yearly_trends,
    yearly_means,
    yearly_trends,
)
from hof_report.text import term_frequencies
from hof_report.utils import format_time, save_json


logger = logging.getLogger(__name__)


def run_report(
    data_path: Union[str, Path],
    output_dir: Union[str, Path],
    cfg: Optional[Config] = None,
) -> Dict[str, Any]:
    """Load, clean and analyse the dataset, writing charts and a JSON summary.

    Args:
        data_path: Path to the scraped recipe CSV.
        output_dir: Directory receiving charts, the cleaned CSV and the summary.
        cfg: Report configuration; defaults to ``config.yaml`` in the project root.

    Returns:
        Summary dict with completeness counts, written files and top words.
    """
    cfg = cfg or Config()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    dpi = cfg.plot_dpi
    t0 = time.time()

    # Load and validate
    raw = load_recipes(data_path)
    completeness = completeness_summary(raw)
    print_completeness(completeness)

    # Clean
    df = clean_recipes(raw, cfg.nutrition_columns)
    clean_path = output_dir / "recipes_clean.csv"
    df.to_csv(clean_path, index=False)
    logger.info(f"Saved cleaned dataset to {clean_path}")

    # Descriptive statistics and correlation
    numeric_columns = [c for c in cfg.correlation_columns if c in df.columns]
    print_descriptive_stats(describe_numeric(df, numeric_columns))

    outputs = {"clean_csv": clean_path}
    outputs["correlation"] = plot_correlation_heatmap(
        correlation_matrix(df, numeric_columns),
        output_dir / "correlation_matrix.png",
        dpi=dpi,
    )

    # Per-year aggregation
    yearly = yearly_means(df, cfg.yearly_columns)
    trends = yearly_trends(yearly)
    print_yearly_trends(trends)

    macronutrients = [c for c in ("fat", "carbohydrate", "protein") if c in yearly.columns]
    outputs["yearly_calories"] = plot_yearly_lines(
        yearly, ["calories"], "Average calories per serving by year",
        "Calories", output_dir / "yearly_calories.png", dpi=dpi,
    )
    outputs["yearly_macronutrients"] = plot_yearly_lines(
        yearly, macronutrients, "Average macronutrients per serving by year",
        "Grams", output_dir / "yearly_macronutrients.png", dpi=dpi,
    )
    outputs["yearly_servings"] = plot_yearly_lines(
        yearly, ["servings"], "Average servings by year",
        "Servings", output_dir / "yearly_servings.png", dpi=dpi,
    )

    # Text frequency analysis
    title_words = term_frequencies(
        df["title"], strip_numerals=True, min_frequency=cfg.min_title_frequency
    )
    description_words = term_frequencies(
        df["submitter_description"], strip_numerals=False,
        min_frequency=cfg.min_description_frequency,
    )
    print_top_words(title_words, "Title", cfg.top_words)
    print_top_words(description_words, "Description", cfg.top_words)

    if title_words.empty:
        logger.warning("Skipping title word cloud: no words above the frequency threshold")
    else:
        outputs["title_wordcloud"] = plot_word_cloud(
            title_words, "Hall of Fame recipe titles",
            output_dir / "title_wordcloud.png", max_words=cfg.max_words, dpi=dpi,
        )

    if description_words.empty:
        logger.warning("Skipping description word cloud: no words above the frequency threshold")
    else:
        outputs["description_wordcloud"] = plot_word_cloud(
            description_words, "Submitter descriptions",
            output_dir / "description_wordcloud.png", max_words=cfg.max_words, dpi=dpi,
        )

    summary = {
        "data_path": str(data_path),
        "completeness": completeness,
        "yearly_trends": trends.to_dict(orient="index"),
        "top_title_words": title_words.head(cfg.top_words).to_dict(),
        "top_description_words": description_words.head(cfg.top_words).to_dict(),
        "outputs": {name: str(path) for name, path in outputs.items()},
    }
    summary_path = output_dir / "report_summary.json"
    save_json(summary, summary_path)

    logger.info(f"Report finished in {format_time(time.time() - t0)}; outputs in {output_dir}")
    return summary
