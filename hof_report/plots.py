"""Rendering of the report charts to PNG files."""

import logging
from pathlib import Path
from typing import List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from wordcloud import WordCloud


logger = logging.getLogger(__name__)


def plot_correlation_heatmap(corr: pd.DataFrame, path: Path, dpi: int = 150) -> Path:
    """Annotated heatmap of a correlation matrix."""
    plt.figure(figsize=(10, 8))
    sns.heatmap(
        corr,
        annot=True,
        fmt=".2f",
        cmap="coolwarm",
        center=0,
        vmin=-1,
        vmax=1,
        square=True,
        linewidths=0.5,
    )
    plt.title("Correlation of recipe attributes")
    plt.tight_layout()
    plt.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close()

    logger.info(f"Saved correlation heatmap to {path}")
    return path


def plot_yearly_lines(
    yearly: pd.DataFrame,
    columns: List[str],
    title: str,
    ylabel: str,
    path: Path,
    dpi: int = 150,
) -> Path:
    """Line chart of yearly means, one line per column."""
    plt.figure(figsize=(10, 5))
    for column in columns:
        plt.plot(yearly.index, yearly[column], marker="o", label=column)

    plt.xticks(yearly.index, rotation=45, ha="right")
    plt.xlabel("Hall of Fame year")
    plt.ylabel(ylabel)
    plt.title(title)
    if len(columns) > 1:
        plt.legend()
    plt.grid(alpha=0.3)
    plt.tight_layout()
    plt.savefig(path, dpi=dpi)
    plt.close()

    logger.info(f"Saved yearly chart to {path}")
    return path


def plot_word_cloud(
    frequencies: pd.Series,
    title: str,
    path: Path,
    max_words: int = 200,
    dpi: int = 150,
) -> Path:
    """Word cloud sized by term frequency."""
    if frequencies.empty:
        raise ValueError(f"No words to render for '{title}'")

    cloud = WordCloud(
        width=1200,
        height=600,
        background_color="white",
        max_words=max_words,
        random_state=42,
    ).generate_from_frequencies(frequencies.to_dict())

    plt.figure(figsize=(12, 6))
    plt.imshow(cloud, interpolation="bilinear")
    plt.axis("off")
    plt.title(title)
    plt.tight_layout()
    plt.savefig(path, dpi=dpi)
    plt.close()

    logger.info(f"Saved word cloud to {path}")
    return path
