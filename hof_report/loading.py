"""Loading of the scraped Hall of Fame CSV."""

import logging
from pathlib import Path
from typing import Union

import pandas as pd


logger = logging.getLogger(__name__)


def load_recipes(path: Union[str, Path]) -> pd.DataFrame:
    """Load the recipe CSV, dropping the leading row-index column."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Recipe dataset not found: {path}")

    df = pd.read_csv(path)
    # The scrape was saved with its pandas index as the first column
    df = df.drop(columns=df.columns[0])

    logger.info(f"Loaded {len(df):,} recipes with {len(df.columns)} columns from {path}")
    return df
