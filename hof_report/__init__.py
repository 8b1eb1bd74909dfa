"""Exploratory report over the Allrecipes Hall of Fame recipe dataset."""

__version__ = "0.1.0"
