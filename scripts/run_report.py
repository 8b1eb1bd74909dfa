#!/usr/bin/env python3
"""
Hall of Fame report runner.

Loads the scraped recipe CSV, cleans it and writes the correlation heatmap,
yearly trend charts, word clouds and a JSON summary.

Usage:
    python scripts/run_report.py
    python scripts/run_report.py --data data/hall_of_fame_recipes.csv --output-dir outputs
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hof_report.config import Config
from hof_report.report import run_report
from hof_report.utils import setup_logging


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Hall of Fame recipe report")
    parser.add_argument("--config", default=None,
                        help="Path to config YAML (default: config.yaml in project root)")
    parser.add_argument("--data", default=None,
                        help="Path to input CSV (default: from config)")
    parser.add_argument("--output-dir", default=None,
                        help="Output directory (default: from config)")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (default: from config)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main report function."""
    args = _parse_args(argv)
    cfg = Config(args.config)
    setup_logging(args.log_level or cfg.log_level, cfg.logs_dir)

    data_path = Path(args.data) if args.data else cfg.dataset_path
    output_dir = Path(args.output_dir) if args.output_dir else cfg.outputs_dir

    print("🏆 HALL OF FAME RECIPE REPORT")
    print("=" * 45)
    print(f"📁 Analyzing: {data_path}")
    print()

    try:
        summary = run_report(data_path, output_dir, cfg)
    except Exception as e:
        logging.exception(f"Report failed: {e}")
        return 1

    print(f"\n✅ Report complete!")
    for name, path in summary["outputs"].items():
        print(f"   🖼️  {name:<25} {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
