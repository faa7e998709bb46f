"""Example usage of the crop statistics service."""

import logging
import pandas as pd
from cropstats.application.services.crop_stats_service import CropStatsService
from cropstats.domain.entities.preference_set import PreferenceSet
from cropstats.domain.entities.season import Season
from cropstats.domain.entities.value_option import ValueOption
from cropstats.infrastructure.repositories.text_crop_repository import TextCropRepository
from cropstats.config.settings import CROP_DATA_FILE, EXPORT_DIR

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    # Example 1: Spring crops, verbose
    print("=" * 60)
    print("Example 1: Spring profit per crop and per season")
    print("=" * 60)
    preferences = PreferenceSet(
        values=frozenset({ValueOption.PROFIT, ValueOption.SEASON}),
        seasons=frozenset({Season.SPRING}),
    )
    with open(CROP_DATA_FILE, "r", encoding="utf-8") as fh:
        CropStatsService(TextCropRepository(fh), preferences).run()

    # Example 2: Best summer crop per plot, exported to CSV
    print("=" * 60)
    print("Example 2: Summer season profit over a 100-slot plot")
    print("=" * 60)
    preferences = PreferenceSet(
        values=frozenset({ValueOption.SEASON_PER_PLOT}),
        seasons=frozenset({Season.SUMMER}),
        plot_size=100,
        clean_output=True,
    )
    export_path = EXPORT_DIR / "summer_plot.csv"
    with open(CROP_DATA_FILE, "r", encoding="utf-8") as fh:
        CropStatsService(TextCropRepository(fh), preferences).run(export_path=export_path)

    df = pd.read_csv(export_path)
    best = df.loc[df["season_p"].idxmax()]
    print(f"\nBest: {best['name']} ({best['season_p']} per season)")
    logger.info(f"Exported to {export_path}")


if __name__ == "__main__":
    main()
