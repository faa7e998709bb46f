"""Use case for formatting crop statistics."""

from typing import List, Sequence
from ..entities.crop_metrics import CropMetrics
from ..entities.crop_record import CropRecord
from ..entities.value_option import ValueOption
from ...config.settings import OUTPUT_SETTINGS

GROWING_KEY = "growing"


class FormatCropStatsUseCase:
    """Use case to render a record's metrics as verbose or clean text lines."""

    def __init__(
        self,
        clean_output: bool = False,
        currency: str = OUTPUT_SETTINGS["currency"],
        value_width: int = OUTPUT_SETTINGS["value_width"],
    ):
        """
        Initialize use case.

        Args:
            clean_output: Tab-separated output instead of the labelled layout
            currency: Glyph printed before money values in verbose mode
            value_width: Right-aligned width of numbers in verbose mode
        """
        self.clean_output = clean_output
        self.currency = currency
        self.value_width = value_width

    def format_value(self, option: ValueOption, value: int) -> str:
        """Verbose rendering of a single metric value."""
        number = f"{value:{self.value_width}d}"
        if option.is_currency:
            return f"{self.currency} {number}"
        return f"{number}{OUTPUT_SETTINGS['days_suffix']}"

    def verbose_lines(
        self, record: CropRecord, metrics: CropMetrics, options: Sequence[ValueOption]
    ) -> List[str]:
        header = f"{record.name} - {record.season}"
        lines = [header, OUTPUT_SETTINGS["separator_char"] * len(header)]
        for option in options:
            value = metrics.value_for(option)
            lines.append(f"{option.label}\t{self.format_value(option, value)}")
        lines.append("")
        return lines

    def clean_lines(
        self, record: CropRecord, metrics: CropMetrics, options: Sequence[ValueOption]
    ) -> List[str]:
        lines = [
            f"{record.name}\t{option.value}\t{metrics.value_for(option)}" for option in options
        ]
        lines.append(f"{record.name}\t{GROWING_KEY}\t{record.season}")
        return lines

    def execute(
        self, record: CropRecord, metrics: CropMetrics, options: Sequence[ValueOption]
    ) -> List[str]:
        """
        Execute the use case.

        Args:
            record: Accepted crop record
            metrics: Metrics computed for the record
            options: Requested value options, in output order

        Returns:
            Output lines without trailing newlines
        """
        if self.clean_output:
            return self.clean_lines(record, metrics, options)
        return self.verbose_lines(record, metrics, options)
