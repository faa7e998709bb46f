"""Tests for FilterCropRecordsUseCase."""

from cropstats.domain.entities.crop_record import CropRecord
from cropstats.domain.entities.preference_set import PreferenceSet
from cropstats.domain.entities.season import Season
from cropstats.domain.use_cases.filter_crop_records import FilterCropRecordsUseCase

RECORDS = [
    CropRecord("Parsnip", 20, 35, 4, "Spring"),
    CropRecord("Mystery", 10, 20, 0, "Spring"),
    CropRecord("Melon", 80, 250, 12, "Summer"),
    CropRecord("CactusFruit", 10, 75, 12, "N/A"),
    CropRecord("Fiddlehead", 10, 90, 4, "Cave"),
    CropRecord("Yam", 60, 160, 10, "Autumn"),
    CropRecord("AncientFruit", 100, 550, 28, "All"),
]


def names(records):
    return [r.name for r in records]


def test_filter_without_seasons():
    """Every complete record passes, including unknown seasons, in order."""
    use_case = FilterCropRecordsUseCase(PreferenceSet())
    assert names(use_case.execute(RECORDS)) == [
        "Parsnip",
        "Melon",
        "Fiddlehead",
        "Yam",
        "AncientFruit",
    ]


def test_filter_with_seasons():
    """Only records whose season matches a requested filter pass."""
    prefs = PreferenceSet(seasons=frozenset({Season.SUMMER, Season.WINTER}))
    use_case = FilterCropRecordsUseCase(prefs)
    assert names(use_case.execute(RECORDS)) == ["Melon"]


def test_filter_all_is_a_season_label():
    """--all selects rows labelled All, it is not a wildcard."""
    prefs = PreferenceSet(seasons=frozenset({Season.ALL}))
    use_case = FilterCropRecordsUseCase(prefs)
    assert names(use_case.execute(RECORDS)) == ["AncientFruit"]


def test_filter_is_lazy():
    """Records are consumed one at a time."""
    consumed = []

    def source():
        for record in RECORDS:
            consumed.append(record.name)
            yield record

    result = FilterCropRecordsUseCase(PreferenceSet()).execute(source())
    assert consumed == []
    assert next(result).name == "Parsnip"
    assert consumed == ["Parsnip"]
