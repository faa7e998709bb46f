"""Season enumeration."""

from enum import Enum


class Season(str, Enum):
    """Growing seasons a crop table row can be filtered on."""

    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"
    SPRING = "Spring"
    ALL = "All"

    def __str__(self) -> str:
        return self.value
