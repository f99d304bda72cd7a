"""User-facing preferences."""

from dataclasses import dataclass

from trip_checklist.models.constants import (
    DEFAULT_AVATAR,
    TEXT_SCALE_MAX,
    TEXT_SCALE_MIN,
    AppLanguage,
    Theme,
)


@dataclass(slots=True)
class UserSettings:
    """Single settings record, mutated in place by the store."""

    display_name: str = ""
    avatar: str = DEFAULT_AVATAR
    theme: Theme = Theme.LIGHT
    language: AppLanguage = AppLanguage.RU
    text_scale: float = 1.0  # 0.9 - 1.3

    def __post_init__(self) -> None:
        self.normalize()

    def normalize(self) -> None:
        self.text_scale = min(TEXT_SCALE_MAX, max(TEXT_SCALE_MIN, float(self.text_scale)))
