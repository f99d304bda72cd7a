"""Where the checklist keeps its files."""

from dataclasses import dataclass, field
from pathlib import Path


def _default_data_dir() -> Path:
    return Path.home() / ".trip_checklist"


@dataclass(slots=True)
class AppConfig:
    """Tuneable storage locations."""

    data_dir: Path = field(default_factory=_default_data_dir)
    state_filename: str = "app_state.json"
    achievements_filename: str = "unlocked_achievements.json"

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir).expanduser()

    @property
    def state_path(self) -> Path:
        return self.data_dir / self.state_filename

    @property
    def achievements_path(self) -> Path:
        return self.data_dir / self.achievements_filename
