from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


def _positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


@dataclass
class AppState:
    window_width: Optional[int] = None
    window_height: Optional[int] = None
    last_export_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "AppState":
        last_export_path = data.get("last_export_path")
        return cls(
            window_width=_positive_int(data.get("window_width")),
            window_height=_positive_int(data.get("window_height")),
            last_export_path=last_export_path if isinstance(last_export_path, str) else None,
        )

    def to_dict(self) -> Dict:
        return asdict(self)


class StateManager:
    """
    Persists window size and the last export location between sessions.

    The people themselves are never written here.
    """

    def __init__(self, state_path: Optional[Path] = None) -> None:
        if state_path is None:
            state_path = Path.cwd() / ".people_app_state.json"
        self.state_path = state_path
        self.state = AppState()
        self._load()

    def _load(self) -> None:
        try:
            if self.state_path.exists():
                data = json.loads(self.state_path.read_text())
                self.state = AppState.from_dict(data)
        except (OSError, ValueError, AttributeError):
            logger.warning("Ignoring unreadable UI state file %s", self.state_path)
            self.state = AppState()

    def save(self) -> None:
        try:
            self.state_path.write_text(json.dumps(self.state.to_dict(), indent=2))
        except OSError as exc:
            # Non-fatal; the next session simply starts with defaults.
            logger.warning("Could not save UI state to %s: %s", self.state_path, exc)

    def set_window_size(self, width: int, height: int) -> None:
        self.state.window_width = int(width)
        self.state.window_height = int(height)
        self.save()

    def get_window_size(self) -> Optional[Tuple[int, int]]:
        if not self.state.window_width or not self.state.window_height:
            return None
        return self.state.window_width, self.state.window_height

    def set_last_export_path(self, path: Path) -> None:
        self.state.last_export_path = str(path)
        self.save()

    def get_last_export_path(self) -> Optional[Path]:
        if not self.state.last_export_path:
            return None
        return Path(self.state.last_export_path)
