from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple


@dataclass
class WindowConfig:
    title: str = "Add Users"
    width: int = 480
    height: int = 640
    show_event_log: bool = True

    def to_tuple(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass
class DialogConfig:
    title: str = "Create a Person"
    name_placeholder: str = "Enter Name Here..."
    age_placeholder: str = "Enter Age Here..."
    confirm_label: str = "Create"
    cancel_label: str = "Cancel"


@dataclass
class WebConfig:
    server_name: str = "127.0.0.1"
    server_port: int = 7860


@dataclass
class AppConfig:
    window: WindowConfig = field(default_factory=WindowConfig)
    dialog: DialogConfig = field(default_factory=DialogConfig)
    web: WebConfig = field(default_factory=WebConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """Merge settings from a nested mapping into the config."""
        for section_name, section_values in data.items():
            section = getattr(self, section_name, None)
            if section is None:
                continue
            if not isinstance(section_values, dict):
                continue
            for key, value in section_values.items():
                if hasattr(section, key):
                    setattr(section, key, value)

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "window", self.window
        yield "dialog", self.dialog
        yield "web", self.web


def load_config(path: Path | None) -> AppConfig:
    config = AppConfig()
    if path is None:
        return config
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object at the top level.")
    config.update_from_mapping(data)
    return config

