from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from PySide6.QtWidgets import QApplication

from people_app.core import AppConfig, PeopleController, PeopleStore, load_config
from people_app.state_manager import StateManager
from people_app.ui import MainWindow

logger = logging.getLogger(__name__)


def create_application(argv: Sequence[str]) -> QApplication:
    app = QApplication(list(argv))
    app.setApplicationName("People List")
    return app


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(description="People list GUI")
    add_common_arguments(parser)
    parser.add_argument(
        "--title",
        type=str,
        help="Window title (overrides the config file)",
    )
    return parser.parse_known_args(argv)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON file with window/dialog/web settings",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: WARNING)",
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_config(args: argparse.Namespace) -> AppConfig:
    config_path = Path(args.config).expanduser().resolve() if args.config else None
    config = load_config(config_path)
    if getattr(args, "title", None):
        config.window.title = args.title
    for name, section in config.iter_sections():
        logger.debug("Config %s: %s", name, section)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(argv if argv is not None else sys.argv)
    args, qt_args = parse_args(argv[1:])
    qt_argv = [argv[0], *qt_args]
    configure_logging(args.log_level)

    config = build_config(args)
    app = create_application(qt_argv)
    store = PeopleStore()
    controller = PeopleController(store)
    window = MainWindow(controller, config, StateManager())
    window.show()
    logger.info("People list started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
