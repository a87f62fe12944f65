# SPDX-License-Identifier: MIT
"""
Domain model, observable store, and services for the people list.
"""

from .config import AppConfig, DialogConfig, WebConfig, WindowConfig, load_config  # noqa: F401
from .controller import PeopleController  # noqa: F401
from .form import PersonForm, parse_age  # noqa: F401
from .person import Person  # noqa: F401
from .store import PeopleStore, PersonNotFoundError  # noqa: F401
