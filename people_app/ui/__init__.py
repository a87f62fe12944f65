# SPDX-License-Identifier: MIT
"""
Qt user interface components for the people list application.
"""

from .main_window import MainWindow  # noqa: F401
from .person_dialog import PersonDialog, create_or_update_person  # noqa: F401
