# SPDX-License-Identifier: MIT
"""
Graphical application package for the people list.

The package is organised so that `people_app.core` hosts the person model,
the observable store and related services, while `people_app.ui` contains
Qt widgets and dialogs. `people_app.main` is the desktop entry point that
wires everything together; `people_app.gradio_app` serves the same list in a
browser.
"""

__all__ = ["main"]
