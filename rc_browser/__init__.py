"""
Top-level package for the radiocarbon record browser.

This package exposes the core architecture (records, filters, projection) and
the UI adapters. Most code should import from submodules such as:
    rc_browser.core
    rc_browser.services
    rc_browser.ui
"""

__all__: list[str] = []
