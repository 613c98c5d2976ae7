"""
Top‑level package for the Mobile App Web Service.

This file makes ``mobile_app_ws`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``mobile_app_ws.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
