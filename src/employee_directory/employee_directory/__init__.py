"""Employee Directory package.

This package is organized by feature modules (employees, users, dashboard, ...)
with a thin Flask controller layer and service/repository layers over a
namespaced key/value record store.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
