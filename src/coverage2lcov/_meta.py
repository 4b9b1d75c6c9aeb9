from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("coverage2lcov")

logger = logging.getLogger("coverage2lcov")

__all__ = ["__version__", "logger"]
