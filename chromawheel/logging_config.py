from __future__ import annotations

import logging
import os


def configure_logging() -> None:
    """Configure root logging for applications embedding chromawheel.

    If callers already configured logging handlers, we don't override them.
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.environ.get("CHROMAWHEEL_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
