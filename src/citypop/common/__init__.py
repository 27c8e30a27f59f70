from __future__ import annotations

from .logging import FileErrorSink, configure_logging

__all__ = ["FileErrorSink", "configure_logging"]
