"""Day-level service tying the roster and consensus core to storage."""

from .service import DayService

__all__ = ["DayService"]
