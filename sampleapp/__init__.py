"""sampleapp - UI catalog, user service and text utilities"""

from .constants import LABELS, MESSAGES

__all__ = ["LABELS", "MESSAGES"]
