from .replies import answer, delete_quietly, send_text
from .state import WaitingTracker

__all__ = [
    "WaitingTracker",
    "answer",
    "delete_quietly",
    "send_text",
]
