from .errors import (
    WordleError, StartupError, TransportError, ProtocolError, NoCandidatesRemaining,
)
from .feedback import Outcome, SlotFeedback, GuessFeedback, make_feedback
from .constraints import apply_feedback, filter_candidates, slot_predicate
from .validation import validate_guess

__all__ = [
    "WordleError", "StartupError", "TransportError", "ProtocolError",
    "NoCandidatesRemaining", "Outcome", "SlotFeedback", "GuessFeedback",
    "make_feedback", "apply_feedback", "filter_candidates", "slot_predicate",
    "validate_guess",
]
