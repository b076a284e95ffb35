"""
Error taxonomy for a game played against the remote oracle.

Every failure that ends a run derives from WordleError so the CLI can catch
one type, print a diagnostic and exit non-zero:

  - StartupError          : word list missing, unreadable or empty
  - TransportError        : the HTTP call to the oracle did not complete
  - ProtocolError         : the oracle answered, but not with valid feedback
  - NoCandidatesRemaining : feedback eliminated every dictionary word

Caller mistakes (bad word length, bad turn budget) are plain ValueError.
"""


class WordleError(Exception):
    """Base class for errors that abort a game."""


class StartupError(WordleError):
    pass


class TransportError(WordleError):
    pass


class ProtocolError(WordleError):
    pass


class NoCandidatesRemaining(WordleError):
    """Raised when a guess is requested from an empty candidate set."""
