"""
Lightweight guess validation.

A guess is well-formed iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exact length N

The oracle client checks this before sending anything over the network, so
a malformed guess is a caller error (ValueError), not a ProtocolError.
"""


def validate_guess(word: str, N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word : proposed guess
      N    : required word length
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    return len(w) == N and w.isalpha() and w.isascii()
