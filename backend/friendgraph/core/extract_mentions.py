"""Mention Extraction — pulls @-containing tokens out of free message text.

Invariants:
    - Tokenization is whitespace-delimited (str.split with no separator)
    - A token is a mention if it contains "@" anywhere — no address validation
    - Tokens are returned verbatim: no case folding, no punctuation stripping,
      so "bob@example.com," stays a distinct (and usually unresolvable) token
    - Output is deduplicated, first-occurrence order preserved

Design Decisions:
    - Verbatim tokens over normalization: exact-match resolution against the
      store is the observed contract; guessing intended normalization would
      silently change who gets notified
"""


def extract_mentions(text: str) -> list[str]:
    """Return the unique @-containing whitespace tokens of text, in order."""
    if not text:
        return []
    seen: dict[str, None] = {}
    for token in text.split():
        if "@" in token:
            seen.setdefault(token, None)
    return list(seen)
