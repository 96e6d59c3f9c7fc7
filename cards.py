# cards.py

# treys supplies the packed integer encoding used for equality and hashing
from treys import Card as TreysCard

RANK_SYMBOLS = "23456789TJQKA"
SUITS = "CDHS"

# Face cards map to 10-14; digits map to their own value.
FACE_VALUES = {'T': 10, 'J': 11, 'Q': 12, 'K': 13, 'A': 14}
RANK_VALUES = {**{str(d): d for d in range(2, 10)}, **FACE_VALUES}
VALUE_SYMBOLS = {v: k for k, v in RANK_VALUES.items()}


class InvalidCardCode(ValueError):
    """Raised when a token is not a two-character rank+suit code like 'AH'."""

    def __init__(self, code, reason):
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid card code {code!r}: {reason}")


class Card:
    __slots__ = ("_rank", "_suit", "_int_val")

    def __init__(self, s):
        """Initializes a Card object from a string like 'AH' or '7C'."""
        if not isinstance(s, str) or len(s) != 2:
            raise InvalidCardCode(s, "card must be 2 chars, e.g. 'AH'")
        rank_char = s[0].upper()
        suit_char = s[1]
        if rank_char not in RANK_VALUES:
            raise InvalidCardCode(s, f"invalid rank {s[0]!r}")
        if suit_char not in SUITS:
            raise InvalidCardCode(s, f"invalid suit {s[1]!r}")

        self._rank = RANK_VALUES[rank_char]
        self._suit = suit_char
        # treys wants a lower-case suit, e.g. 'Ah'
        self._int_val = TreysCard.new(rank_char + suit_char.lower())

    @property
    def rank(self):
        """Face value, 2 through 14 (Ace high)."""
        return self._rank

    @property
    def suit(self):
        return self._suit

    @property
    def int_val(self):
        """treys packed integer for this card."""
        return self._int_val

    def __str__(self):
        return f"{VALUE_SYMBOLS[self._rank]}{self._suit}"

    def __repr__(self):
        return f"Card({str(self)!r})"

    def __lt__(self, other):
        """Orders cards by rank only; suits never break ties."""
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank < other._rank

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self._int_val == other._int_val

    def __hash__(self):
        return hash(self._int_val)


def parse_card(code: str) -> Card:
    """Parse a single two-character code, e.g. 'TH' -> Card(rank=10, suit='H')."""
    return Card(code)


def parse_cards(card_list):
    """Convert ['AH', 'KD'] to a list of Card objects."""
    return [parse_card(s) for s in card_list]
