# eval_hand.py
from __future__ import annotations
from collections import Counter
from enum import IntEnum

from cards import Card

HAND_SIZE = 5
ACE = 14


# ---------- CATEGORIES ------------------------------------------------------
class HandRank(IntEnum):
    HIGH_CARD       = 0
    PAIR            = 1
    TWO_PAIR        = 2
    THREE_OF_A_KIND = 3
    STRAIGHT        = 4
    FLUSH           = 5
    FULL_HOUSE      = 6
    FOUR_OF_A_KIND  = 7
    STRAIGHT_FLUSH  = 8
    ROYAL_FLUSH     = 9

    def __str__(self):
        return self.name.replace('_', ' ').title()


class Outcome(IntEnum):
    """Three-way comparison result; values match the classic 0/1/2 winner codes."""
    TIE         = 0
    FIRST_WINS  = 1
    SECOND_WINS = 2


# ---------- HAND HELPERS ----------------------------------------------------
def _check_size(cards):
    if len(cards) != HAND_SIZE:
        raise ValueError(f"A hand must hold exactly {HAND_SIZE} cards, got {len(cards)}")


def sort_hand(cards) -> list[Card]:
    """Return a new list of the cards, highest rank first."""
    return sorted(cards, key=lambda c: c.rank, reverse=True)


def rank_counts(cards) -> dict[int, int]:
    """Map each rank in the hand to how many cards share it."""
    return dict(Counter(c.rank for c in cards))


def ranks_with_count(counts: dict[int, int], n: int) -> list[int]:
    """All ranks appearing exactly n times, highest first."""
    return sorted((r for r, k in counts.items() if k == n), reverse=True)


def is_flush(cards) -> bool:
    return len({c.suit for c in cards}) == 1


def is_straight(sorted_cards) -> bool:
    # A-2-3-4-5 does not count: the Ace only plays high.
    return all(a.rank == b.rank + 1 for a, b in zip(sorted_cards, sorted_cards[1:]))


# ---------- CLASSIFICATION --------------------------------------------------
def _classify_sorted(hand: list[Card], counts: dict[int, int]) -> HandRank:
    flush = is_flush(hand)
    straight = is_straight(hand)
    tallies = counts.values()

    if flush and straight:
        return HandRank.ROYAL_FLUSH if hand[0].rank == ACE else HandRank.STRAIGHT_FLUSH
    if 4 in tallies:
        return HandRank.FOUR_OF_A_KIND
    if 3 in tallies and 2 in tallies:
        return HandRank.FULL_HOUSE
    if flush:
        return HandRank.FLUSH
    if straight:
        return HandRank.STRAIGHT
    if 3 in tallies:
        return HandRank.THREE_OF_A_KIND
    pairs = sum(1 for k in tallies if k == 2)
    if pairs == 2:
        return HandRank.TWO_PAIR
    if pairs == 1:
        return HandRank.PAIR
    return HandRank.HIGH_CARD


def classify(cards) -> HandRank:
    """Return the category of a five-card hand. Input order does not matter."""
    _check_size(cards)
    hand = sort_hand(cards)
    return _classify_sorted(hand, rank_counts(hand))


def hand_description(cards) -> str:
    """Human-readable category, e.g. 'Full House'."""
    return str(classify(cards))


# ---------- TIE-BREAKS ------------------------------------------------------
def _compare_values(a: list[int], b: list[int]) -> Outcome:
    """First differing value decides; identical sequences tie."""
    for x, y in zip(a, b):
        if x != y:
            return Outcome.FIRST_WINS if x > y else Outcome.SECOND_WINS
    return Outcome.TIE


def compare_high_cards(hand1: list[Card], hand2: list[Card]) -> Outcome:
    """Card-by-card comparison of two hands already sorted high to low."""
    return _compare_values([c.rank for c in hand1], [c.rank for c in hand2])


def _group_key(counts: dict[int, int], *sizes: int) -> list[int]:
    # e.g. sizes (2, 1) on two pair -> [high pair, low pair, kicker]
    key = []
    for n in sizes:
        key.extend(ranks_with_count(counts, n))
    return key


def _tie_break(rank, hand1, hand2, counts1, counts2) -> Outcome:
    if rank in (HandRank.ROYAL_FLUSH, HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT,
                HandRank.FLUSH, HandRank.HIGH_CARD):
        return compare_high_cards(hand1, hand2)

    if rank == HandRank.FOUR_OF_A_KIND:
        return _compare_values(_group_key(counts1, 4, 1), _group_key(counts2, 4, 1))

    if rank == HandRank.FULL_HOUSE:
        return _compare_values(_group_key(counts1, 3, 2), _group_key(counts2, 3, 2))

    if rank == HandRank.TWO_PAIR:
        return _compare_values(_group_key(counts1, 2, 1), _group_key(counts2, 2, 1))

    # Three of a kind and pair: the group first, then every card as kickers
    size = 3 if rank == HandRank.THREE_OF_A_KIND else 2
    result = _compare_values(ranks_with_count(counts1, size), ranks_with_count(counts2, size))
    if result is not Outcome.TIE:
        return result
    return compare_high_cards(hand1, hand2)


# ---------- COMPARISON ------------------------------------------------------
def compare_hands(hand1, hand2) -> Outcome:
    """
    Decide which of two five-card hands wins.

    The higher category wins outright. Hands of the same category go to the
    category's tie-break, which may declare a tie. Neither argument is
    modified.
    """
    _check_size(hand1)
    _check_size(hand2)
    sorted1, sorted2 = sort_hand(hand1), sort_hand(hand2)
    counts1, counts2 = rank_counts(sorted1), rank_counts(sorted2)

    rank1 = _classify_sorted(sorted1, counts1)
    rank2 = _classify_sorted(sorted2, counts2)
    if rank1 != rank2:
        return Outcome.FIRST_WINS if rank1 > rank2 else Outcome.SECOND_WINS

    return _tie_break(rank1, sorted1, sorted2, counts1, counts2)
