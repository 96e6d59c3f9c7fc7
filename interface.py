# interface.py

import argparse
import sys

from cards import InvalidCardCode, parse_cards
from eval_hand import HAND_SIZE, compare_hands, hand_description
from tally import DEFAULT_TIE_POLICY, TIE_POLICIES, Tally

TOKENS_PER_LINE = 2 * HAND_SIZE


class MalformedLine(ValueError):
    """Raised when an input line does not hold exactly ten card codes."""

    def __init__(self, lineno, token_count):
        self.lineno = lineno
        self.token_count = token_count
        where = f"line {lineno}" if lineno is not None else "line"
        super().__init__(
            f"{where} has {token_count} cards, each line must contain exactly {TOKENS_PER_LINE}")


# =================================================================================
# == LINE PARSING
# =================================================================================

def parse_line(line: str, lineno: int | None = None):
    """
    Split one input line into two five-card hands.

    Returns None for a blank line, otherwise (hand1, hand2).
    """
    tokens = line.split()
    if not tokens:
        return None
    if len(tokens) != TOKENS_PER_LINE:
        raise MalformedLine(lineno, len(tokens))
    return parse_cards(tokens[:HAND_SIZE]), parse_cards(tokens[HAND_SIZE:])


def describe(hand) -> str:
    return f"{' '.join(map(str, hand))} ({hand_description(hand)})"


# =================================================================================
# == GAME FLOW LOGIC
# =================================================================================

def evaluate_lines(lines, tie_policy=DEFAULT_TIE_POLICY, skip_bad_lines=False, verbose=False) -> Tally:
    """
    Fold every line's comparison into a Tally.

    A bad line raises MalformedLine or InvalidCardCode and stops the run,
    unless skip_bad_lines is set, in which case it is reported and counted.
    """
    tally = Tally()
    for lineno, line in enumerate(lines, start=1):
        try:
            hands = parse_line(line, lineno)
        except (MalformedLine, InvalidCardCode) as err:
            if not skip_bad_lines:
                raise
            print(f"⚠️ Skipping line {lineno}: {err}", file=sys.stderr)
            tally = tally.skip()
            continue
        if hands is None:
            continue

        hand1, hand2 = hands
        outcome = compare_hands(hand1, hand2)
        if verbose:
            print(f"{lineno}: {describe(hand1)} vs {describe(hand2)} -> {outcome.name}")
        tally = tally.record(outcome, tie_policy)
    return tally


def build_parser():
    parser = argparse.ArgumentParser(
        prog="hand-compare",
        description="Compare pairs of five-card poker hands, one pair per line, and count wins.")
    parser.add_argument("file", nargs="?",
                        help="input file with 10 card codes per line (default: stdin)")
    parser.add_argument("--ties", choices=TIE_POLICIES, default=DEFAULT_TIE_POLICY,
                        help="player2 credits ties to player 2; separate reports them on their own")
    parser.add_argument("--skip-bad-lines", action="store_true",
                        help="report and skip malformed lines instead of aborting")
    parser.add_argument("--verbose", action="store_true",
                        help="print each line's hands and result")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.file:
            with open(args.file, encoding="utf-8") as f:
                tally = evaluate_lines(f, args.ties, args.skip_bad_lines, args.verbose)
        else:
            tally = evaluate_lines(sys.stdin, args.ties, args.skip_bad_lines, args.verbose)
    except (MalformedLine, InvalidCardCode) as err:
        print(f"❌ ERROR: {err}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as err:
        print(f"❌ ERROR: {args.file or 'stdin'} is not valid UTF-8: {err}", file=sys.stderr)
        return 1
    except OSError as err:
        print(f"❌ ERROR: cannot read {args.file}: {err.strerror}", file=sys.stderr)
        return 1

    for line in tally.report_lines(args.ties):
        print(line)
    if tally.skipped:
        print(f"⚠️ {tally.skipped} bad line(s) skipped", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
