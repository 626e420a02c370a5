"""
Command-line front end: dp4bioinfo {lcs,global,local,hamming} [SEQ1 SEQ2]

Sequences come from the positional arguments, the first two records of
--fasta FILE, or interactive prompts when neither is given.
"""
import argparse
import sys
from typing import List, Optional, Tuple

from .distances import LengthMismatchError
from .pairwise import PairwiseAligner
from .seq_io import read_pair

ALGORITHMS = ("lcs", "global", "local", "hamming")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dp4bioinfo",
        description="Sequence similarity: LCS, global/local alignment and Hamming distance."
    )
    parser.add_argument("algorithm", choices=ALGORITHMS, help="Comparison to run")
    parser.add_argument("sequences", nargs="*", metavar="SEQ",
                        help="The two sequences (prompted for when omitted)")
    parser.add_argument("--fasta", help="Read the first two sequences from a FASTA file")
    parser.add_argument("--match", type=int, default=None, help="Match score (default 5)")
    parser.add_argument("--mismatch", type=int, default=None, help="Mismatch score (default -3)")
    parser.add_argument("--gap", type=int, default=None, help="Gap score per position (default -4)")
    parser.add_argument("--show-matrix", action="store_true", help="Print the score matrix")
    parser.add_argument("--width", type=int, default=80, help="Alignment block width")
    parser.add_argument("--verbose", action="store_true", help="Show progress while aligning")
    return parser


def _prompt_int(parser: argparse.ArgumentParser, label: str) -> int:
    raw = input(f"Insert the {label} score: ").strip()
    try:
        return int(raw)
    except ValueError:
        parser.error(f"{label} score must be an integer, got {raw!r}")


def _get_sequences(parser: argparse.ArgumentParser, args) -> Tuple[str, str]:
    if args.fasta:
        if args.sequences:
            parser.error("give either --fasta or two sequences, not both")
        try:
            return read_pair(args.fasta)
        except (OSError, ValueError) as exc:
            parser.error(str(exc))
    if len(args.sequences) == 2:
        return args.sequences[0], args.sequences[1]
    if args.sequences:
        parser.error(f"expected two sequences, got {len(args.sequences)}")
    seq1 = input("Insert the first sequence: ").strip()
    seq2 = input("\nInsert the second sequence: ").strip()
    return seq1, seq2


def _get_scoring(parser: argparse.ArgumentParser, args, interactive: bool) -> Tuple[int, int, int]:
    values = []
    for label, given, default in (("match", args.match, 5),
                                  ("mismatch", args.mismatch, -3),
                                  ("gap", args.gap, -4)):
        if given is not None:
            values.append(given)
        elif interactive:
            values.append(_prompt_int(parser, label))
        else:
            values.append(default)
    return values[0], values[1], values[2]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    interactive = not args.sequences and not args.fasta
    seq1, seq2 = _get_sequences(parser, args)

    if args.algorithm == "hamming":
        try:
            distance = PairwiseAligner().hamming(seq1, seq2)
        except LengthMismatchError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(f"\nThe Hamming distance is: {distance}")
        return 0

    if args.algorithm == "lcs":
        result = PairwiseAligner().lcs(seq1, seq2, verbose=args.verbose)
        if args.show_matrix:
            result.matrices.score.print()
        print("\nThe longest common subsequence is: ")
        print(result.subsequence)
        print(f"Length: {result.length}")
        return 0

    match, mismatch, gap = _get_scoring(parser, args, interactive)
    aligner = PairwiseAligner(match=match, mismatch=mismatch, gap=gap)
    result = aligner.align(seq1, seq2, mode=args.algorithm, verbose=args.verbose)
    if args.show_matrix:
        result.matrices.score.print()
    result.view(width=args.width)
    return 0


if __name__ == "__main__":
    sys.exit(main())
