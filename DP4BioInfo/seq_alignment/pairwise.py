"""
Pairwise Sequence Comparison Module
LCS, global (Needleman-Wunsch) and local (Smith-Waterman) alignment
with a linear match / mismatch / gap scoring scheme
"""

import asyncio
import warnings
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Literal, Optional, Tuple, Union

from .builder import AlignmentMatrices, build_matrices, recurrence_for
from .distances import hamming
from .scoring import ScoringPolicy
from .backtrack import GAP, reconstruct_global, reconstruct_lcs, reconstruct_local, traceback_path


@dataclass
class AlignmentResult:
    """Store alignment results and metadata"""
    seq1_aligned: str
    seq2_aligned: str
    score: int
    start1: int
    end1: int
    start2: int
    end2: int
    alignment_type: str
    match_string: str
    identity: float
    similarity: float
    gaps: int
    seq1_original: str
    seq2_original: str
    matrices: Optional[AlignmentMatrices] = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        """String representation of alignment"""
        return (
            f"Alignment Score: {self.score}\n"
            f"Type: {self.alignment_type}\n"
            f"Identity: {self.identity:.2%}\n"
            f"Similarity: {self.similarity:.2%}\n"
            f"Gaps: {self.gaps}\n"
            f"Range: [{self.start1}-{self.end1}] x [{self.start2}-{self.end2}]\n"
        )

    def plot(self, width: int = 80) -> None:
        """Display alignment with match indicators"""
        lines = []
        lines.append("")
        lines.append(f"Sequence 1: {self.seq1_original}")
        lines.append(f"Sequence 2: {self.seq2_original}")
        lines.append("")
        lines.append(f"Type: {self.alignment_type}")
        lines.append(f"Identity: {self.identity:.2%}")
        lines.append(f"Gaps: {self.gaps}")
        lines.append("")
        lines.append(f"Score: {self.score}")
        lines.append("")

        for start in range(0, len(self.seq1_aligned), width):
            end = min(start + width, len(self.seq1_aligned))
            lines.append(f"pattern: {self.seq1_aligned[start:end]}")
            lines.append(f"         {self.match_string[start:end]}")
            lines.append(f"subject: {self.seq2_aligned[start:end]}")
            lines.append("")

        for line in lines:
            print(line)

    def view(self, width: int = 80) -> None:
        """Alias for plot method"""
        self.plot(width)

    def nmatch(self) -> int:
        """Number of matching positions"""
        return self.match_string.count("|")

    def nmismatch(self) -> int:
        """Number of aligned, non-identical positions"""
        return self.match_string.count(".")


@dataclass
class LCSResult:
    """Longest common subsequence of two sequences"""
    subsequence: str
    seq1_original: str
    seq2_original: str
    matrices: Optional[AlignmentMatrices] = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.subsequence)

    def __str__(self) -> str:
        return f"LCS: {self.subsequence}\nLength: {self.length}\n"


class PairwiseAligner:
    """Pairwise comparison with a fixed match / mismatch / gap scheme"""

    def __init__(
        self,
        match: int = 5,
        mismatch: int = -3,
        gap: int = -4,
        gap_char: str = GAP
    ):
        """
        Initialize aligner

        Parameters:
        -----------
        match : int
            Score for aligning two identical symbols (default 5)
        mismatch : int
            Score for aligning two different symbols (default -3)
        gap : int
            Score added for every gap position (default -4)
        gap_char : str
            Symbol written into the aligned strings for a gap (default '-')
        """
        self.policy = ScoringPolicy(match, mismatch, gap)
        self.gap_char = gap_char

    @property
    def match(self) -> int:
        return self.policy.match

    @property
    def mismatch(self) -> int:
        return self.policy.mismatch

    @property
    def gap(self) -> int:
        return self.policy.gap

    @staticmethod
    def _column_steps(path: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
        """Per-column moves of a traceback path, left to right"""
        cells = path[::-1]
        return [(i1 - i0, j1 - j0) for (i0, j0), (i1, j1) in zip(cells, cells[1:])]

    def _calculate_match_string(
        self,
        aligned1: str,
        aligned2: str,
        steps: List[Tuple[int, int]]
    ) -> str:
        """Generate match string ('|' match, '.' mismatch, ' ' gap)"""
        match_str = []
        for a, b, step in zip(aligned1, aligned2, steps):
            if step != (1, 1):
                match_str.append(' ')
            elif a == b:
                match_str.append('|')
            else:
                match_str.append('.')
        return ''.join(match_str)

    def _calculate_statistics(self, match_string: str) -> Tuple[float, float, int]:
        """Calculate alignment statistics"""
        length = len(match_string)
        matches = match_string.count('|')
        aligned = matches + match_string.count('.')
        gaps = match_string.count(' ')

        identity = matches / length if length > 0 else 0.0
        similarity = aligned / length if length > 0 else 0.0

        return identity, similarity, gaps

    def align(
        self,
        seq1: str,
        seq2: str,
        mode: Literal["global", "local"] = "global",
        score_only: bool = False,
        verbose: bool = False
    ) -> Union[AlignmentResult, int]:
        """
        Perform pairwise sequence alignment

        Parameters:
        -----------
        seq1 : str
            First sequence (pattern, matrix rows)
        seq2 : str
            Second sequence (subject, matrix columns)
        mode : str
            Alignment type: "global" or "local" (default "global")
        score_only : bool
            If True, return only the alignment score
        verbose : bool
            If True, display progress during alignment

        Returns:
        --------
        AlignmentResult or int
            Alignment result object or score if score_only=True

        The match string and statistics are derived from the traceback
        moves, so a symbol equal to `gap_char` inside an input sequence is
        still counted as an ordinary residue.
        """
        if mode not in ("global", "local"):
            raise ValueError(f"Unknown alignment mode: {mode!r} (expected 'global' or 'local')")
        if not seq1 or not seq2:
            warnings.warn("Aligning against an empty sequence", stacklevel=2)

        if verbose:
            print("\n" + "="*70)
            print("PAIRWISE SEQUENCE ALIGNMENT")
            print("="*70)
            print(f"Sequence 1: {seq1}")
            print(f"Sequence 2: {seq2}")
            print(f"Mode: {mode}")
            print(self.policy)
            print("="*70)

        matrices = build_matrices(seq1, seq2, recurrence_for(mode, self.policy), verbose=verbose)
        score, trace = matrices

        if mode == "global":
            best = score[score.rows - 1, score.cols - 1]
        else:
            best = score.max()
            if best == 0:
                warnings.warn("No positive-scoring local alignment found", stacklevel=2)

        if score_only:
            if verbose:
                print(f"\nFinal score: {best}")
                print("="*70 + "\n")
            return best

        if mode == "global":
            aligned1, aligned2 = reconstruct_global(trace, seq1, seq2, gap=self.gap_char)
            start1, end1, start2, end2 = 0, len(seq1), 0, len(seq2)
            path = traceback_path(trace, (end1, end2), stop_at_boundary=False)
        else:
            aligned1, aligned2, (start1, end1), (start2, end2) = reconstruct_local(
                score, trace, seq1, seq2, gap=self.gap_char
            )
            path = traceback_path(trace, (end1, end2))

        if verbose:
            print(f"✓ Traceback complete! Alignment length: {len(aligned1)}")

        match_string = self._calculate_match_string(aligned1, aligned2, self._column_steps(path))
        identity, similarity, gaps = self._calculate_statistics(match_string)

        result = AlignmentResult(
            seq1_aligned=aligned1,
            seq2_aligned=aligned2,
            score=best,
            start1=start1,
            end1=end1,
            start2=start2,
            end2=end2,
            alignment_type=mode,
            match_string=match_string,
            identity=identity,
            similarity=similarity,
            gaps=gaps,
            seq1_original=seq1,
            seq2_original=seq2,
            matrices=matrices
        )

        if verbose:
            print(f"\nALIGNMENT RESULTS")
            print("="*70)
            print(f"Score: {best}")
            print(f"Identity: {identity:.2%} ({result.nmatch()} matches)")
            print(f"Gaps: {gaps}")
            print(f"Length: {len(aligned1)}")
            print("="*70 + "\n")

        return result

    def lcs(self, seq1: str, seq2: str, verbose: bool = False) -> LCSResult:
        """Longest common subsequence (scoring scheme is not used)"""
        matrices = build_matrices(seq1, seq2, recurrence_for("lcs"), verbose=verbose)
        subsequence = reconstruct_lcs(matrices.trace, seq1)
        if verbose:
            print(f"\nLCS length: {len(subsequence)}")
        return LCSResult(subsequence, seq1, seq2, matrices)

    def hamming(self, seq1: str, seq2: str) -> int:
        """Hamming distance; raises LengthMismatchError on unequal lengths"""
        return hamming(seq1, seq2)

    async def align_many_async(
        self,
        pairs: Iterable[Tuple[str, str]],
        mode: Literal["global", "local"] = "global",
        max_workers: Optional[int] = None
    ) -> List[AlignmentResult]:
        """
        Align several sequence pairs in a thread pool.
        (Each alignment still runs serially; this only keeps the event loop free.)
        """
        loop = asyncio.get_running_loop()
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            tasks = [
                loop.run_in_executor(pool, self.align, seq1, seq2, mode)
                for seq1, seq2 in pairs
            ]
            return list(await asyncio.gather(*tasks))


# MAIN CONVENIENCE FUNCTION
def pairwise(
    seq1: str,
    seq2: str,
    match: Optional[int] = None,
    mismatch: Optional[int] = None,
    gap: Optional[int] = None,
    mode: Literal["global", "local"] = "local",
    verbose: bool = False
) -> AlignmentResult:
    """
    Pairwise sequence alignment with sensible defaults

    Parameters left as None fall back to match=5, mismatch=-3, gap=-4.

    Examples:
    ---------
    >>> result = pairwise("ATATAGGGAGATATAGAGA", "AGAGGGGTTATAAGGGAGAG", mode="local")
    >>> result.score
    48
    >>> result.view()
    """
    aligner = PairwiseAligner(
        match=5 if match is None else match,
        mismatch=-3 if mismatch is None else mismatch,
        gap=-4 if gap is None else gap
    )
    return aligner.align(seq1, seq2, mode=mode, verbose=verbose)
