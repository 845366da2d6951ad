import logging
import operator
from collections.abc import Callable, Iterator, Sequence

from pathdiff.edit_path import DELETION, NIL, Edit, Path
from pathdiff.frontier import frontier_diff
from pathdiff.layered import layered_diff


logger = logging.getLogger(__name__)

SOLVERS = {
    'frontier': frontier_diff,
    'layered': layered_diff,
}
DEFAULT_SOLVER = 'layered'


def _materialize(seq) -> Sequence:
    if isinstance(seq, Sequence):
        return seq
    return list(seq)


def solve(first, second, equal: Callable = operator.eq, solver: str = DEFAULT_SOLVER) -> Path:
    """Runs the named solver and returns its terminal Path."""
    try:
        solver_func = SOLVERS[solver]
    except KeyError as e:
        raise ValueError(f"Unknown solver '{solver}'. Expected one of: {', '.join(SOLVERS)}") from e

    first = _materialize(first)
    second = _materialize(second)
    logger.debug(f"{solver}: diffing {len(first)} against {len(second)} items")
    return solver_func(first, second, equal)


def diff(first, second, equal: Callable = operator.eq, solver: str = DEFAULT_SOLVER) -> list[Edit]:
    """
    Computes a shortest edit script turning `first` into `second`.

    `equal(a, b)` decides whether an item of `first` matches an item of
    `second`; it may be called several times for the same pair.
    """
    return solve(first, second, equal, solver).sequence


def get_opcodes(script) -> Iterator[tuple[str, int, int, int, int]]:
    """
    Groups an edit script into difflib-style 5-tuples (tag, i1, i2, j1, j2).
    Deletions and insertions between two equal runs are merged into 'replace'.
    """
    i = j = 0
    # Start of the pending insert/delete block
    diff_start_i = diff_start_j = 0
    # Start of the current equal run, or None
    equal_start = None

    def emit_diff(end_i, end_j):
        nonlocal diff_start_i, diff_start_j
        if diff_start_i < end_i and diff_start_j < end_j:
            yield ('replace', diff_start_i, end_i, diff_start_j, end_j)
        elif diff_start_i < end_i:
            yield ('delete', diff_start_i, end_i, diff_start_j, end_j)
        elif diff_start_j < end_j:
            yield ('insert', diff_start_i, end_i, diff_start_j, end_j)
        diff_start_i = end_i
        diff_start_j = end_j

    for edit in script:
        if edit.tag == NIL:
            if equal_start is None:
                yield from emit_diff(i, j)
                equal_start = (i, j)
            i += 1
            j += 1
            continue

        if equal_start is not None:
            yield ('equal', equal_start[0], i, equal_start[1], j)
            equal_start = None
            diff_start_i = i
            diff_start_j = j

        if edit.tag == DELETION:
            i += 1
        else:
            j += 1

    if equal_start is not None:
        yield ('equal', equal_start[0], i, equal_start[1], j)
    else:
        yield from emit_diff(i, j)


class PathSequenceMatcher:
    """
    A difflib-compatible SequenceMatcher backed by the edit graph solvers.

    Unlike difflib it accepts a custom `equal` predicate. `isjunk` and
    `autojunk` are ignored but kept for API compatibility.
    """

    def __init__(self, isjunk=None, a=None, b=None, autojunk=True, *,
                 equal: Callable = operator.eq, solver: str = DEFAULT_SOLVER) -> None:
        if solver not in SOLVERS:
            raise ValueError(f"Unknown solver '{solver}'. Expected one of: {', '.join(SOLVERS)}")
        self.isjunk = isjunk
        self.autojunk = autojunk
        self.equal = equal
        self.solver = solver
        self.a = self.b = None
        self.path = None
        self.opcodes = None
        self.set_seqs(a or [], b or [])

    def set_seqs(self, a, b) -> None:
        """Sets the two sequences to be compared."""
        self.set_seq1(a)
        self.set_seq2(b)

    def set_seq1(self, a) -> None:
        if a is self.a:
            return
        self.a = _materialize(a)
        self.path = self.opcodes = None

    def set_seq2(self, b) -> None:
        if b is self.b:
            return
        self.b = _materialize(b)
        self.path = self.opcodes = None

    def _solve(self) -> Path:
        if self.path is None:
            self.path = solve(self.a, self.b, self.equal, self.solver)
        return self.path

    def get_edits(self) -> list[Edit]:
        return self._solve().sequence

    def get_opcodes(self) -> list[tuple[str, int, int, int, int]]:
        """
        Return list of 5-tuples describing how to turn a into b.
        The result is cached until one of the sequences changes.
        """
        if self.opcodes is None:
            self.opcodes = list(get_opcodes(self.get_edits()))
        return self.opcodes

    def ratio(self) -> float:
        """Similarity in [0, 1], computed as in difflib: 2.0 * M / T."""
        total = len(self.a) + len(self.b)
        if not total:
            return 1.0
        return 2.0 * self._solve().consumptions / total
