# This is free and unencumbered software released into the public domain.
#
# Anyone is free to copy, modify, publish, use, compile, sell, or
# distribute this software, either in source code form or as a compiled
# binary, for any purpose, commercial or non-commercial, and by any
# means.
#
# In jurisdictions that recognize copyright laws, the author or authors
# of this software dedicate any and all copyright interest in the
# software to the public domain. We make this dedication for the benefit
# of the public at large and to the detriment of our heirs and
# successors. We intend this dedication to be an overt act of
# relinquishment in perpetuity of all present and future rights to this
# software under copyright law.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS BE LIABLE FOR ANY CLAIM, DAMAGES OR
# OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
# ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
# For more information, please refer to <http://unlicense.org/>
#
# Edit graph primitives shared by the frontier and layered solvers.

from collections import namedtuple
from collections.abc import Callable, Iterator, Sequence


# Edit tags
NIL = 'nil'
DELETION = 'deletion'
INSERTION = 'insertion'


class SearchExhaustedError(RuntimeError):
    """Raised when a solver runs out of candidates before reaching the terminal coordinate."""


class Edit(namedtuple('Edit', ['tag', 'index', 'item'])):
    """
    One entry of an edit script.

    `index` points into the sequence that owns `item`: the first sequence
    for NIL and DELETION, the second one for INSERTION.
    """

    __slots__ = ()

    @classmethod
    def nil(cls, index: int, item) -> 'Edit':
        return cls(NIL, index, item)

    @classmethod
    def deletion(cls, index: int, item) -> 'Edit':
        return cls(DELETION, index, item)

    @classmethod
    def insertion(cls, index: int, item) -> 'Edit':
        return cls(INSERTION, index, item)


# History node: (edit, prev_node)
# prev_node: reference to previous node tuple or None
# Paths branching from the same parent share the parent's nodes.

class Path:
    """
    An immutable candidate solution in the edit graph.

    Each transition returns a new Path that links one new edit onto the
    history of its parent, so branching costs O(1) and the full script is
    only rebuilt when `sequence` is read.

    A transition that does not apply returns None and leaves the receiver
    untouched.
    """

    __slots__ = ('endpoint', 'deletions', 'insertions', 'consumptions', '_history')

    def __init__(
        self,
        endpoint: tuple[int, int] = (0, 0),
        deletions: int = 0,
        insertions: int = 0,
        consumptions: int = 0,
        history: tuple | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.deletions = deletions
        self.insertions = insertions
        self.consumptions = consumptions
        self._history = history

    @classmethod
    def start(cls) -> 'Path':
        return cls()

    def __repr__(self) -> str:
        return (f"Path(endpoint={self.endpoint}, deletions={self.deletions}, "
                f"insertions={self.insertions}, consumptions={self.consumptions})")

    def __len__(self) -> int:
        return self.deletions + self.insertions + self.consumptions

    def __iter__(self) -> Iterator[Edit]:
        return iter(self.sequence)

    @property
    def sequence(self) -> list[Edit]:
        """The edit script accumulated so far, in traversal order."""
        edits = []
        node = self._history
        while node is not None:
            edit, node = node
            edits.append(edit)
        edits.reverse()
        return edits

    @property
    def cost(self) -> int:
        """Number of non-NIL edits."""
        return self.deletions + self.insertions

    @property
    def axis(self) -> int:
        return self.deletions - self.insertions

    @property
    def absolute_depth(self) -> int:
        # A match advances both coordinates, so it weighs as two steps.
        return self.deletions + self.insertions + 2 * self.consumptions

    def deletion(self, first: Sequence) -> 'Path | None':
        i, j = self.endpoint
        if i >= len(first):
            return None
        return Path(
            (i + 1, j),
            self.deletions + 1,
            self.insertions,
            self.consumptions,
            (Edit.deletion(i, first[i]), self._history),
        )

    def insertion(self, second: Sequence) -> 'Path | None':
        i, j = self.endpoint
        if j >= len(second):
            return None
        return Path(
            (i, j + 1),
            self.deletions,
            self.insertions + 1,
            self.consumptions,
            (Edit.insertion(j, second[j]), self._history),
        )

    def consume_free(self, first: Sequence, second: Sequence, equal: Callable) -> 'Path | None':
        i, j = self.endpoint
        if i >= len(first) or j >= len(second) or not equal(first[i], second[j]):
            return None
        return Path(
            (i + 1, j + 1),
            self.deletions,
            self.insertions,
            self.consumptions + 1,
            (Edit.nil(i, first[i]), self._history),
        )

    def consume_all_free(self, first: Sequence, second: Sequence, equal: Callable) -> 'Path':
        """Follow the snake from the current coordinate as far as it goes."""
        path = self
        while True:
            new = path.consume_free(first, second, equal)
            if new is None:
                return path
            path = new

    # Grid-oriented names for the same moves.
    move_right = deletion
    move_down = insertion
    move_diagonal = consume_free
