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
# Generation-layered search with per-diagonal pruning.
# See http://www.xmailserver.org/diff2.pdf

import logging
import operator
from collections.abc import Callable, Sequence

from pathdiff.edit_path import Path, SearchExhaustedError


logger = logging.getLogger(__name__)


def layered_diff(first: Sequence, second: Sequence, equal: Callable = operator.eq) -> Path:
    """
    Returns a terminal Path with the fewest deletions and insertions.

    Generation d holds the Paths with exactly d deletions plus insertions.
    Each new Path follows its snake immediately, and a table keyed by
    diagonal (k = deletions - insertions) records the furthest reach seen
    so far. A Path that falls short of that reach is dropped before it is
    expanded: the Path holding the record sits further along the same
    diagonal and can finish with no more edits.

    Generations are consumed in FIFO order. A diagonal only ever holds
    Paths of one parity, so by the time generation d is popped the table
    entry for a diagonal comes from generation d or earlier, and no ranking
    inside a generation is needed.

    Memory: bounded by the visited coordinates, at most
    (len(first) + 1) * (len(second) + 1), with O(1) per live Path since
    histories are shared.
    """
    n = len(first)
    m = len(second)
    terminal = (n, m)

    start = Path.start().consume_all_free(first, second, equal)
    visited = {start.endpoint}

    # k ranges over [-m, n]
    axis_best = dict.fromkeys(range(-m, n + 1), 0)

    generation = [start]
    expanded = 0
    pruned = 0

    # At most n + m non-diagonal edits, so generations 0..n+m.
    for depth in range(n + m + 1):
        next_generation = []

        for path in generation:
            if path.endpoint == terminal:
                logger.debug(f"layered: cost={path.cost}, generations={depth + 1}, "
                             f"expanded={expanded}, pruned={pruned}")
                return path

            if path.absolute_depth < axis_best[path.axis]:
                pruned += 1
                continue

            expanded += 1
            for new in (path.deletion(first), path.insertion(second)):
                if new is None or new.endpoint in visited:
                    continue
                visited.add(new.endpoint)

                new = new.consume_all_free(first, second, equal)
                if new.absolute_depth > axis_best[new.axis]:
                    axis_best[new.axis] = new.absolute_depth

                next_generation.append(new)

        generation = next_generation

    logger.error(f"layered: {n + m + 1} generations exhausted without reaching {terminal}")
    raise SearchExhaustedError(f"Implementation error: terminal coordinate {terminal} was never reached")
