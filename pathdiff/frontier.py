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
# Breadth-first search over the edit graph.

import logging
import operator
from collections import deque
from collections.abc import Callable, Sequence

from pathdiff.edit_path import Path, SearchExhaustedError


logger = logging.getLogger(__name__)


def frontier_diff(first: Sequence, second: Sequence, equal: Callable = operator.eq) -> Path:
    """
    Returns a terminal Path with the fewest deletions and insertions.

    Every popped Path first follows its snake, then branches into a deletion
    and an insertion. Paths leave the FIFO in order of non-diagonal edit
    count, so the first one reaching (len(first), len(second)) is minimal.

    A coordinate is queued at most once: the first arrival already has the
    lowest cost any later arrival could have.

    Memory: up to (len(first) + 1) * (len(second) + 1) coordinates can be
    queued. Paths share their history, so each queued Path adds O(1).
    """
    terminal = (len(first), len(second))

    frontier = deque([Path.start()])
    visited = {(0, 0)}
    expanded = 0

    while frontier:
        path = frontier.popleft().consume_all_free(first, second, equal)
        expanded += 1

        if path.endpoint == terminal:
            logger.debug(f"frontier: cost={path.cost}, expanded={expanded}, visited={len(visited)}")
            return path

        for new in (path.deletion(first), path.insertion(second)):
            if new is not None and new.endpoint not in visited:
                visited.add(new.endpoint)
                frontier.append(new)

    logger.error(f"frontier: queue drained after {expanded} paths without reaching {terminal}")
    raise SearchExhaustedError(f"Implementation error: terminal coordinate {terminal} was never reached")
