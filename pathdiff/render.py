from collections.abc import Iterator, Sequence

from rich.text import Text

from pathdiff.differ import get_opcodes
from pathdiff.edit_path import DELETION, INSERTION, NIL, Edit


PREFIXES = {
    NIL: '  ',
    DELETION: '- ',
    INSERTION: '+ ',
}

STYLES = {
    DELETION: 'red',
    INSERTION: 'green',
}

UNIFIED_STYLES = {
    '-': 'red',
    '+': 'green',
    '@': 'cyan',
}


def format_edit(edit: Edit) -> str:
    return PREFIXES[edit.tag] + str(edit.item)


def render(script) -> str:
    """Plain rendering, one line per edit."""
    return ''.join(format_edit(edit) + '\n' for edit in script)


def render_rich(script) -> Text:
    """Same lines as render(), with deletions in red and insertions in green."""
    text = Text()
    for edit in script:
        text.append(format_edit(edit) + '\n', style=STYLES.get(edit.tag))
    return text


def colorize_unified(lines) -> Text:
    text = Text()
    for line in lines:
        # headers start with '---'/'+++' and stay bold
        if line.startswith(('---', '+++')):
            text.append(line, style='bold')
        else:
            text.append(line, style=UNIFIED_STYLES.get(line[:1]))
    return text


def get_grouped_opcodes(opcodes, context: int = 3) -> list[list[tuple[str, int, int, int, int]]]:
    """
    Splits opcodes into hunks with up to `context` equal lines around each change.
    Same grouping as difflib.SequenceMatcher.get_grouped_opcodes, except that
    a script without changes yields no hunks.
    """
    codes = list(opcodes)
    if not codes:
        return []

    # Leading and trailing equal blocks keep only their context lines
    tag, i1, i2, j1, j2 = codes[0]
    if tag == 'equal':
        codes[0] = (tag, max(i1, i2 - context), i2, max(j1, j2 - context), j2)
    tag, i1, i2, j1, j2 = codes[-1]
    if tag == 'equal':
        codes[-1] = (tag, i1, min(i2, i1 + context), j1, min(j2, j1 + context))

    grouped_opcodes = []
    group = []

    for tag, i1, i2, j1, j2 in codes:
        # Large equal block: close the current hunk, open the next one
        if tag == 'equal' and i2 - i1 > 2 * context:
            group.append((tag, i1, min(i2, i1 + context), j1, min(j2, j1 + context)))
            grouped_opcodes.append(group)
            group = []
            i1 = max(i1, i2 - context)
            j1 = max(j1, j2 - context)

        group.append((tag, i1, i2, j1, j2))

    if group and not (len(group) == 1 and group[0][0] == 'equal'):
        grouped_opcodes.append(group)

    return grouped_opcodes


def _format_range(start: int, stop: int) -> str:
    """Unified range notation: 1-based start, length omitted when it is 1."""
    beginning = start + 1
    length = stop - start
    if length == 1:
        return f"{beginning}"
    if not length:
        # empty ranges begin at the line just before the range
        beginning -= 1
    return f"{beginning},{length}"


def unified_diff(
    first: Sequence,
    second: Sequence,
    script,
    fromfile: str = 'a',
    tofile: str = 'b',
    fromfiledate: str = '',
    tofiledate: str = '',
    context: int = 3,
) -> Iterator[str]:
    """
    Yields the lines of a unified diff for `script`.
    Nothing is yielded when the script contains no changes.
    """
    grouped_opcodes = get_grouped_opcodes(get_opcodes(script), context)
    if not grouped_opcodes:
        return

    fromdate = f"\t{fromfiledate}" if fromfiledate else ''
    todate = f"\t{tofiledate}" if tofiledate else ''
    yield f"--- {fromfile}{fromdate}\n"
    yield f"+++ {tofile}{todate}\n"

    for group in grouped_opcodes:
        first_op, last_op = group[0], group[-1]
        range_a = _format_range(first_op[1], last_op[2])
        range_b = _format_range(first_op[3], last_op[4])
        yield f"@@ -{range_a} +{range_b} @@\n"

        for tag, i1, i2, j1, j2 in group:
            if tag == 'equal':
                for line in first[i1:i2]:
                    yield f" {line}\n"
                continue
            if tag in ('replace', 'delete'):
                for line in first[i1:i2]:
                    yield f"-{line}\n"
            if tag in ('replace', 'insert'):
                for line in second[j1:j2]:
                    yield f"+{line}\n"
