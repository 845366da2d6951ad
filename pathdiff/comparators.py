"""Line comparators for the solvers. All of them are pure functions."""

import re


_WHITESPACE_RUN = re.compile(r'\s+')


def exact(a, b) -> bool:
    return a == b


def ignore_leading_whitespace(a: str, b: str) -> bool:
    return a.lstrip() == b.lstrip()


def ignore_trailing_whitespace(a: str, b: str) -> bool:
    return a.rstrip() == b.rstrip()


def ignore_whitespace_change(a: str, b: str) -> bool:
    """Treats any run of whitespace as a single space, like `diff -b`."""
    return _WHITESPACE_RUN.sub(' ', a).rstrip() == _WHITESPACE_RUN.sub(' ', b).rstrip()


COMPARATORS = {
    'exact': exact,
    'ignore-leading-whitespace': ignore_leading_whitespace,
    'ignore-trailing-whitespace': ignore_trailing_whitespace,
    'ignore-whitespace-change': ignore_whitespace_change,
}


def get_comparator(name: str):
    try:
        return COMPARATORS[name]
    except KeyError as e:
        raise ValueError(f"Unknown comparator '{name}'. Expected one of: {', '.join(COMPARATORS)}") from e
