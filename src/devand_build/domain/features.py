"""Compiler feature-flag argument rendering."""

import typing as t

FEATURE_ARG_PREFIX: t.Final = "--features="


def render(flags: t.Iterable[str]) -> str:
    """Render feature flags as a compiler argument string.

    Order is preserved so the output is deterministic. Flag contents are
    passed through unchecked; the compiler reports unknown features.

    Examples:
        >>> render([])
        ''
        >>> render(["a", "b"])
        '--features=a --features=b'
    """
    return " ".join(f"{FEATURE_ARG_PREFIX}{flag}" for flag in flags)
