"""Location code assembly: ``GN-<PARISH>-<XXXYYY>``."""

from __future__ import annotations

from grenloc.reference.grid import CODE_PREFIX, DIGITS_PER_AXIS, PARISH_CODE_PATTERN


def _tail_digits(index: int) -> str:
    """Last three decimal digits of ``index``, zero padded.

    The sign of a negative index is dropped. Quantization never yields one.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Grid index must be an int, got {index!r}")
    return str(abs(index))[-DIGITS_PER_AXIS:].zfill(DIGITS_PER_AXIS)


def format_code(parish_code: str, grid_x: int, grid_y: int) -> str:
    """
    Build the shareable location code.

    Only the low three digits of each index survive, so cells whose indices
    agree modulo 1000 share a code.

    >>> format_code("STG", 26482, 134731)
    'GN-STG-482731'

    Raises:
        ValueError: If ``parish_code`` is not three uppercase letters, or a
            grid index is not an int.
    """
    if not isinstance(parish_code, str) or not PARISH_CODE_PATTERN.fullmatch(parish_code):
        raise ValueError(f"Parish code must be three uppercase letters, got {parish_code!r}")
    return f"{CODE_PREFIX}-{parish_code}-{_tail_digits(grid_x)}{_tail_digits(grid_y)}"
