"""
Operand kinds and per-kind dispatch.

Lines, segments and planes accept each other (and bare points) as operands
for distance, intersection and closest-point queries. Each such operation
declares a table from operand kind to implementation; ``dispatch`` looks up
the operand's kind and calls the matching entry.
"""

from enum import Enum
from typing import Any, Callable, Dict

from .errors import UnsupportedOperandError


class Kind(Enum):
    POINT = "point"
    LINE = "line"
    SEGMENT = "segment"
    PLANE = "plane"


def kind_of(obj: Any) -> Kind:
    """
    Return the kind of a geometric operand.

    Lines, segments and planes carry a ``kind`` class attribute. Anything
    else (arrays, tuples, vertices) is treated as a point.
    """
    kind = getattr(obj, "kind", None)
    return kind if isinstance(kind, Kind) else Kind.POINT


def dispatch(table: Dict[Kind, Callable], obj: Any, operation: str):
    """
    Call the entry of ``table`` matching the kind of ``obj``.

    Parameters
    ----------
    table : dict
        Mapping from ``Kind`` to a one-argument callable.
    obj : object
        The operand.
    operation : str
        Name of the operation, used in the error message.

    Raises
    ------
    UnsupportedOperandError
        If ``table`` has no entry for the operand's kind.
    """
    kind = kind_of(obj)
    try:
        handler = table[kind]
    except KeyError:
        raise UnsupportedOperandError(
            f"{operation} is not defined for a {kind.value} operand"
        ) from None
    return handler(obj)
