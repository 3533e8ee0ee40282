import sys
from enum import IntEnum
from typing import Optional


class Ordering(IntEnum):
    """
    The outcome of comparing two numbers, ordered so that it can be compared against 0 like a classic cmp result
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1


def owner_class(func) -> Optional[type]:
    """
    get the class a function was defined in, by following its qualified name from its module.

    :return: the owning class, or None if the function was defined at module level or inside another function
    """
    path = func.__qualname__.split('.')[:-1]
    if not path or '<locals>' in path:
        return None
    ret = sys.modules[func.__module__]
    for part in path:
        ret = getattr(ret, part)
    return ret
