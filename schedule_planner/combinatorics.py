# combinatorics.py
# Cartesian product over choice sets, flattening list elements into each row.

from itertools import product
from typing import Any, List, Sequence

__all__ = ["cartesian_product"]


def cartesian_product(*inputs: Sequence[Any]) -> List[Any]:
    # Every combination of one element per input, as flat rows.
    if not inputs:
        return []
    if len(inputs) == 1:
        # A single choice set is already its own list of rows; elements are not wrapped.
        return list(inputs[0])

    rows: List[Any] = []
    for combo in product(*inputs):
        row: List[Any] = []
        for element in combo:
            if isinstance(element, (list, tuple)):
                row.extend(element)
            else:
                row.append(element)
        rows.append(row)
    return rows
