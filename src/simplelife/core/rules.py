"""Birth/survival rules for binary cellular automata."""
from enum import IntEnum
from typing import Dict, List, Tuple


class BinaryRule(IntEnum):
    """Classic binary B/S notation rules."""
    CONWAY_LIFE = 0        # B3/S23


# B/S rules: (birth_neighbors, survive_neighbors)
RULES: Dict[BinaryRule, Tuple[List[int], List[int]]] = {
    BinaryRule.CONWAY_LIFE: ([3], [2, 3]),
}


def get_bs_masks(rule: BinaryRule = BinaryRule.CONWAY_LIFE) -> Tuple[int, int]:
    """Get birth/survival neighbor masks for a binary rule.

    Bit ``n`` of a mask is set when a cell with ``n`` live neighbors is
    born (birth mask) or stays alive (survival mask).

    Args:
        rule: Rule to build the masks for

    Returns:
        Tuple of (born, survive) bitmasks
    """
    birth, survive = RULES[rule]
    born_mask = 0
    survive_mask = 0
    for count in birth:
        if 0 <= count <= 8:
            born_mask |= 1 << count
    for count in survive:
        if 0 <= count <= 8:
            survive_mask |= 1 << count
    return born_mask, survive_mask
