"""Power-set generation.

The power set of a set with n members has 2^n members. Generation takes
O(2^n * n) time and keeps all 2^n subsets in memory, which is only
practical up to roughly n = 20. No limit is enforced; a warning is logged
when n exceeds the configured threshold (``power_set.warn_threshold``).
"""

import logging
from typing import Any, Dict, List, Optional

from setlib.core.config import get_int_config_value
from setlib.core.errors import NullOperandError
from setlib.core.schema.element import Element, Nested
from setlib.core.sets import Set, SetOfSets

logger = logging.getLogger(__name__)

DEFAULT_WARN_THRESHOLD = 20


def power_set(source: Optional[Set], config: Optional[Dict[str, Any]] = None) -> SetOfSets:
    """Enumerate every subset of source.

    Members are snapshotted into a list once; subset i contains member j
    iff bit j of i is set, for i in [0, 2^n). Nested members are deep-copied
    into each subset, so the result shares no mutable structure with source
    or between subsets.

    Args:
        source: Set to enumerate
        config: Optional config dict (uses setlib.json if not provided)

    Returns:
        SetOfSets with 2^n members, including the empty set and a copy of
        source itself

    Raises:
        NullOperandError: If source is None

    Example:
        >>> subsets = power_set(Set([1, 2]))
        >>> len(subsets)
        4
        >>> Set() in subsets and Set([1, 2]) in subsets
        True
    """
    if source is None:
        raise NullOperandError("Cannot build the power set of None", operand="source")

    members: List[Element] = list(source)
    n = len(members)

    threshold = get_int_config_value(
        ["power_set", "warn_threshold"], default=DEFAULT_WARN_THRESHOLD, config=config
    )
    if n > threshold:
        logger.warning(
            f"Power set of {n} members will hold {2 ** n} subsets "
            f"(threshold {threshold}); this may exhaust memory"
        )
    logger.debug(f"Generating power set of set {source.id} with {n} members")

    result = SetOfSets()
    for mask in range(1 << n):
        subset = Set()
        for j, member in enumerate(members):
            if mask >> j & 1:
                if isinstance(member, Nested):
                    member = Nested(member.value.deep_copy())
                subset.add(member)
        result.add(subset)

    return result
