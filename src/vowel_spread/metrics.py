from typing import List

import numpy as np

from vowel_spread.config import NUM_SLOTS
from vowel_spread.distribution import VowelCounts


def slot_totals(batch: List[VowelCounts]):
    if len(batch) == 0:
        return np.zeros(NUM_SLOTS, dtype=int)
    return np.array([c.counts for c in batch], dtype=int).sum(axis=0)


def imbalance(counts: VowelCounts) -> int:
    a = np.array(counts.counts)
    return int(a.max() - a.min())


def pass_rate(num_total, num_passed):
    if num_total == 0:
        return None
    return num_passed / num_total


def summarize(batch: List[VowelCounts]):
    totals = slot_totals(batch)
    return {
        "num_cases": len(batch),
        "total_chars": int(totals.sum()),
        "slot_totals": totals.tolist(),
        "max_imbalance": max((imbalance(c) for c in batch), default=0)
    }
