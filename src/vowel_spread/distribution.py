from dataclasses import dataclass
from typing import List

from vowel_spread.config import VOWELS, NUM_SLOTS
from vowel_spread.utils import ContentAddressable


@dataclass
class TestCase(ContentAddressable):
    n: int

    def get_content(self) -> str:
        return "n: " + repr(self.n)


@dataclass
class VowelCounts:
    counts: List[int]

    def __iter__(self):
        return iter(self.counts)

    def __getitem__(self, i):
        return self.counts[i]

    def __len__(self):
        return len(self.counts)

    def total(self) -> int:
        return sum(self.counts)

    def pretty_print(self):
        return ', '.join(f"{v}={c}" for v, c in zip(VOWELS, self.counts))


def distribute(n: int) -> VowelCounts:
    """Split n across the vowel slots: every slot gets n // 5, and
    the first n % 5 slots get one more."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"cannot distribute a negative count: {n}")
    base_count, extra = divmod(n, NUM_SLOTS)
    return VowelCounts([base_count + (1 if i < extra else 0) for i in range(NUM_SLOTS)])


def render(counts: VowelCounts, alphabet: str = VOWELS) -> str:
    if len(alphabet) != len(counts):
        raise ValueError(f"alphabet '{alphabet}' does not have {len(counts)} slots")
    return ''.join(vowel * times for vowel, times in zip(alphabet, counts))


def spread(n: int) -> str:
    return render(distribute(n))
