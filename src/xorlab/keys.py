import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .codec import BytePair, bytes_to_pairs, checked_pair, pairs_to_bytes

KEY_SLOTS = 4

Block = Union[BytePair, bytes, Sequence[int]]


@dataclass(frozen=True)
class Key:
    """
    Repeating XOR key made of KEY_SLOTS two-byte blocks.

    Slot i is applied to every code unit whose position is i mod KEY_SLOTS.
    """

    pairs: Tuple[BytePair, ...]

    def __post_init__(self) -> None:
        if len(self.pairs) != KEY_SLOTS:
            raise ValueError(f"Key must have {KEY_SLOTS} slots, got {len(self.pairs)}.")

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "Key":
        """
        Draw a random key. Not suitable for real secrets.

        Pass a seeded random.Random to get a reproducible key.
        """
        source = rng if rng is not None else random.Random()
        return cls(tuple(BytePair(source.randrange(256), source.randrange(256)) for _ in range(KEY_SLOTS)))

    @classmethod
    def from_bytes(cls, blocks: Iterable[Block]) -> "Key":
        return cls(tuple(checked_pair(block) for block in blocks))

    @classmethod
    def from_hex(cls, value: str) -> "Key":
        cleaned = "".join(value.split())
        if len(cleaned) != KEY_SLOTS * 4:
            raise ValueError(f"Hex key must have {KEY_SLOTS * 4} digits, got {len(cleaned)}.")
        return cls(tuple(bytes_to_pairs(bytes.fromhex(cleaned))))

    def to_bytes(self) -> bytes:
        return pairs_to_bytes(self.pairs)

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def render(self) -> List[str]:
        """One line per slot: both bytes as 8-digit binary."""
        return [f"{pair.hi:08b} {pair.lo:08b}" for pair in self.pairs]
