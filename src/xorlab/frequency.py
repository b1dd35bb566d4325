from typing import Dict, List

from .keys import KEY_SLOTS

# Reported for a slot that never received a character.
EMPTY_SLOT_CHAR = " "


class FrequencyTable:
    """
    Per-slot character counts for a ciphertext.

    Each slot keeps its own counts. On a tie for the highest count, the
    character that was added to that slot first wins.
    """

    def __init__(self, slots: int = KEY_SLOTS) -> None:
        if slots < 1:
            raise ValueError("Frequency table needs at least one slot.")
        # dicts keep insertion order, which doubles as first-seen order
        self._counts: List[Dict[str, int]] = [{} for _ in range(slots)]

    def add(self, slot: int, ch: str) -> None:
        if not 0 <= slot < len(self._counts):
            raise IndexError(f"Slot {slot} out of range 0..{len(self._counts) - 1}")
        if len(ch) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")
        counts = self._counts[slot]
        counts[ch] = counts.get(ch, 0) + 1

    def count(self, slot: int, ch: str) -> int:
        return self._counts[slot].get(ch, 0)

    def slot_counts(self, slot: int) -> Dict[str, int]:
        return dict(self._counts[slot])

    def most_frequent_per_slot(self) -> List[str]:
        result: List[str] = []
        for counts in self._counts:
            best = EMPTY_SLOT_CHAR
            best_count = 0
            for ch, seen in counts.items():
                if seen > best_count:
                    best, best_count = ch, seen
            result.append(best)
        return result


def tabulate(text: str, slots: int = KEY_SLOTS) -> FrequencyTable:
    """Count every character of text into slot position mod slots."""
    table = FrequencyTable(slots)
    for index, ch in enumerate(text):
        table.add(index % slots, ch)
    return table
