from typing import Sequence

from .codec import BytePair, encode_units
from .frequency import tabulate
from .keys import KEY_SLOTS, Key

# Most common letter in English text.
REFERENCE_CHAR = "E"


def _first_unit(ch: str) -> BytePair:
    units = encode_units(ch)
    if not units:
        raise ValueError("Cannot take a code unit of an empty string.")
    return units[0]


def recover_key(most_frequent: Sequence[str], reference: str = REFERENCE_CHAR) -> Key:
    """
    Guess the key assuming each slot's most frequent ciphertext character
    is the encryption of `reference`.

    Slot s gets encode(reference) XOR encode(most_frequent[s]). This is a
    statistical guess: short or unusual plaintexts give a wrong key.
    """
    if len(most_frequent) != KEY_SLOTS:
        raise ValueError(f"Need {KEY_SLOTS} characters, got {len(most_frequent)}.")
    ref = _first_unit(reference)
    return Key(tuple(ref.xor(_first_unit(ch)) for ch in most_frequent))


def guess_key(ciphertext: str, reference: str = REFERENCE_CHAR) -> Key:
    """Tabulate ciphertext characters per slot and recover a key from them."""
    return recover_key(tabulate(ciphertext).most_frequent_per_slot(), reference)
