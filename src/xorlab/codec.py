from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Tuple


class DecodeError(ValueError):
    """Raised when a code-unit sequence is not valid UTF-16."""

    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"Invalid UTF-16 at code unit {position}: {reason}")
        self.position = position
        self.reason = reason


class BytePair(NamedTuple):
    """One UTF-16 code unit split into its big-endian bytes."""

    hi: int
    lo: int

    @classmethod
    def from_unit(cls, unit: int) -> "BytePair":
        if not 0 <= unit <= 0xFFFF:
            raise ValueError(f"Code unit out of range: {unit:#x}")
        return cls(unit >> 8, unit & 0xFF)

    @property
    def value(self) -> int:
        return (self.hi << 8) | self.lo

    def xor(self, other: "BytePair") -> "BytePair":
        return BytePair(self.hi ^ other.hi, self.lo ^ other.lo)


def checked_pair(pair: Iterable[int]) -> BytePair:
    """Build a BytePair, rejecting anything that is not two values in 0..255."""
    values = tuple(pair)
    if len(values) != 2:
        raise ValueError(f"Code unit must hold exactly 2 bytes, got {len(values)}.")
    hi, lo = values
    if not (0 <= hi <= 0xFF and 0 <= lo <= 0xFF):
        raise ValueError(f"Code unit bytes out of range: {values}")
    return BytePair(hi, lo)


def pairs_to_bytes(pairs: Iterable[BytePair]) -> bytes:
    return bytes(b for pair in pairs for b in (pair.hi, pair.lo))


def bytes_to_pairs(data: bytes) -> List[BytePair]:
    if len(data) % 2:
        raise ValueError("Byte buffer length must be even.")
    return [BytePair(data[i], data[i + 1]) for i in range(0, len(data), 2)]


def encode_units(text: str) -> List[BytePair]:
    """
    Split text into its UTF-16 code units, big-endian.

    Characters outside the BMP become two units (a surrogate pair). Lone
    surrogates already present in a Python string are passed through as-is.
    """
    return bytes_to_pairs(text.encode("utf-16-be", errors="surrogatepass"))


def decode_units(pairs: Iterable[BytePair]) -> str:
    """Reassemble code units into text, raising DecodeError on malformed input."""
    data = pairs_to_bytes(pairs)
    try:
        return data.decode("utf-16-be")
    except UnicodeDecodeError as exc:
        raise DecodeError(exc.start // 2, exc.reason) from exc


def decode_units_lenient(pairs: Iterable[BytePair]) -> Tuple[str, bool]:
    """
    Decode code units, substituting an empty string for malformed input.

    Returns (text, substituted) so callers can see when data was dropped.
    """
    try:
        return decode_units(pairs), False
    except DecodeError:
        return "", True


@dataclass(frozen=True)
class Message:
    pairs: Tuple[BytePair, ...]
    text: str
    decode_failed: bool = False

    @classmethod
    def from_text(cls, text: str) -> "Message":
        return cls(tuple(encode_units(text)), text)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Iterable[int]], strict: bool = False) -> "Message":
        """
        Build a message from code units.

        With strict=True a DecodeError propagates to the caller; otherwise the
        text falls back to "" and decode_failed is set.
        """
        units = tuple(checked_pair(pair) for pair in pairs)
        if strict:
            return cls(units, decode_units(units))
        text, failed = decode_units_lenient(units)
        return cls(units, text, failed)

    def units(self) -> List[int]:
        return [pair.value for pair in self.pairs]

    def __len__(self) -> int:
        return len(self.pairs)
