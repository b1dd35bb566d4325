from Crypto.Util.strxor import strxor

from .codec import Message, bytes_to_pairs, pairs_to_bytes
from .keys import KEY_SLOTS, Key


def _keystream(key: Key, length: int) -> bytes:
    block = key.to_bytes()
    repeats = -(-length // KEY_SLOTS)
    return (block * repeats)[: length * 2]


def transform(message: Message, key: Key, strict: bool = False) -> Message:
    """
    XOR every code unit with the key slot at its position mod KEY_SLOTS.

    The same call encrypts and decrypts. Inputs are left untouched.
    """
    if not message.pairs:
        return Message.from_pairs((), strict=strict)
    data = pairs_to_bytes(message.pairs)
    mixed = strxor(data, _keystream(key, len(message.pairs)))
    return Message.from_pairs(bytes_to_pairs(mixed), strict=strict)


encrypt = transform
decrypt = transform
