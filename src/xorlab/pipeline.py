import random
from dataclasses import dataclass
from typing import List, Optional

from .cipher import decrypt, encrypt
from .codec import Message
from .frequency import tabulate
from .keys import Key
from .normalizer import normalize
from .recovery import REFERENCE_CHAR, recover_key


@dataclass(frozen=True)
class PipelineResult:
    normalized: str
    key: Key
    ciphertext: Message
    most_frequent: List[str]
    recovered_key: Key
    decrypted: Message

    @property
    def key_recovered(self) -> bool:
        return self.recovered_key == self.key

    @property
    def decode_failures(self) -> List[str]:
        """Names of the stages whose text had to be replaced by ""."""
        failed = []
        if self.ciphertext.decode_failed:
            failed.append("ciphertext")
        if self.decrypted.decode_failed:
            failed.append("decrypted")
        return failed


def run_pipeline(
    raw_text: str,
    key: Optional[Key] = None,
    rng: Optional[random.Random] = None,
    reference: str = REFERENCE_CHAR,
    strict: bool = False,
) -> PipelineResult:
    """
    normalize -> encrypt -> tabulate -> recover key -> decrypt.

    A key is generated from `rng` when none is given. With strict=True a
    ciphertext or plaintext that is not valid UTF-16 raises DecodeError
    instead of being reported through decode_failures.
    """
    normalized = normalize(raw_text)
    real_key = key if key is not None else Key.generate(rng)
    ciphertext = encrypt(Message.from_text(normalized), real_key, strict=strict)
    most_frequent = tabulate(ciphertext.text).most_frequent_per_slot()
    guessed = recover_key(most_frequent, reference)
    decrypted = decrypt(ciphertext, guessed, strict=strict)
    return PipelineResult(
        normalized=normalized,
        key=real_key,
        ciphertext=ciphertext,
        most_frequent=most_frequent,
        recovered_key=guessed,
        decrypted=decrypted,
    )
