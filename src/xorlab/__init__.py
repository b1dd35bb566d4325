"""
xorlab: a toy repeating-key XOR cipher over UTF-16 text and a
letter-frequency attack that tries to recover its key.
"""

from .cipher import decrypt, encrypt, transform
from .codec import (
    BytePair,
    DecodeError,
    Message,
    decode_units,
    decode_units_lenient,
    encode_units,
)
from .config import XorlabConfig, load_config, save_config
from .frequency import EMPTY_SLOT_CHAR, FrequencyTable, tabulate
from .history import log_event
from .keys import KEY_SLOTS, Key
from .normalizer import normalize
from .pipeline import PipelineResult, run_pipeline
from .recovery import REFERENCE_CHAR, guess_key, recover_key
from .runs import create_run_dir, read_input, write_artifacts

__all__ = [
    "BytePair",
    "DecodeError",
    "EMPTY_SLOT_CHAR",
    "FrequencyTable",
    "KEY_SLOTS",
    "Key",
    "Message",
    "PipelineResult",
    "REFERENCE_CHAR",
    "XorlabConfig",
    "create_run_dir",
    "decode_units",
    "decode_units_lenient",
    "decrypt",
    "encode_units",
    "encrypt",
    "guess_key",
    "load_config",
    "log_event",
    "normalize",
    "read_input",
    "recover_key",
    "run_pipeline",
    "save_config",
    "tabulate",
    "transform",
    "write_artifacts",
]
