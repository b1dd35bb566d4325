from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

ENC_FILENAME = "enc.txt"
DEC_FILENAME = "dec.txt"


def read_input(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def create_run_dir(base: Path, now: Optional[datetime] = None) -> Path:
    """Create base/<timestamp>/ for one run's artifacts."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%dT%H-%M-%S.%f")
    run_dir = Path(base) / stamp
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def write_artifacts(run_dir: Path, ciphertext: str, decrypted: str) -> Tuple[Path, Path]:
    enc_path = Path(run_dir) / ENC_FILENAME
    dec_path = Path(run_dir) / DEC_FILENAME
    enc_path.write_text(ciphertext, encoding="utf-8")
    dec_path.write_text(decrypted, encoding="utf-8")
    return enc_path, dec_path
