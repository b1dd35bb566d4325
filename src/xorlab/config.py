import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .history import HISTORY_PATH

CONFIG_PATH = Path.home() / ".xorlab.json"

ENV_MAPPING: Dict[str, str] = {
    "runs_dir": "XORLAB_RUNS_DIR",
    "reference_char": "XORLAB_REFERENCE_CHAR",
    "history_path": "XORLAB_HISTORY_PATH",
    "seed": "XORLAB_SEED",
}


@dataclass
class XorlabConfig:
    runs_dir: str = ""
    reference_char: str = ""
    history_path: str = ""
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "runs_dir": self.runs_dir,
            "reference_char": self.reference_char,
            "history_path": self.history_path,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "XorlabConfig":
        seed = data.get("seed")
        return cls(
            runs_dir=str(data.get("runs_dir", "") or ""),
            reference_char=str(data.get("reference_char", "") or ""),
            history_path=str(data.get("history_path", "") or ""),
            seed=int(seed) if seed is not None and seed != "" else None,
        )

    def resolved_runs_dir(self) -> Path:
        return Path(self.runs_dir or "runs")

    def resolved_reference(self) -> str:
        reference = self.reference_char or "E"
        if len(reference) != 1:
            raise ValueError(f"Reference must be a single character, got {reference!r}")
        return reference

    def resolved_history_path(self) -> Path:
        return Path(self.history_path).expanduser() if self.history_path else HISTORY_PATH


def _merge_env(cfg: XorlabConfig) -> XorlabConfig:
    for field_name, env_var in ENV_MAPPING.items():
        env_val = os.getenv(env_var, "")
        if not env_val or getattr(cfg, field_name) not in ("", None):
            continue
        if field_name == "seed":
            try:
                cfg.seed = int(env_val)
            except ValueError:
                raise ValueError(f"{env_var} must be an integer, got {env_val!r}") from None
        else:
            setattr(cfg, field_name, env_val)
    return cfg


def load_config(path: Path = CONFIG_PATH) -> XorlabConfig:
    config = XorlabConfig()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            config = XorlabConfig.from_dict(data)
        except (OSError, ValueError, TypeError, AttributeError):
            # Fall back to defaults/env if file malformed.
            config = XorlabConfig()
    return _merge_env(config)


def save_config(config: XorlabConfig, path: Path = CONFIG_PATH) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
