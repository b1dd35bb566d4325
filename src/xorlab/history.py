import json
from pathlib import Path
from typing import Any, Dict, Optional

HISTORY_PATH = Path.home() / ".xorlab_history.jsonl"


def log_event(action: str, payload: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Record one run or decode substitution as a JSON object on its own line."""
    record = {"action": action, **payload}
    target = path or HISTORY_PATH
    try:
        with target.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        # an unwritable history file leaves the run's results untouched
        pass
