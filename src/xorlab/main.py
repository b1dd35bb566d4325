import argparse
import random
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from .codec import DecodeError
from .config import CONFIG_PATH, load_config
from .history import log_event
from .keys import Key
from .pipeline import PipelineResult, run_pipeline
from .runs import create_run_dir, read_input, write_artifacts


def _parse_key(value: str) -> Key:
    try:
        return Key.from_hex(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid key '{value}': {exc}") from None


def _parse_reference(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError("Reference must be a single character.")
    return value


def _stage(label: str, detail: str = "") -> None:
    line = f"{label:<40}OK"
    if detail:
        line += f" ({detail})"
    print(line)


def _print_key(key: Key) -> None:
    for line in key.render():
        print(line)


def _fail(message: str) -> NoReturn:
    print(f"error: {message}", file=sys.stderr)
    raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encrypt a text file with a 4-slot UTF-16 XOR key, then try to break it by letter frequency."
    )
    parser.add_argument("input", help="UTF-8 text file to encrypt.")
    parser.add_argument("--runs-dir", help="Directory receiving <timestamp>/enc.txt and dec.txt (default: runs).")
    parser.add_argument("--seed", type=int, help="Seed for key generation, for reproducible runs.")
    parser.add_argument("--key", type=_parse_key, help="Use this key (16 hex digits) instead of a random one.")
    parser.add_argument(
        "--reference",
        type=_parse_reference,
        help="Plaintext character assumed most frequent (default: E).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort when a stage produces invalid UTF-16 instead of writing an empty text.",
    )
    parser.add_argument("--config", type=Path, default=CONFIG_PATH, help="Config file path.")
    parser.add_argument(
        "--no-history", action="store_true", help="Do not record the operation in history."
    )
    return parser


def _report(result: PipelineResult, history_path: Path, no_history: bool) -> None:
    if no_history:
        return
    for stage in result.decode_failures:
        log_event(
            action="decode_substituted",
            payload={"stage": stage, "units": len(result.ciphertext)},
            path=history_path,
        )


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config)
        reference = args.reference or config.resolved_reference()
    except ValueError as exc:
        parser.error(str(exc))

    runs_dir = Path(args.runs_dir) if args.runs_dir else config.resolved_runs_dir()
    seed = args.seed if args.seed is not None else config.seed
    history_path = config.resolved_history_path()

    key = args.key if args.key is not None else Key.generate(random.Random(seed))
    _stage("Generating encryption key...")
    _print_key(key)

    try:
        contents = read_input(Path(args.input))
    except (OSError, UnicodeDecodeError) as exc:
        _fail(f"could not read {args.input}: {exc}")
    _stage(f"Reading from {args.input}...")

    try:
        result = run_pipeline(contents, key=key, reference=reference, strict=args.strict)
    except DecodeError as exc:
        _fail(str(exc))
    _stage("Encrypting file contents...")
    _stage("Analyzing chars frequencies...")
    _stage("Generating potential decryption key...")
    _print_key(result.recovered_key)
    _report(result, history_path, args.no_history)

    try:
        run_dir = create_run_dir(runs_dir)
    except OSError as exc:
        _fail(f"could not create results directory: {exc}")
    _stage("Spawning dirs...")

    try:
        enc_path, dec_path = write_artifacts(run_dir, result.ciphertext.text, result.decrypted.text)
    except OSError as exc:
        _fail(f"could not write results to {run_dir}: {exc}")
    _stage("Decrypting...", f"{enc_path}, {dec_path}")
    for stage in result.decode_failures:
        print(f"warning: {stage} text is not valid UTF-16, wrote an empty file", file=sys.stderr)

    if not args.no_history:
        log_event(
            action="run",
            payload={
                "in_file": args.input,
                "run_dir": str(run_dir),
                "key": key.to_hex(),
                "recovered_key": result.recovered_key.to_hex(),
                "key_recovered": result.key_recovered,
                "units": len(result.ciphertext),
            },
            path=history_path,
        )


if __name__ == "__main__":
    main()
