"""Command-line interface: print salted digests of text, stdin or files."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from tqdm import tqdm

from saltdigest.config.settings import LOG_LEVELS, get_settings
from saltdigest.core.digest import SaltedDigest
from saltdigest.utils.logger import get_logger, log_event


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saltdigest",
        description="Compute salted SHA-512 digests of text, stdin or files",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files to hash; '-' or no files reads stdin",
    )
    parser.add_argument("--text", help="Hash this text instead of reading files")
    parser.add_argument("--salt", help="Caller salt mixed into the IV")
    parser.add_argument(
        "--origin-tag",
        help="Origin tag override (default: SALTDIGEST_ORIGIN_TAG or 'saltdigest')",
    )
    parser.add_argument("--log-file", type=Path, help="Append JSONL log records here")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: settings.log_level)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Disable the progress bar",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Exit status: 0 if every input was hashed, 1 otherwise
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.text is not None and args.files:
        parser.error("--text cannot be combined with files")

    try:
        settings = get_settings()
    except ValidationError as e:
        parser.error(f"invalid SALTDIGEST_* settings: {e}")

    logger = get_logger(
        "saltdigest.cli",
        log_file=args.log_file or settings.log_file,
        level=args.log_level or settings.log_level,
    )

    try:
        digest = SaltedDigest(args.salt, origin_tag=args.origin_tag)
    except ValueError as e:
        parser.error(str(e))

    if args.text is not None:
        result = digest.compute_hash(args.text)
        print(f'{result.hexdigest}  "{args.text}"')
        return 0

    files = args.files or [Path("-")]
    failures = 0

    for path in tqdm(
        files,
        desc="Hashing files",
        disable=args.quiet or len(files) < 2,
        file=sys.stderr,
    ):
        try:
            if str(path) == "-":
                result = digest.compute_hash(sys.stdin.buffer)
            else:
                result = digest.compute_hash_from_file(path)
        except OSError as e:
            failures += 1
            log_event(
                logger,
                "file_failed",
                f"✗ Failed to hash {path}: {e}",
                level=logging.ERROR,
                path=str(path),
                error=str(e),
            )
            continue

        print(f"{result.hexdigest}  {path}")
        log_event(logger, "file_hashed", f"✓ Hashed {path}", path=str(path), digest=result.hexdigest)

    logger.info(f"Hashed {len(files) - failures}/{len(files)} inputs")

    return 1 if failures else 0
