"""
Command line entry point.

Parses flags into a GenerationPolicy, runs a batch and prints one secret
per line (followed by a strength line when --evaluate-strength is given).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .batching import BatchConfig, BatchOrchestrator
from .config import PassforgeSettings, get_preset_policy, list_presets, load_settings
from .errors import PassforgeError
from .generators import get_generator
from .models import GenerationPolicy, SecretKind
from .strength import MAX_EVALUATED_LENGTH, StrengthReport, get_evaluator
from .wordlist import WordList

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="Generate random passwords or passphrases and optionally score their strength",
    )
    parser.add_argument(
        "-l", "--length", "--min-length",
        dest="length",
        type=int,
        default=None,
        help="Password length; with --max-length this is the minimum (default: 18)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Maximum password length (length drawn uniformly per password)",
    )
    parser.add_argument(
        "-c", "--count",
        type=int,
        default=None,
        help="Number of secrets to generate (default: 1)",
    )
    parser.add_argument(
        "-u", "--no-capitals", "--nc",
        action="store_true",
        help="Exclude uppercase letters",
    )
    parser.add_argument(
        "-n", "--no-numbers", "--nn",
        action="store_true",
        help="Exclude digits",
    )
    parser.add_argument(
        "-s", "--no-symbols", "--ns",
        action="store_true",
        help="Exclude symbols",
    )
    parser.add_argument(
        "--no-lowercase",
        action="store_true",
        help="Exclude lowercase letters",
    )
    parser.add_argument(
        "-p", "--passphrase",
        action="store_true",
        default=None,
        help="Generate a passphrase instead of a password",
    )
    parser.add_argument(
        "-w", "--words",
        type=int,
        default=None,
        help="Number of words in the passphrase (default: 4)",
    )
    parser.add_argument(
        "--separator",
        type=str,
        default=None,
        help="Separator between passphrase words (default: -)",
    )
    parser.add_argument(
        "--word-list",
        type=Path,
        default=None,
        metavar="FILE",
        help="Custom word list, one word per line (or dice-numbered lines)",
    )
    parser.add_argument(
        "--capitalize",
        action="store_true",
        help="Capitalize every passphrase word",
    )
    parser.add_argument(
        "--include-number",
        action="store_true",
        help="Append a random digit to one passphrase word",
    )
    parser.add_argument(
        "-e", "--evaluate-strength",
        action="store_true",
        default=None,
        help="Show a strength estimate for every secret",
    )
    parser.add_argument(
        "--preset",
        type=str,
        default=None,
        help="Preset policy (weak, average, strong); overrides length, class and word flags",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List preset policies and exit",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads for large batches (default: 1)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML settings file (default: $PASSFORGE_CONFIG)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def password_flags(args: argparse.Namespace) -> List[str]:
    """Password-only flags given on the command line."""
    given = {
        "--length": args.length is not None,
        "--max-length": args.max_length is not None,
        "--no-capitals": args.no_capitals,
        "--no-numbers": args.no_numbers,
        "--no-symbols": args.no_symbols,
        "--no-lowercase": args.no_lowercase,
    }
    return [flag for flag, is_given in given.items() if is_given]


def passphrase_flags(args: argparse.Namespace) -> List[str]:
    """Passphrase-only flags given on the command line."""
    given = {
        "--words": args.words is not None,
        "--separator": args.separator is not None,
        "--word-list": args.word_list is not None,
        "--capitalize": args.capitalize,
        "--include-number": args.include_number,
    }
    return [flag for flag, is_given in given.items() if is_given]


def ignored_flags(args: argparse.Namespace, kind: SecretKind, preset: Optional[str]) -> List[str]:
    """Flags that have no effect for ``kind`` (and ``preset``, when set)."""
    if kind is SecretKind.PASSWORD:
        ignored = passphrase_flags(args)
        if preset:
            ignored += password_flags(args)
    else:
        ignored = password_flags(args)
        if preset:
            ignored += [flag for flag in passphrase_flags(args) if flag != "--word-list"]
    return ignored


def build_policy(args: argparse.Namespace, settings: PassforgeSettings) -> GenerationPolicy:
    """Merge flags over settings into a validated policy."""
    passphrase = args.passphrase if args.passphrase is not None else settings.passphrase
    kind = SecretKind.PASSPHRASE if passphrase else SecretKind.PASSWORD
    word_list_path = args.word_list or settings.word_list
    word_list = WordList.from_file(word_list_path) if kind is SecretKind.PASSPHRASE and word_list_path else None

    preset = args.preset or settings.preset
    ignored = ignored_flags(args, kind, preset)
    if ignored:
        reason = f"preset {preset}" if preset else kind.value
        logger.warning("Ignoring %s: not used with %s", ", ".join(ignored), reason)

    if preset:
        policy = get_preset_policy(preset, kind)
        return policy.with_word_list(word_list) if word_list is not None else policy

    if kind is SecretKind.PASSPHRASE:
        return GenerationPolicy.passphrase(
            word_count=_pick(args.words, settings.words),
            separator=_pick(args.separator, settings.separator),
            word_list=word_list,
            capitalize=args.capitalize,
            include_number=args.include_number,
        )

    return GenerationPolicy.password(
        length=_pick(args.length, settings.length),
        max_length=_pick(args.max_length, settings.max_length),
        include_lowercase=not args.no_lowercase,
        include_uppercase=not args.no_capitals,
        include_digits=not args.no_numbers,
        include_symbols=not args.no_symbols,
    )


def format_report(report: StrengthReport) -> List[str]:
    """Render a report as output lines."""
    lines = [
        f"Strength: Score: {report.score}/4, "
        f"Crack time: {report.crack_times.offline_slow_hash_display}"
    ]
    if report.warning:
        lines.append(f"Warning: {report.warning}")
    if report.truncated:
        lines.append(f"Note: estimated from the first {MAX_EVALUATED_LENGTH} characters")
    return lines


def _pick(flag, setting):
    return flag if flag is not None else setting


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list_presets:
        for row in list_presets():
            params = ", ".join(f"{k}={v}" for k, v in row.items() if k != "preset")
            print(f"{row['preset']}: {params}")
        return 0

    try:
        settings = load_settings(args.config)
        policy = build_policy(args, settings)
        evaluate = _pick(args.evaluate_strength, settings.evaluate_strength)
        config = BatchConfig(
            count=_pick(args.count, settings.count),
            evaluate_strength=evaluate,
            workers=_pick(args.workers, settings.workers),
            show_progress=args.progress,
        )
        orchestrator = BatchOrchestrator(
            generator=get_generator(policy.kind),
            evaluator=get_evaluator() if evaluate else None,
            config=config,
        )
        result = orchestrator.run(policy)
    except PassforgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for secret, report in result:
        print(secret.value)
        if report is not None:
            for line in format_report(report):
                print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
