"""CLI entrypoint for korcv — subcommand dispatcher."""

import argparse
import json
import logging
import sys
from pathlib import Path

from korcv.config import NonHangulPolicy, PhonemizerConfig
from korcv.timing import CodaTiming
from korcv.types import PhonemeToken


def _ticks(value: str) -> int:
    """argparse type for a non-negative tick count."""
    try:
        ticks = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid tick count: {value!r}") from None
    if ticks < 0:
        raise argparse.ArgumentTypeError(f"tick count must be non-negative, got {ticks}")
    return ticks


def _add_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared between lyric and midi subcommands."""
    parser.add_argument("--labels", type=Path, default=None,
                        help="Voicebank label list, one label per line (default: none)")
    parser.add_argument("--non-hangul", default=None,
                        choices=[p.value for p in NonHangulPolicy],
                        help="Non-Hangul characters inside Hangul lyrics (default: literal)")
    parser.add_argument("--coda-timing", default=None,
                        choices=[c.value for c in CodaTiming],
                        help="Placement of a note-final coda (default: fixed)")
    parser.add_argument("--consonant-duration", type=_ticks, default=None,
                        help="Fixed consonant length in ticks (default: 60)")
    parser.add_argument("--json", action="store_true", default=False,
                        help="Print JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Show debug logging")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="korcv",
        description="Korean C+V phonemizer for singing voice synthesis",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    lyric_parser = subparsers.add_parser(
        "lyric",
        help="Phonemize a single lyric",
        description="Phonemize one note's lyric and print its timed labels",
    )
    lyric_parser.add_argument("text", help="Lyric text, e.g. 간 or '[g a]'")
    lyric_parser.add_argument("--duration", type=_ticks, default=480,
                              help="Note length in ticks (default: 480)")
    _add_shared_args(lyric_parser)

    midi_parser = subparsers.add_parser(
        "midi",
        help="Phonemize every note of a MIDI file",
        description="Phonemize the lyric of each note in a MIDI file",
    )
    midi_parser.add_argument("midi_file", type=Path, help="MIDI file with lyric events")
    midi_parser.add_argument("--resolution", type=int, default=480,
                             help="Output ticks per quarter note (default: 480)")
    _add_shared_args(midi_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def build_config(args: argparse.Namespace) -> PhonemizerConfig:
    """Environment defaults, overridden by any flags given."""
    config = PhonemizerConfig.from_env()
    if args.non_hangul is not None:
        config.non_hangul = NonHangulPolicy(args.non_hangul)
    if args.coda_timing is not None:
        config.coda_timing = CodaTiming(args.coda_timing)
    if args.consonant_duration is not None:
        config.consonant_duration = args.consonant_duration
    return config


def _load_oracle(args: argparse.Namespace):
    from korcv.voicebank import LabelSetOracle

    if args.labels is None:
        return None
    if not args.labels.exists():
        print(f"Error: file not found: {args.labels}", file=sys.stderr)
        sys.exit(1)
    return LabelSetOracle.from_file(args.labels)


def _token_dicts(tokens: list[PhonemeToken]) -> list[dict]:
    return [{"label": t.label, "offset": t.offset} for t in tokens]


def _run_lyric(args: argparse.Namespace, config: PhonemizerConfig) -> None:
    """Phonemize one lyric."""
    from korcv.phonemizer import phonemize

    tokens = phonemize(args.text, args.duration, _load_oracle(args), config)
    if args.json:
        print(json.dumps(_token_dicts(tokens), ensure_ascii=False, indent=2))
        return
    for token in tokens:
        print(f"{token.offset:>6}  {token.label}")


def _run_midi(args: argparse.Namespace, config: PhonemizerConfig) -> None:
    """Phonemize every note of a MIDI file."""
    from korcv.midi import read_notes
    from korcv.phonemizer import KoreanCVPhonemizer

    if not args.midi_file.exists():
        print(f"Error: file not found: {args.midi_file}", file=sys.stderr)
        sys.exit(1)

    logger = logging.getLogger("korcv.midi")
    phonemizer = KoreanCVPhonemizer(_load_oracle(args), config)
    notes = read_notes(args.midi_file, resolution=args.resolution)
    if notes:
        logger.info(f"{args.midi_file.name}: {len(notes)} notes, last ends at tick {notes[-1].end}")

    results = []
    for note in notes:
        tokens = phonemizer.process([note])
        results.append({
            "position": note.position,
            "duration": note.duration,
            "pitch": note.pitch,
            "lyric": note.lyric,
            "phonemes": _token_dicts(tokens),
        })

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
        return
    for entry in results:
        labels = " ".join(p["label"] for p in entry["phonemes"])
        print(f"{entry['position']:>8}  {entry['lyric']:<6}  {labels}")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "lyric":
        _run_lyric(args, config)
    elif args.command == "midi":
        _run_midi(args, config)


if __name__ == "__main__":
    main()
