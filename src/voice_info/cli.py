"""Command line entry point: ``voice-info [VOICE_ID] [--fields labels|preview]``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from voice_info.core.factory import get_tts_provider, get_voice_provider
from voice_info.core.report import FIELD_SETS, get_field_set, one_line, report_voice
from voice_info.orchestrators.sample_probe import DEFAULT_SAMPLE_TEXT
from voice_info.providers.elevenlabs_base import ElevenLabsError, voice_id_from_env

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voice-info",
        description="Look up an ElevenLabs voice and print its metadata.",
    )
    parser.add_argument(
        "voice_id",
        nargs="?",
        default=None,
        help="Voice identifier (default: ELEVENLABS_VOICE_ID or the built-in voice)",
    )
    parser.add_argument(
        "--fields",
        choices=sorted(FIELD_SETS),
        default="preview",
        help="Which field set to print (default: preview)",
    )
    parser.add_argument(
        "--provider",
        default="elevenlabs",
        help="Voice provider name (default: elevenlabs)",
    )
    parser.add_argument(
        "--sample",
        nargs="?",
        const=DEFAULT_SAMPLE_TEXT,
        default=None,
        metavar="TEXT",
        help="Also synthesize TEXT in this voice",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("tmp_voice_sample.mp3"),
        help="Where to write the sample audio (default: tmp_voice_sample.mp3)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _write_sample(provider_name: str, voice_id: str, text: str, out: Path) -> bool:
    try:
        tts = get_tts_provider(provider_name)
        audio = tts.synthesize(text, voice_id=voice_id)
        out.write_bytes(audio)
    except (ElevenLabsError, ValueError, OSError) as e:
        print(f"Error: {one_line(e)}", file=sys.stderr)
        return False

    logger.info("Wrote %s (%d bytes)", out, len(audio))
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    voice_id = args.voice_id or voice_id_from_env()
    try:
        provider = get_voice_provider(args.provider)
    except (ElevenLabsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not report_voice(provider, voice_id, get_field_set(args.fields)):
        return 1

    if args.sample is not None:
        if not _write_sample(args.provider, voice_id, args.sample, args.out):
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
