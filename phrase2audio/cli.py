"""
CLI module for phrase2audio package.

Contains line parsing, the per-line processing loop, argument parsing and main application logic.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, NamedTuple, Optional

import regex as re
from dotenv import load_dotenv
from rich.markup import escape

from .model import (
    DEFAULT_VOICE,
    ClientInitError,
    SynthesisError,
    VoiceConfig,
    create_client,
    list_voices,
    synthesize_phrase,
)
from .ui import progress_context, setup_logging

logger = logging.getLogger(__name__)

OUTPUT_FILE = "output.txt"

PAREN_RE = re.compile(r"\((.*?)\)")
FILENAME_STRIP_RE = re.compile(r"[.,!?]")


# ----------------------------
# Line parsing
# ----------------------------
class LineRecord(NamedTuple):
    phrase: str
    translation: str


def parse_line(line: str) -> LineRecord:
    """Split a line into the phrase and the translation given in parentheses."""
    match = PAREN_RE.search(line)
    translation = match.group(1).strip() if match else ""
    phrase = PAREN_RE.sub("", line, count=1).strip()
    return LineRecord(phrase, translation)


def strip_punctuation(phrase: str) -> str:
    return FILENAME_STRIP_RE.sub("", phrase)


def phrase_to_filename(phrase: str, extension: str = ".mp3") -> str:
    """Derive the audio file name: drop .,!? and turn spaces into hyphens."""
    return strip_punctuation(phrase).replace(" ", "-") + extension


# ----------------------------
# Processing loop
# ----------------------------
@dataclass
class RunSummary:
    written: int = 0
    skipped: int = 0
    failed: int = 0


def process_lines(
    lines: Iterable[str],
    client,
    log_file: IO[str],
    audio_dir: Path = Path("."),
    config: VoiceConfig = DEFAULT_VOICE,
    keep_going: bool = False,
    progress=None,
) -> RunSummary:
    """
    Synthesize every line and record it in the log file.

    Each line is parsed, spoken, written to ``audio_dir`` and then appended to
    ``log_file`` as ``phrase<TAB>translation``. Unless ``keep_going`` is set the
    first SynthesisError or OSError propagates and stops the run.

    Args:
        lines: Input lines (trailing newlines are fine)
        client: TextToSpeechClient instance
        log_file: Open text file receiving one record per written line
        audio_dir: Directory for the audio files
        config: Voice selection and audio encoding
        keep_going: Log failing lines and continue instead of stopping
        progress: Optional Rich Progress for a per-line spinner

    Returns:
        RunSummary with counts of written, skipped and failed lines
    """
    summary = RunSummary()
    task = progress.add_task("Reading input...", total=None) if progress is not None else None

    for line_no, line in enumerate(lines, start=1):
        record = parse_line(line)
        if not line.strip():
            summary.skipped += 1
            continue

        if progress is not None:
            progress.update(task, description=f"Synthesizing '{escape(record.phrase)}'...")

        out_path = audio_dir / phrase_to_filename(record.phrase, config.file_extension)
        try:
            if not record.phrase:
                raise SynthesisError(f"Line {line_no} has no phrase to speak: {line.strip()!r}")
            audio = synthesize_phrase(client, record.phrase, config)
            out_path.write_bytes(audio)
            log_file.write(f"{record.phrase}\t{record.translation}\n")
            log_file.flush()
        except (SynthesisError, OSError) as e:
            if not keep_going:
                raise
            logger.warning("Line %d failed: %s", line_no, e)
            summary.failed += 1
            continue

        logger.info("Saved %s", out_path)
        summary.written += 1

    if progress is not None:
        progress.stop_task(task)
    return summary


# ----------------------------
# CLI setup
# ----------------------------
def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="phrase2audio",
        description=(
            "Speak one phrase per input line with Google Cloud TTS. "
            "A translation may follow in parentheses: 'Guten Morgen (Good morning)'."
        ),
    )
    parser.add_argument("input", nargs="?", default="-",
                        help="Input text file, one phrase per line (default: standard input).")
    parser.add_argument("--output-file", default=OUTPUT_FILE,
                        help="Tab-separated phrase/translation log (default: output.txt).")
    parser.add_argument("--audio-dir", default=".",
                        help="Directory for the audio files (default: current directory).")
    parser.add_argument("--keep-going", action="store_true",
                        help="Skip lines that fail instead of stopping at the first error.")
    parser.add_argument("--list-voices", action="store_true",
                        help=f"Print the voices available for {DEFAULT_VOICE.language_code} and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


# ----------------------------
# Main application logic
# ----------------------------
def main(argv: Optional[list] = None):
    """Main entry point for the phrase2audio CLI application."""
    load_dotenv()

    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        client = create_client()
    except ClientInitError as e:
        logger.error("%s", e)
        sys.exit(3)

    # Handle meta commands immediately
    if args.list_voices:
        try:
            names = list_voices(client, DEFAULT_VOICE.language_code)
        except SynthesisError as e:
            logger.error("%s", e)
            sys.exit(1)
        for name in names:
            print(name)
        sys.exit(0)

    if args.input != "-" and not Path(args.input).is_file():
        logger.error("Input file not found: %s", args.input)
        sys.exit(2)

    audio_dir = Path(args.audio_dir)
    try:
        audio_dir.mkdir(parents=True, exist_ok=True)
        with open(args.output_file, "w", encoding="utf-8") as log_file:
            if args.input == "-":
                summary = _run(sys.stdin, client, log_file, audio_dir, args.keep_going)
            else:
                with open(args.input, encoding="utf-8") as lines:
                    summary = _run(lines, client, log_file, audio_dir, args.keep_going)
    except (SynthesisError, OSError, UnicodeDecodeError) as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info("Wrote %d audio file(s), log in %s", summary.written, args.output_file)
    if summary.failed:
        logger.error("%d line(s) failed", summary.failed)
        sys.exit(1)


def _run(lines, client, log_file, audio_dir, keep_going) -> RunSummary:
    with progress_context() as progress:
        return process_lines(
            lines, client, log_file,
            audio_dir=audio_dir, keep_going=keep_going, progress=progress,
        )
