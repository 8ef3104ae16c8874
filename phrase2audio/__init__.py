"""
phrase2audio - Spoken vocabulary cards from a phrase list using Google Cloud TTS.

Reads one phrase per line, optionally followed by a translation in parentheses,
saves an MP3 per phrase and writes a tab-separated phrase/translation log.
"""

__version__ = "0.1.0"

from .model import DEFAULT_VOICE, VoiceConfig, synthesize_phrase
from .cli import parse_line, phrase_to_filename, process_lines, main

__all__ = [
    "DEFAULT_VOICE", "VoiceConfig", "synthesize_phrase",
    "parse_line", "phrase_to_filename", "process_lines", "main",
]
