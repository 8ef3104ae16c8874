"""
Model module for phrase2audio package.

Contains the voice configuration, Google Cloud TTS client setup and audio synthesis.
"""

import logging
from dataclasses import dataclass
from typing import List

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import texttospeech

logger = logging.getLogger(__name__)

# ----------------------------
# Constants and catalogs
# ----------------------------
FILE_EXTENSIONS = {"MP3": ".mp3", "OGG_OPUS": ".ogg", "LINEAR16": ".wav"}


@dataclass(frozen=True)
class VoiceConfig:
    """Voice selection and audio encoding sent with every synthesis request."""

    language_code: str = "de-DE"
    gender: str = "FEMALE"
    audio_encoding: str = "MP3"

    @property
    def file_extension(self) -> str:
        return FILE_EXTENSIONS[self.audio_encoding]

    def voice_params(self) -> texttospeech.VoiceSelectionParams:
        return texttospeech.VoiceSelectionParams(
            language_code=self.language_code,
            ssml_gender=texttospeech.SsmlVoiceGender[self.gender],
        )

    def audio_config(self) -> texttospeech.AudioConfig:
        return texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding[self.audio_encoding],
        )


DEFAULT_VOICE = VoiceConfig()


# ----------------------------
# Errors
# ----------------------------
class TTSError(Exception):
    """Base class for text-to-speech failures."""


class ClientInitError(TTSError):
    """The Text-to-Speech client could not be created."""


class SynthesisError(TTSError):
    """A synthesis request was rejected or failed in transit."""


# ----------------------------
# Client and synthesis
# ----------------------------
def create_client() -> texttospeech.TextToSpeechClient:
    """Create the TTS client. Credentials come from GOOGLE_APPLICATION_CREDENTIALS."""
    try:
        return texttospeech.TextToSpeechClient()
    except (GoogleAuthError, GoogleAPIError) as e:
        raise ClientInitError(f"Cannot create Text-to-Speech client: {e}") from e


def synthesize_phrase(client, text: str, config: VoiceConfig = DEFAULT_VOICE) -> bytes:
    """
    Synthesize one phrase and return the encoded audio bytes.

    Args:
        client: TextToSpeechClient instance (or anything with ``synthesize_speech``)
        text: Phrase to speak, must not be empty
        config: Voice selection and audio encoding

    Returns:
        Audio content exactly as returned by the provider

    Raises:
        ValueError: if ``text`` is empty
        SynthesisError: if the provider call fails
    """
    if not text:
        raise ValueError("Cannot synthesize an empty phrase")

    logger.debug("Synthesizing %r (%s, %s)", text, config.language_code, config.gender)
    try:
        response = client.synthesize_speech(
            input=texttospeech.SynthesisInput(text=text),
            voice=config.voice_params(),
            audio_config=config.audio_config(),
        )
    except (GoogleAPIError, GoogleAuthError) as e:
        raise SynthesisError(f"Synthesis failed for {text!r}: {e}") from e
    return response.audio_content


def list_voices(client, language_code: str) -> List[str]:
    """Return the names of the voices the provider offers for ``language_code``."""
    try:
        response = client.list_voices(language_code=language_code)
    except (GoogleAPIError, GoogleAuthError) as e:
        raise SynthesisError(f"Listing voices failed: {e}") from e
    return sorted(v.name for v in response.voices)
