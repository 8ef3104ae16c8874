from types import SimpleNamespace

import pytest
from google.api_core.exceptions import ServiceUnavailable


class FakeTTSClient:
    """Stands in for TextToSpeechClient; returns b"audio:<text>" per request."""

    def __init__(self, fail_on=(), voices=()):
        self.fail_on = set(fail_on)
        self.voices = list(voices)
        self.requests = []

    def synthesize_speech(self, *, input, voice, audio_config):
        self.requests.append(SimpleNamespace(text=input.text, voice=voice, audio_config=audio_config))
        if input.text in self.fail_on:
            raise ServiceUnavailable(f"backend down for {input.text}")
        return SimpleNamespace(audio_content=f"audio:{input.text}".encode("utf-8"))

    def list_voices(self, *, language_code):
        return SimpleNamespace(voices=[SimpleNamespace(name=n) for n in self.voices])

    @property
    def texts(self):
        return [r.text for r in self.requests]


@pytest.fixture
def fake_client():
    return FakeTTSClient()
