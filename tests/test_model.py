import dataclasses

import pytest
from google.api_core.exceptions import PermissionDenied
from google.auth.exceptions import DefaultCredentialsError, RefreshError
from google.cloud import texttospeech

from phrase2audio import model
from phrase2audio.model import (
    DEFAULT_VOICE,
    ClientInitError,
    SynthesisError,
    VoiceConfig,
    create_client,
    list_voices,
    synthesize_phrase,
)

from conftest import FakeTTSClient


def test_default_voice_is_german_female_mp3():
    assert DEFAULT_VOICE.language_code == "de-DE"
    assert DEFAULT_VOICE.gender == "FEMALE"
    assert DEFAULT_VOICE.audio_encoding == "MP3"
    assert DEFAULT_VOICE.file_extension == ".mp3"


def test_voice_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_VOICE.language_code = "en-US"


def test_synthesize_phrase_returns_audio_bytes_verbatim(fake_client):
    audio = synthesize_phrase(fake_client, "Guten Morgen")

    assert audio == b"audio:Guten Morgen"
    request = fake_client.requests[0]
    assert request.text == "Guten Morgen"
    assert request.voice.language_code == "de-DE"
    assert request.voice.ssml_gender == texttospeech.SsmlVoiceGender.FEMALE
    assert request.audio_config.audio_encoding == texttospeech.AudioEncoding.MP3


def test_synthesize_phrase_uses_given_config(fake_client):
    config = VoiceConfig(language_code="en-GB", gender="MALE", audio_encoding="LINEAR16")

    synthesize_phrase(fake_client, "Hello", config)

    request = fake_client.requests[0]
    assert request.voice.language_code == "en-GB"
    assert request.voice.ssml_gender == texttospeech.SsmlVoiceGender.MALE
    assert request.audio_config.audio_encoding == texttospeech.AudioEncoding.LINEAR16
    assert config.file_extension == ".wav"


def test_synthesize_phrase_rejects_empty_text(fake_client):
    with pytest.raises(ValueError):
        synthesize_phrase(fake_client, "")
    assert fake_client.requests == []


def test_synthesize_phrase_wraps_provider_errors():
    client = FakeTTSClient(fail_on={"Danke"})

    with pytest.raises(SynthesisError) as excinfo:
        synthesize_phrase(client, "Danke")

    assert "Danke" in str(excinfo.value)
    assert excinfo.value.__cause__ is not None


def test_create_client_wraps_credential_errors(monkeypatch):
    def no_credentials():
        raise DefaultCredentialsError("Could not automatically determine credentials.")

    monkeypatch.setattr(model.texttospeech, "TextToSpeechClient", no_credentials)

    with pytest.raises(ClientInitError):
        create_client()


def test_list_voices_sorted():
    client = FakeTTSClient(voices=["de-DE-Wavenet-B", "de-DE-Standard-A"])

    assert list_voices(client, "de-DE") == ["de-DE-Standard-A", "de-DE-Wavenet-B"]


def test_list_voices_wraps_provider_errors():
    class Denied(FakeTTSClient):
        def list_voices(self, *, language_code):
            raise PermissionDenied("quota")

    with pytest.raises(SynthesisError):
        list_voices(Denied(), "de-DE")


def test_synthesize_phrase_wraps_auth_errors():
    class Expired(FakeTTSClient):
        def synthesize_speech(self, *, input, voice, audio_config):
            raise RefreshError("token expired")

    with pytest.raises(SynthesisError) as excinfo:
        synthesize_phrase(Expired(), "Danke")

    assert isinstance(excinfo.value.__cause__, RefreshError)
