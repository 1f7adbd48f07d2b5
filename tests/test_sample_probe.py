import pytest

from voice_info.core.models import VoiceInfo
from voice_info.orchestrators.sample_probe import VoiceSampleProbe


class DummyLookup:
    def get_voice(self, voice_id: str) -> VoiceInfo:
        return VoiceInfo(voice_id=voice_id, name="Rachel", category="premade", description=None)


class DummyTTS:
    def __init__(self):
        self.calls = []

    def synthesize(self, text: str, voice_id=None) -> bytes:
        self.calls.append((text, voice_id))
        # Not real audio - just bytes to validate the wiring.
        return text.encode("utf-8")


class FailingTTS:
    def synthesize(self, text: str, voice_id=None) -> bytes:
        raise RuntimeError("quota exceeded")


class FailingLookup:
    def get_voice(self, voice_id: str) -> VoiceInfo:
        raise RuntimeError("Not Found")


def test_sample_probe_runs():
    tts = DummyTTS()
    probe = VoiceSampleProbe(lookup=DummyLookup(), tts=tts)
    result = probe.run("abc", "hola")

    assert result.voice.name == "Rachel"
    assert result.audio_bytes == b"hola"
    assert result.tts_error is None
    assert tts.calls == [("hola", "abc")]
    assert "lookup_ms" in result.metrics
    assert "tts_ms" in result.metrics
    assert result.metrics["total_ms"] >= 0


def test_sample_probe_keeps_voice_when_tts_fails():
    probe = VoiceSampleProbe(lookup=DummyLookup(), tts=FailingTTS())
    result = probe.run("abc", "hola")

    assert result.voice.voice_id == "abc"
    assert result.audio_bytes is None
    assert result.tts_error == "RuntimeError: quota exceeded"
    assert "tts_ms" not in result.metrics
    assert result.metrics["total_ms"] == result.metrics["lookup_ms"]


def test_sample_probe_propagates_lookup_failure():
    probe = VoiceSampleProbe(lookup=FailingLookup(), tts=DummyTTS())
    with pytest.raises(RuntimeError, match="Not Found"):
        probe.run("abc", "hola")
