from __future__ import annotations

from voice_info.core.interfaces import TTSProvider, VoiceLookupProvider
from voice_info.providers.tts_elevenlabs import ElevenLabsTTS, ElevenLabsTTSConfig
from voice_info.providers.voices_elevenlabs import ElevenLabsVoices, ElevenLabsVoicesConfig

_ELEVENLABS_NAMES = {"elevenlabs", "11labs", "eleven"}


def get_voice_provider(name: str) -> VoiceLookupProvider:
    key = (name or "").strip().lower()

    if key in _ELEVENLABS_NAMES:
        cfg = ElevenLabsVoicesConfig.from_env()
        return ElevenLabsVoices(cfg)

    raise ValueError(f"Unknown voice provider: {name}")


def get_tts_provider(name: str) -> TTSProvider:
    key = (name or "").strip().lower()

    if key in _ELEVENLABS_NAMES:
        cfg = ElevenLabsTTSConfig.from_env()
        return ElevenLabsTTS(cfg)

    raise ValueError(f"Unknown TTS provider: {name}")
