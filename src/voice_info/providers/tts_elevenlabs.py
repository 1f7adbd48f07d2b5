from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import requests

from voice_info.core.interfaces import TTSProvider
from voice_info.providers.elevenlabs_base import (
    DEFAULT_BASE_URL,
    DEFAULT_VOICE_ID,
    ElevenLabsError,
    api_key_from_env,
    auth_headers,
    base_url_from_env,
    error_detail,
    voice_id_from_env,
)


@dataclass(frozen=True)
class ElevenLabsTTSConfig:
    api_key: str
    voice_id: str = DEFAULT_VOICE_ID
    model_id: Optional[str] = "eleven_multilingual_v2"
    output_format: str = "mp3_44100_128"
    base_url: str = DEFAULT_BASE_URL

    @staticmethod
    def from_env() -> "ElevenLabsTTSConfig":
        model_id = os.getenv("ELEVENLABS_MODEL_ID", "eleven_multilingual_v2").strip() or None
        output_format = os.getenv("ELEVENLABS_OUTPUT_FORMAT", "mp3_44100_128").strip()

        return ElevenLabsTTSConfig(
            api_key=api_key_from_env(),
            voice_id=voice_id_from_env(),
            model_id=model_id,
            output_format=output_format,
            base_url=base_url_from_env(),
        )


class ElevenLabsTTS(TTSProvider):
    """
    ElevenLabs Text-to-Speech provider, used to render a short sample in a voice.
    Returns audio bytes in the configured output format.
    """

    def __init__(self, config: ElevenLabsTTSConfig, timeout_s: float = 30.0) -> None:
        self._cfg = config
        self._timeout_s = timeout_s

    def synthesize(self, text: str, voice_id: Optional[str] = None) -> bytes:
        text = (text or "").strip()
        if not text:
            raise ValueError("ElevenLabsTTS.synthesize received empty text.")

        vid = (voice_id or "").strip() or self._cfg.voice_id
        url = f"{self._cfg.base_url.rstrip('/')}/text-to-speech/{vid}"

        headers = auth_headers(self._cfg.api_key, "audio/mpeg")
        headers["content-type"] = "application/json"

        payload: dict = {"text": text}
        if self._cfg.model_id:
            payload["model_id"] = self._cfg.model_id

        params = {"output_format": self._cfg.output_format} if self._cfg.output_format else None

        try:
            resp = requests.post(
                url,
                headers=headers,
                params=params,
                json=payload,
                timeout=self._timeout_s,
            )
        except requests.RequestException as e:
            raise ElevenLabsError(
                f"Failed to reach ElevenLabs at {self._cfg.base_url} ({e})"
            ) from e

        if resp.status_code >= 400:
            raise ElevenLabsError(
                f"ElevenLabs TTS failed: {resp.status_code} - {error_detail(resp)}"
            )

        audio_bytes = resp.content
        if not audio_bytes:
            raise ElevenLabsError("ElevenLabs returned empty audio content.")

        return audio_bytes
