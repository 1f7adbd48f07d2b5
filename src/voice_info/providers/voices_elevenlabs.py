from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from voice_info.core.interfaces import VoiceLookupProvider
from voice_info.core.models import VoiceInfo
from voice_info.providers.elevenlabs_base import (
    DEFAULT_BASE_URL,
    ElevenLabsError,
    api_key_from_env,
    auth_headers,
    base_url_from_env,
    error_detail,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElevenLabsVoicesConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL

    @staticmethod
    def from_env() -> "ElevenLabsVoicesConfig":
        return ElevenLabsVoicesConfig(
            api_key=api_key_from_env(),
            base_url=base_url_from_env(),
        )


class ElevenLabsVoices(VoiceLookupProvider):
    """
    ElevenLabs voice metadata lookup.
    One GET /voices/{voice_id} per call, no retries.
    """

    def __init__(self, config: ElevenLabsVoicesConfig, timeout_s: float = 30.0) -> None:
        self._cfg = config
        self._timeout_s = timeout_s

    def get_voice(self, voice_id: str) -> VoiceInfo:
        voice_id = (voice_id or "").strip()
        if not voice_id:
            raise ValueError("ElevenLabsVoices.get_voice received empty voice_id.")

        url = f"{self._cfg.base_url.rstrip('/')}/voices/{voice_id}"
        logger.info("Getting info for voice: %s", voice_id)

        try:
            resp = requests.get(
                url,
                headers=auth_headers(self._cfg.api_key, "application/json"),
                timeout=self._timeout_s,
            )
        except requests.RequestException as e:
            raise ElevenLabsError(
                f"Failed to reach ElevenLabs at {self._cfg.base_url} ({e})"
            ) from e

        if resp.status_code >= 400:
            raise ElevenLabsError(
                f"ElevenLabs voice lookup failed: {resp.status_code} - {error_detail(resp)}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise ElevenLabsError("ElevenLabs returned a non-JSON voice record.") from e
        if not isinstance(data, dict):
            raise ElevenLabsError("ElevenLabs returned an unexpected voice record.")

        return VoiceInfo.from_api(data)
