from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from voice_info.core.interfaces import TTSProvider, VoiceLookupProvider
from voice_info.core.metrics import Timer
from voice_info.core.models import VoiceInfo

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_TEXT = "Hola, probando la voz."


@dataclass(frozen=True)
class ProbeResult:
    voice: VoiceInfo
    audio_bytes: Optional[bytes]
    metrics: dict[str, float]
    tts_error: Optional[str] = None


class VoiceSampleProbe:
    """
    Probe: voice lookup -> short TTS sample rendered in that voice.
    """

    def __init__(self, lookup: VoiceLookupProvider, tts: TTSProvider) -> None:
        self._lookup = lookup
        self._tts = tts

    def run(self, voice_id: str, text: str = DEFAULT_SAMPLE_TEXT) -> ProbeResult:
        timer = Timer()

        # Step 1: metadata; a failure here leaves nothing to report
        voice = timer.measure("lookup_ms", lambda: self._lookup.get_voice(voice_id))

        # Step 2: TTS sample (gracefully handle failure - the metadata is still useful)
        audio_bytes: Optional[bytes] = None
        tts_error: Optional[str] = None

        try:
            audio_bytes = timer.measure(
                "tts_ms",
                lambda: self._tts.synthesize(text, voice_id=voice_id),
            )
        except Exception as e:
            tts_error = f"{type(e).__name__}: {str(e)}"
            logger.info("Sample synthesis for %s failed: %s", voice_id, tts_error)

        return ProbeResult(
            voice=voice,
            audio_bytes=audio_bytes,
            metrics=timer.summary(),
            tts_error=tts_error,
        )
