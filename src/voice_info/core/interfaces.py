from typing import Protocol, Optional

from voice_info.core.models import VoiceInfo


class VoiceLookupProvider(Protocol):
    """Voice metadata lookup interface."""

    def get_voice(self, voice_id: str) -> VoiceInfo:
        """
        Fetch the metadata record for a single voice.
        """
        ...


class TTSProvider(Protocol):
    """Text-to-speech provider interface."""

    def synthesize(self, text: str, voice_id: Optional[str] = None) -> bytes:
        """
        Convert text into audio bytes, optionally overriding the configured voice.
        """
        ...
