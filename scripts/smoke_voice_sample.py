from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

from voice_info.core.factory import get_tts_provider, get_voice_provider
from voice_info.orchestrators.sample_probe import VoiceSampleProbe
from voice_info.providers.elevenlabs_base import voice_id_from_env


def main() -> None:
    load_dotenv()

    voice_id = voice_id_from_env()
    probe = VoiceSampleProbe(
        lookup=get_voice_provider("elevenlabs"),
        tts=get_tts_provider("elevenlabs"),
    )
    result = probe.run(voice_id, "Hola probando la voz de la mujer paraguaya.")

    print("Voice:", result.voice.name)
    print("Metrics:", result.metrics)
    if result.tts_error:
        print("TTS failed:", result.tts_error)
        return

    out = Path("tmp_voice_sample.mp3")
    out.write_bytes(result.audio_bytes)
    print(f"Wrote {out} ({len(result.audio_bytes)} bytes).")


if __name__ == "__main__":
    main()
