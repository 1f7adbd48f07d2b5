from __future__ import annotations

from dotenv import load_dotenv

from voice_info.core.factory import get_voice_provider
from voice_info.core.report import PREVIEW_FIELDS, report_voice
from voice_info.providers.elevenlabs_base import voice_id_from_env


def main() -> None:
    load_dotenv()

    provider = get_voice_provider("elevenlabs")
    report_voice(provider, voice_id_from_env(), PREVIEW_FIELDS)


if __name__ == "__main__":
    main()
