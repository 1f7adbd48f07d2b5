from __future__ import annotations

import os

import requests

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"
DEFAULT_VOICE_ID = "gAHnnZoEngjkMz2Laif6"


class ElevenLabsError(RuntimeError):
    pass


def api_key_from_env() -> str:
    api_key = os.getenv("ELEVENLABS_API_KEY", "").strip()
    if not api_key:
        raise ElevenLabsError("Missing ELEVENLABS_API_KEY in environment.")
    return api_key


def voice_id_from_env() -> str:
    return os.getenv("ELEVENLABS_VOICE_ID", "").strip() or DEFAULT_VOICE_ID


def base_url_from_env() -> str:
    return (os.getenv("ELEVENLABS_BASE_URL", "").strip() or DEFAULT_BASE_URL).rstrip("/")


def auth_headers(api_key: str, accept: str) -> dict[str, str]:
    return {
        "xi-api-key": api_key,
        "accept": accept,
    }


def error_detail(resp: requests.Response) -> str:
    """
    Best-effort human readable reason for a failed ElevenLabs call.
    ElevenLabs usually answers with {"detail": {"status": ..., "message": ...}}.
    """
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        detail = body.get("detail")
        if isinstance(detail, dict) and detail.get("message"):
            return str(detail["message"])
        if isinstance(detail, str) and detail:
            return detail

    if resp.reason:
        return resp.reason
    return f"HTTP {resp.status_code}"
