from __future__ import annotations

import os

import streamlit as st
from dotenv import load_dotenv

from voice_info.core.factory import get_tts_provider, get_voice_provider
from voice_info.core.interfaces import TTSProvider, VoiceLookupProvider

load_dotenv()


@st.cache_resource
def build_voice_provider(name: str) -> VoiceLookupProvider:
    return get_voice_provider(name)


@st.cache_resource
def build_tts_provider(name: str) -> TTSProvider:
    return get_tts_provider(name)


def render_credentials_sidebar(title: str = "ElevenLabs Credentials") -> bool:
    """
    Sidebar widget:
      - Shows whether ELEVENLABS_API_KEY is configured (never the key itself)
      - Explains how to fix a missing key

    Returns: True when a key is configured.
    """
    st.divider()
    st.subheader(title)

    configured = bool(os.getenv("ELEVENLABS_API_KEY", "").strip())
    if configured:
        st.success("API key found in environment")
    else:
        st.warning("ELEVENLABS_API_KEY is not set.")
        st.markdown("**How to fix**")
        st.code("echo 'ELEVENLABS_API_KEY=...' >> .env", language="bash")
        st.caption("Then restart Streamlit so the .env file is reloaded.")

    base_url = os.getenv("ELEVENLABS_BASE_URL", "").strip()
    if base_url:
        st.caption(f"Base URL: {base_url}")

    return configured
