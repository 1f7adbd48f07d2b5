from __future__ import annotations

import streamlit as st
from dotenv import load_dotenv

from voice_info.core.report import FIELD_SETS, format_value
from voice_info.orchestrators.sample_probe import DEFAULT_SAMPLE_TEXT, VoiceSampleProbe
from voice_info.providers.elevenlabs_base import voice_id_from_env
from ui.common import build_tts_provider, build_voice_provider, render_credentials_sidebar

# Load .env once per Streamlit server start
load_dotenv()

st.set_page_config(page_title="Voice Info | Voice Info Probe", page_icon="🎙️", layout="wide")

st.title("🔎 Voice Info")
st.caption("Enter a voice identifier to fetch its metadata from the provider.")

if "last_voice" not in st.session_state:
    st.session_state["last_voice"] = None

# ---- Sidebar controls ----
with st.sidebar:
    st.header("Provider")
    provider_choice = st.selectbox("Voice Provider", ["ElevenLabs"], index=0)
    field_set = st.radio("Field set", sorted(FIELD_SETS), index=sorted(FIELD_SETS).index("preview"))
    key_ok = render_credentials_sidebar()

# ---- Main UI ----
col1, col2 = st.columns([2, 1], gap="large")

with col1:
    voice_id = st.text_input("Voice ID", value=voice_id_from_env(), key="voice_id")
    lookup = st.button("Look up", type="primary", use_container_width=True, disabled=not key_ok)

with col2:
    st.subheader("Latency")
    metrics_placeholder = st.empty()

st.divider()

if lookup:
    if not voice_id.strip():
        st.warning("Please enter a voice ID.")
        st.stop()

    try:
        provider = build_voice_provider(provider_choice)
        with st.spinner("Fetching voice metadata..."):
            st.session_state["last_voice"] = provider.get_voice(voice_id)
    except Exception as e:
        st.error(f"Error: {e}")
        st.stop()

voice = st.session_state.get("last_voice")
if voice:
    st.subheader("Voice Metadata")
    for f in FIELD_SETS[field_set]:
        st.markdown(f"**{f.label}:** {format_value(getattr(voice, f.attribute, None))}")

    if voice.preview_url:
        st.audio(voice.preview_url)

    with st.expander("Raw record"):
        st.json(dict(voice.raw))

    st.subheader("Sample")
    sample_text = st.text_area("Sample text", value=DEFAULT_SAMPLE_TEXT, height=80)
    if st.button("Synthesize sample", use_container_width=True):
        try:
            probe = VoiceSampleProbe(
                lookup=build_voice_provider(provider_choice),
                tts=build_tts_provider(provider_choice),
            )
            with st.spinner("Rendering sample..."):
                result = probe.run(voice.voice_id or voice_id, sample_text)
        except Exception as e:
            st.error(f"Error: {e}")
            st.stop()

        metrics_placeholder.json(result.metrics)
        if result.tts_error:
            st.error("**TTS Generation Failed**")
            st.markdown(f"**Error details:**\n```\n{result.tts_error}\n```")
        else:
            st.audio(result.audio_bytes, format="audio/mp3")
else:
    metrics_placeholder.caption("No lookups yet.")
