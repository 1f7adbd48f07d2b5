import streamlit as st

st.set_page_config(page_title="Voice Info Probe", page_icon="🎙️", layout="wide")

st.title("🎙️ Voice Info Probe")
st.subheader("A Streamlit App")
st.write(
    """
Look up an ElevenLabs voice by its identifier, inspect its metadata,
listen to the provider's preview clip and render a short sample in that voice.
"""
)

st.info("Go to **Voice Info** in the left sidebar to look up a voice.")
