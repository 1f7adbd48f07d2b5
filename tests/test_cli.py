from unittest.mock import Mock, patch

import pytest

from voice_info import cli

VOICE_ID = "gAHnnZoEngjkMz2Laif6"

RACHEL = {
    "voice_id": VOICE_ID,
    "name": "Rachel",
    "category": "premade",
    "description": "calm narrator",
    "labels": {"accent": "american"},
    "preview_url": "https://example/preview.mp3",
}


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)
    monkeypatch.delenv("ELEVENLABS_VOICE_ID", raising=False)
    monkeypatch.delenv("ELEVENLABS_BASE_URL", raising=False)


def _ok(body):
    resp = Mock()
    resp.status_code = 200
    resp.json.return_value = body
    return resp


def test_cli_prints_preview_report(monkeypatch, capsys):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk-test")
    with patch("voice_info.providers.voices_elevenlabs.requests.get") as mock_get:
        mock_get.return_value = _ok(RACHEL)
        code = cli.main([])

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.splitlines() == [
        "Voice Name: Rachel",
        "Voice Category: premade",
        "Voice Description: calm narrator",
        "Voice Preview URL: https://example/preview.mp3",
    ]
    assert captured.err == ""
    assert mock_get.call_args.args[0].endswith(f"/voices/{VOICE_ID}")


def test_cli_labels_and_explicit_voice(monkeypatch, capsys):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk-test")
    with patch("voice_info.providers.voices_elevenlabs.requests.get") as mock_get:
        mock_get.return_value = _ok(RACHEL)
        code = cli.main(["other-voice", "--fields", "labels"])

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.splitlines()[-1] == "Voice Labels: accent: american"
    assert mock_get.call_args.args[0].endswith("/voices/other-voice")


def test_cli_reports_lookup_failure(monkeypatch, capsys):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk-test")
    with patch("voice_info.providers.voices_elevenlabs.requests.get") as mock_get:
        resp = Mock()
        resp.status_code = 404
        resp.reason = "Not Found"
        resp.json.side_effect = ValueError()
        mock_get.return_value = resp
        code = cli.main([])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err == "Error: ElevenLabs voice lookup failed: 404 - Not Found\n"


def test_cli_missing_api_key(monkeypatch, capsys):
    monkeypatch.delenv("ELEVENLABS_API_KEY", raising=False)

    code = cli.main([])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err == "Error: Missing ELEVENLABS_API_KEY in environment.\n"


def test_cli_writes_sample(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk-test")
    out = tmp_path / "sample.mp3"
    audio = Mock()
    audio.status_code = 200
    audio.content = b"fake audio data"

    with patch("voice_info.providers.voices_elevenlabs.requests.get") as mock_get, patch(
        "voice_info.providers.tts_elevenlabs.requests.post"
    ) as mock_post:
        mock_get.return_value = _ok(RACHEL)
        mock_post.return_value = audio
        code = cli.main(["--sample", "Hola", "--out", str(out)])

    assert code == 0
    assert out.read_bytes() == b"fake audio data"
    assert mock_post.call_args.kwargs["json"]["text"] == "Hola"


def _audio(status_code=200, content=b"fake audio data", reason="OK"):
    resp = Mock()
    resp.status_code = status_code
    resp.reason = reason
    resp.content = content
    resp.json.side_effect = ValueError()
    return resp


def test_cli_sample_fetches_voice_once(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk-test")
    with patch("voice_info.providers.voices_elevenlabs.requests.get") as mock_get, patch(
        "voice_info.providers.tts_elevenlabs.requests.post"
    ) as mock_post:
        mock_get.return_value = _ok(RACHEL)
        mock_post.return_value = _audio()
        code = cli.main(["--sample", "Hola", "--out", str(tmp_path / "sample.mp3")])

    assert code == 0
    assert mock_get.call_count == 1
    assert mock_post.call_args.args[0].endswith(f"/text-to-speech/{VOICE_ID}")


def test_cli_sample_unwritable_output(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk-test")
    out = tmp_path / "missing" / "sample.mp3"

    with patch("voice_info.providers.voices_elevenlabs.requests.get") as mock_get, patch(
        "voice_info.providers.tts_elevenlabs.requests.post"
    ) as mock_post:
        mock_get.return_value = _ok(RACHEL)
        mock_post.return_value = _audio()
        code = cli.main(["--sample", "Hola", "--out", str(out)])

    captured = capsys.readouterr()
    assert code == 1
    assert len(captured.out.splitlines()) == 4
    err_lines = captured.err.splitlines()
    assert len(err_lines) == 1
    assert err_lines[0].startswith("Error: ")
    assert not out.exists()


def test_cli_sample_tts_failure(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk-test")
    out = tmp_path / "sample.mp3"

    with patch("voice_info.providers.voices_elevenlabs.requests.get") as mock_get, patch(
        "voice_info.providers.tts_elevenlabs.requests.post"
    ) as mock_post:
        mock_get.return_value = _ok(RACHEL)
        mock_post.return_value = _audio(status_code=403, content=b"", reason="Forbidden")
        code = cli.main(["--sample", "Hola", "--out", str(out)])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.err == "Error: ElevenLabs TTS failed: 403 - Forbidden\n"
    assert not out.exists()


def test_cli_unknown_provider(monkeypatch, capsys):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk-test")

    code = cli.main(["--provider", "azure"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err == "Error: Unknown voice provider: azure\n"
