import dataclasses
import logging

from domain import TextExtractor
from handlers import SynthesisHandler

from fakes import FakeSynthesizer


def _use_synthesizer(app, synthesizer):
    services = app.state.services
    handler = SynthesisHandler(synthesizer, TextExtractor(), services.config.synthesis)
    app.state.services = dataclasses.replace(services, synthesis_handler=handler)


def test_tts_with_text_returns_mpeg_audio(client, synthesizer):
    response = client.post("/api/tts", data={"text": "Good morning"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "audio/mpeg"
    assert response.content == b"ID3-fake-mp3"
    assert synthesizer.calls == ["Good morning"]


def test_tts_with_txt_upload(client, synthesizer, upload_dir):
    response = client.post(
        "/api/tts",
        files={"file": ("speech.txt", b"Read me aloud", "text/plain")},
    )

    assert response.status_code == 200
    assert synthesizer.calls == ["Read me aloud"]
    assert list(upload_dir.iterdir()) == []


def test_tts_blank_text_is_bad_request(client, synthesizer):
    response = client.post("/api/tts", data={"text": "   "})

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "No text found for TTS"
    assert synthesizer.calls == []


def test_tts_without_text_or_file_is_bad_request(client, synthesizer):
    response = client.post("/api/tts", data={})

    assert response.status_code == 400
    assert synthesizer.calls == []


def test_tts_unsupported_upload_is_bad_request(client, synthesizer, upload_dir):
    response = client.post(
        "/api/tts",
        files={"file": ("image.xyz", b"\x00\x01", "application/octet-stream")},
    )

    assert response.status_code == 400
    assert "Unsupported file type" in response.text
    assert synthesizer.calls == []
    assert list(upload_dir.iterdir()) == []


def test_tts_engine_failure_returns_spoken_apology(client, app):
    synthesizer = FakeSynthesizer(audio=b"apology-mp3", fail_times=1)
    _use_synthesizer(app, synthesizer)

    response = client.post("/api/tts", data={"text": "Hello"})

    assert response.status_code == 200
    assert response.content == b"apology-mp3"
    assert len(synthesizer.calls) == 2


def test_tts_total_failure_returns_500(client, app):
    synthesizer = FakeSynthesizer(fail_times=2)
    _use_synthesizer(app, synthesizer)

    response = client.post("/api/tts", data={"text": "Hello"})

    assert response.status_code == 500
    assert response.text == "TTS failed completely."
    assert len(synthesizer.calls) == 2


def test_tts_logs_when_the_apology_was_served(client, app, caplog):
    caplog.set_level(logging.INFO)
    _use_synthesizer(app, FakeSynthesizer(fail_times=1))

    client.post("/api/tts", data={"text": "Hello"})

    completed = [r for r in caplog.records if r.getMessage() == "TTS request completed"]
    assert [r.is_fallback for r in completed] == [True]


def test_tts_upload_that_cannot_be_stored_is_server_error(
    client, synthesizer, upload_dir
):
    upload_dir.write_bytes(b"not a directory")

    response = client.post(
        "/api/tts",
        files={"file": ("speech.txt", b"Read me aloud", "text/plain")},
    )

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Failed to store uploaded file"
    assert synthesizer.calls == []


def test_transcribe_returns_joined_transcript(client, recognizer, upload_dir):
    response = client.post(
        "/api/transcribe",
        files={"file": ("memo.webm", b"webm-audio", "audio/webm")},
    )

    assert response.status_code == 200
    assert response.json() == {"transcript": "hello world"}
    assert len(recognizer.calls) == 1
    assert list(upload_dir.iterdir()) == []


def test_transcribe_without_file_is_bad_request(client, recognizer):
    response = client.post("/api/transcribe")

    assert response.status_code == 400
    assert "error" in response.json()
    assert recognizer.calls == []


def test_transcribe_transcoder_failure_returns_json_error(
    client, transcoder, recognizer, upload_dir
):
    transcoder.fail = True

    response = client.post(
        "/api/transcribe",
        files={"file": ("memo.ogg", b"ogg-audio", "audio/ogg")},
    )

    assert response.status_code == 500
    assert "ffmpeg exited with code 1" in response.json()["error"]
    assert recognizer.calls == []
    assert list(upload_dir.iterdir()) == []


def test_transcribe_upload_that_cannot_be_stored_is_json_error(
    client, transcoder, recognizer, upload_dir
):
    upload_dir.write_bytes(b"not a directory")

    response = client.post(
        "/api/transcribe",
        files={"file": ("memo.webm", b"webm-audio", "audio/webm")},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to store uploaded file"}
    assert transcoder.conversions == []
    assert recognizer.calls == []


def test_live_socket_relays_frames_and_transcripts(client, streaming_recognizer):
    with client.websocket_connect("/") as websocket:
        websocket.send_bytes(b"testing")
        assert websocket.receive_json() == {"transcript": "testing"}
        websocket.send_bytes(b"testing one two")
        assert websocket.receive_json() == {"transcript": "testing one two"}

    channel = streaming_recognizer.channels[0]
    assert channel.written == [b"testing", b"testing one two"]
    assert channel.end_calls == 1


def test_live_socket_reports_engine_errors_without_closing(
    client, streaming_recognizer
):
    with client.websocket_connect("/") as websocket:
        websocket.send_bytes(b"!error")
        assert websocket.receive_json() == {"error": "Speech recognition error"}
        websocket.send_text("not audio")
        websocket.send_bytes(b"still open")

    channel = streaming_recognizer.channels[0]
    assert channel.written == [b"!error"]
    assert channel.end_calls == 1


def test_each_connection_gets_its_own_channel(client, streaming_recognizer):
    with client.websocket_connect("/") as first:
        first.send_bytes(b"one")
        first.receive_json()
    with client.websocket_connect("/") as second:
        second.send_bytes(b"two")
        second.receive_json()

    assert len(streaming_recognizer.channels) == 2
    assert streaming_recognizer.channels[0] is not streaming_recognizer.channels[1]
