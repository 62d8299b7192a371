"""Tests for server.py."""
import base64

import pytest
from fastapi.testclient import TestClient

import server
from vigshuffle import decode, encode

client = TestClient(server.app)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "modulus": 128}


def test_encode_text():
    r = client.post("/api/encode", json={"text": "Master of Puppets", "key1": "sayaka"})
    assert r.status_code == 200
    body = r.json()
    expected = encode(b"Master of Puppets", "sayaka")
    assert body["length"] == 17
    assert base64.b64decode(body["payload_b64"]) == expected
    assert body["text"] == expected.decode("ascii")


def test_decode_b64_with_key2():
    cipher = encode(b"hello there", "one", "two")
    r = client.post("/api/decode", json={
        "payload_b64": base64.b64encode(cipher).decode(), "key1": "one", "key2": "two"})
    assert r.status_code == 200
    assert r.json()["text"] == "hello there"


def test_empty_key2_rejected():
    r = client.post("/api/encode", json={"text": "abc", "key1": "k", "key2": ""})
    assert r.status_code == 400
    assert "key2" in r.json()["detail"]


def test_empty_key1_rejected():
    r = client.post("/api/encode", json={"text": "abc", "key1": ""})
    assert r.status_code == 400


def test_non_ascii_text_rejected():
    r = client.post("/api/encode", json={"text": "naïve", "key1": "k"})
    assert r.status_code == 400


def test_out_of_range_payload_rejected():
    r = client.post("/api/encode", json={
        "payload_b64": base64.b64encode(b"\xfe").decode(), "key1": "k"})
    assert r.status_code == 400
    assert "position 0" in r.json()["detail"]


@pytest.mark.parametrize("body", [
    {"key1": "k"},
    {"key1": "k", "text": "a", "payload_b64": "YQ=="},
    {"key1": "k", "payload_b64": "not base64!"},
])
def test_bad_payload_shape(body):
    assert client.post("/api/encode", json=body).status_code == 400


def test_payload_limit(monkeypatch):
    monkeypatch.setattr(server, "MAX_PAYLOAD_BYTES", 4)
    r = client.post("/api/encode", json={"text": "too long", "key1": "k"})
    assert r.status_code == 413


def test_encode_file_upload():
    r = client.post("/api/encode-file", data={"key1": "k1"},
                    files={"file": ("notes.txt", b"file body", "text/plain")})
    assert r.status_code == 200
    assert r.content == encode(b"file body", "k1")
    assert 'filename="notes.txt.enc"' in r.headers["content-disposition"]


def test_decode_file_upload():
    cipher = encode(b"file body", "k1", "k2")
    r = client.post("/api/decode-file", data={"key1": "k1", "key2": "k2"},
                    files={"file": ("notes.txt.enc", cipher, "application/octet-stream")})
    assert r.status_code == 200
    assert r.content == decode(cipher, "k1", "k2") == b"file body"
    assert 'filename="notes.txt"' in r.headers["content-disposition"]


def test_file_upload_out_of_range():
    r = client.post("/api/encode-file", data={"key1": "k1"},
                    files={"file": ("x.bin", b"\x00\xff", "application/octet-stream")})
    assert r.status_code == 400


@pytest.mark.parametrize("route", ["/api/encode-file", "/api/decode-file"])
def test_file_upload_empty_key1(route):
    r = client.post(route, data={"key1": ""},
                    files={"file": ("x.txt", b"abc", "text/plain")})
    assert r.status_code == 400
    assert r.json()["detail"] == "key1 must not be empty"


def test_file_upload_missing_key1():
    r = client.post("/api/encode-file", files={"file": ("x.txt", b"abc", "text/plain")})
    assert r.status_code == 400
    assert "key1" in r.json()["detail"]
