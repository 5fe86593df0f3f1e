import base64

import pytest
from typer.testing import CliRunner

from cryptokit.cli import hmac_sha256, rand

TAG_HEX = "338500a9b4a336d8981aaa52bbe15b6537d5c5b76665e33459365c6cc83e68ad"

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("CRYPTOKIT_HMAC_KEY", raising=False)
    monkeypatch.delenv("CRYPTOKIT_TOKEN_BYTES", raising=False)
    monkeypatch.delenv("CRYPTOKIT_LOG_LEVEL", raising=False)


# -----------------------
# cryptokit-hmac
# -----------------------


def test_hmac_compute_from_stdin():
    result = runner.invoke(hmac_sha256.app, ["-k", "supersecret"], input=b"payload")
    assert result.exit_code == 0
    assert result.output.strip() == TAG_HEX


def test_hmac_compute_from_files(tmp_path):
    keyfile = tmp_path / "key.txt"
    keyfile.write_bytes(b"supersecret\r\n")
    infile = tmp_path / "msg.bin"
    infile.write_bytes(b"payload")

    result = runner.invoke(hmac_sha256.app, ["--keyfile", str(keyfile), "--in", str(infile)])
    assert result.exit_code == 0
    assert result.output.strip() == TAG_HEX


def test_hmac_key_from_environment(monkeypatch):
    monkeypatch.setenv("CRYPTOKIT_HMAC_KEY", "supersecret")
    result = runner.invoke(hmac_sha256.app, [], input=b"payload")
    assert result.exit_code == 0
    assert result.output.strip() == TAG_HEX


def test_hmac_verify_match():
    result = runner.invoke(
        hmac_sha256.app, ["-k", "supersecret", "--verify", TAG_HEX], input=b"payload"
    )
    assert result.exit_code == 0


def test_hmac_verify_mismatch():
    result = runner.invoke(
        hmac_sha256.app, ["-k", "wrongsecret", "--verify", TAG_HEX], input=b"payload"
    )
    assert result.exit_code == 1
    assert "mismatch" in result.output


def test_hmac_verify_bad_hex():
    result = runner.invoke(
        hmac_sha256.app, ["-k", "supersecret", "--verify", "xyz"], input=b"payload"
    )
    assert result.exit_code == 2
    assert "error decoding hex tag" in result.output


def test_hmac_both_key_sources(tmp_path):
    keyfile = tmp_path / "key.txt"
    keyfile.write_text("supersecret")
    result = runner.invoke(
        hmac_sha256.app, ["-k", "a", "--keyfile", str(keyfile)], input=b"payload"
    )
    assert result.exit_code == 2
    assert "both --key and --keyfile are set" in result.output


def test_hmac_no_key():
    result = runner.invoke(hmac_sha256.app, [], input=b"payload")
    assert result.exit_code == 2
    assert "no key or keyfile provided" in result.output


def test_hmac_missing_keyfile(tmp_path):
    result = runner.invoke(
        hmac_sha256.app, ["--keyfile", str(tmp_path / "missing")], input=b"payload"
    )
    assert result.exit_code == 2
    assert "reading key file" in result.output


def test_hmac_empty_keyfile(tmp_path):
    keyfile = tmp_path / "key.txt"
    keyfile.write_bytes(b"\n")
    result = runner.invoke(hmac_sha256.app, ["--keyfile", str(keyfile)], input=b"payload")
    assert result.exit_code == 2
    assert "empty key" in result.output


def test_hmac_empty_key_in_verify_mode(tmp_path):
    keyfile = tmp_path / "key.txt"
    keyfile.write_bytes(b"\r\n")
    result = runner.invoke(
        hmac_sha256.app, ["--keyfile", str(keyfile), "--verify", TAG_HEX], input=b"payload"
    )
    assert result.exit_code == 2
    assert "error computing HMAC SHA256 sum: empty key" in result.output


def test_hmac_empty_stdin():
    result = runner.invoke(hmac_sha256.app, ["-k", "supersecret"], input=b"")
    assert result.exit_code == 2
    assert "stdin empty" in result.output


def test_hmac_missing_input_file(tmp_path):
    result = runner.invoke(
        hmac_sha256.app, ["-k", "supersecret", "--in", str(tmp_path / "missing")]
    )
    assert result.exit_code == 2
    assert "reading input file" in result.output


# -----------------------
# cryptokit-rand
# -----------------------


def test_rand_default_hex():
    result = runner.invoke(rand.app, [])
    assert result.exit_code == 0
    out = result.output.strip()
    assert len(out) == 32
    int(out, 16)


def test_rand_hex_length():
    result = runner.invoke(rand.app, ["-n", "32", "--hex"])
    assert result.exit_code == 0
    assert len(result.output.strip()) == 64


def test_rand_b64():
    result = runner.invoke(rand.app, ["-n", "24", "--b64"])
    assert result.exit_code == 0
    assert len(base64.b64decode(result.output.strip())) == 24


def test_rand_default_from_environment(monkeypatch):
    monkeypatch.setenv("CRYPTOKIT_TOKEN_BYTES", "8")
    result = runner.invoke(rand.app, [])
    assert result.exit_code == 0
    assert len(result.output.strip()) == 16


def test_rand_bad_environment(monkeypatch):
    monkeypatch.setenv("CRYPTOKIT_TOKEN_BYTES", "many")
    result = runner.invoke(rand.app, [])
    assert result.exit_code == 2
    assert "CRYPTOKIT_TOKEN_BYTES" in result.output


def test_rand_both_formats():
    result = runner.invoke(rand.app, ["--hex", "--b64"])
    assert result.exit_code == 2
    assert "cannot provide both" in result.output


def test_rand_negative():
    result = runner.invoke(rand.app, ["-n", "-3"])
    assert result.exit_code == 2
    assert "negative number of bytes: -3" in result.output


def test_rand_zero():
    result = runner.invoke(rand.app, ["-n", "0"])
    assert result.exit_code == 2
    assert "n must be > 0" in result.output


def test_rand_too_large():
    result = runner.invoke(rand.app, ["-n", str(2 ** 20 + 1)])
    assert result.exit_code == 2
    assert "n too large" in result.output
