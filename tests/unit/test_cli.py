"""Tests for the phishscope command line interface."""

import io
import json

import pytest

from phishscope.cli.main import create_parser, main

SUSPICIOUS_EMAIL = {
    "sender": "alerts@unknown-domain.net",
    "subject": "Mailbox notice",
    "body": "Your mailbox is almost full, open the portal to keep receiving mail.",
    "securityWarnings": [{"text": "This message may be dangerous", "severity": "critical"}],
}

BENIGN_EMAIL = {
    "sender": "Jordan Lee <jordan@northwind-traders.example>",
    "subject": "Quarterly planning notes",
    "body": "Hi team, the notes from this morning's planning meeting are attached below.",
}


def run_cli(*argv):
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    return exc_info.value.code


class TestAnalyzeCommand:

    def test_scores_a_file(self, tmp_path, capsys):
        path = tmp_path / "email.json"
        path.write_text(json.dumps(SUSPICIOUS_EMAIL), encoding="utf-8")

        assert run_cli("analyze", str(path)) == 0

        output = capsys.readouterr().out
        assert "85/100 (HIGH risk)" in output
        assert "CRITICAL: This message may be dangerous" in output

    def test_json_output_for_a_batch(self, tmp_path, capsys):
        path = tmp_path / "batch.json"
        path.write_text(json.dumps([SUSPICIOUS_EMAIL, BENIGN_EMAIL]), encoding="utf-8")

        assert run_cli("analyze", str(path), "--json") == 0

        results = json.loads(capsys.readouterr().out)
        assert [r["source"] for r in results] == [f"{path}[0]", f"{path}[1]"]
        assert results[0]["score"] == 85
        assert results[0]["risk_level"] == "high"
        assert results[1] == {
            "source": f"{path}[1]",
            "score": 0,
            "flags": [],
            "risk_level": "low",
        }

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(BENIGN_EMAIL)))

        assert run_cli("analyze") == 0

        assert "-: 0/100 (LOW risk)" in capsys.readouterr().out

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        assert run_cli("analyze", str(path)) == 1
        assert "❌" in capsys.readouterr().out

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"sender": "\xff\xfe"}')

        assert run_cli("analyze", str(path)) == 1
        assert f"❌ {path}" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        assert run_cli("analyze", str(tmp_path / "missing.json")) == 1

    def test_rejects_non_object_payload(self, tmp_path, capsys):
        path = tmp_path / "string.json"
        path.write_text(json.dumps(["just a string", BENIGN_EMAIL]), encoding="utf-8")

        assert run_cli("analyze", str(path)) == 1

        output = capsys.readouterr().out
        assert f"❌ {path}[0]" in output
        assert f"{path}[1]: 0/100" in output


class TestConfigCommand:

    def test_default_configuration(self, capsys):
        assert run_cli("config") == 0
        assert "Configuration validation passed" in capsys.readouterr().out


def test_parser_defaults():
    args = create_parser().parse_args(["analyze"])

    assert args.command == "analyze"
    assert args.files == []
    assert args.json is False


def test_no_command_prints_help(capsys):
    assert run_cli() == 0
    assert "usage: phishscope" in capsys.readouterr().out
