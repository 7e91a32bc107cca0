from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from bouncespy.cli import app

runner = CliRunner()

BOUNCE = (
    "From: Mail Delivery Subsystem <mailer-daemon@googlemail.com>\n"
    "To: sender@example.com\n"
    "Subject: Delivery Status Notification (Failure)\n"
    "X-Spam-Score: -4.0\n"
    "\n"
    "Delivery to the following recipient failed permanently:\n"
    "\n"
    "The error that the other server returned was:\n"
    "550-5.1.1 The email account that you tried to reach does not exist.\n"
)

NO_CODE = (
    "From: postmaster@example.com\n"
    "Subject: Undeliverable\n"
    "\n"
    "Something went wrong.\n"
)


def _write_config(tmp_path: Path) -> Path:
    config = tmp_path / "config.yaml"
    config.write_text("logging:\n  level: warning\n", encoding="utf-8")
    return config


def _write_message(path: Path, contents: str = BOUNCE) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return path


def test_analyze_reports_reason(tmp_path):
    config_path = _write_config(tmp_path)
    message = _write_message(tmp_path / "bounce.eml")

    result = runner.invoke(app, ["-c", str(config_path), "analyze", str(message)])

    assert result.exit_code == 0
    assert f"{message}: hard 5.1.1 spam=-4.00" in result.stdout
    assert "bad destination mailbox address" in result.stdout


def test_analyze_json_output(tmp_path):
    config_path = _write_config(tmp_path)
    message = _write_message(tmp_path / "bounce.eml", NO_CODE)

    result = runner.invoke(app, ["-c", str(config_path), "analyze", "--json", str(message)])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip().splitlines()[-1])
    assert payload == {
        "path": str(message),
        "severity": "hard",
        "reason": "",
        "description": "no bounce reason found",
        "spam_score": 0.0,
        "found": False,
    }


def test_analyze_walks_maildir(tmp_path):
    config_path = _write_config(tmp_path)
    maildir = tmp_path / "Maildir"
    for subdir in ("cur", "new", "tmp"):
        (maildir / subdir).mkdir(parents=True)
    first = _write_message(maildir / "new" / "1")
    second = _write_message(maildir / "cur" / "2:2,S", NO_CODE)

    result = runner.invoke(app, ["-c", str(config_path), "analyze", str(maildir)])

    assert result.exit_code == 0
    assert f"{first}: hard 5.1.1" in result.stdout
    assert f"{second}: hard -" in result.stdout


def test_analyze_missing_file(tmp_path):
    config_path = _write_config(tmp_path)

    result = runner.invoke(
        app, ["-c", str(config_path), "analyze", str(tmp_path / "missing.eml")]
    )

    assert result.exit_code == 1


def test_reason_raw_body(tmp_path):
    config_path = _write_config(tmp_path)
    body = _write_message(
        tmp_path / "body.txt",
        "The reason for the problem:\n5.1.0 - Unknown address error\n",
    )

    result = runner.invoke(app, ["-c", str(config_path), "reason", "--raw", str(body)])

    assert result.exit_code == 0
    assert "5.1.0 - other address status" in result.stdout


def test_reason_from_message(tmp_path):
    config_path = _write_config(tmp_path)
    message = _write_message(tmp_path / "bounce.eml")

    result = runner.invoke(app, ["-c", str(config_path), "reason", str(message)])

    assert result.exit_code == 0
    assert "5.1.1 - bad destination mailbox address" in result.stdout


def test_codes_filters_by_severity(tmp_path):
    config_path = _write_config(tmp_path)

    result = runner.invoke(app, ["-c", str(config_path), "codes", "--severity", "soft"])

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 10
    assert any(line.startswith("421 ") for line in lines)
    assert any(line.startswith("5.2.2 ") for line in lines)
    assert not any(line.startswith("550 ") for line in lines)


def test_describe_known_and_unknown(tmp_path):
    config_path = _write_config(tmp_path)

    known = runner.invoke(app, ["-c", str(config_path), "describe", "5.7.1"])
    unknown = runner.invoke(app, ["-c", str(config_path), "describe", "9.9.9"])

    assert known.exit_code == 0
    assert "delivery not authorized, message refused" in known.stdout
    assert "severity: hard" in known.stdout
    assert "specific: yes" in known.stdout
    assert unknown.exit_code == 1


def test_invalid_config_exits_with_code_two(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("logging:\n  level: chatty\n", encoding="utf-8")
    message = _write_message(tmp_path / "bounce.eml")

    result = runner.invoke(app, ["-c", str(config_path), "analyze", str(message)])

    assert result.exit_code == 2
