"""
Tests for the command-line entry point.

The crontab program is replaced by FakeCrontab, which keeps one
crontab in memory and answers ``-l`` and ``-`` the way cron does.
"""

import io
import json
import logging
import subprocess

import pytest

from cronmenu import cli
from cronmenu import store as store_module


class FakeCrontab:
    def __init__(self, text=None):
        self.text = text  # None means no crontab for this user

    def __call__(self, args, input=None, **kwargs):
        if args[-1] == "-l":
            if self.text is None:
                return subprocess.CompletedProcess(args, 1, "", "no crontab for tester\n")
            return subprocess.CompletedProcess(args, 0, self.text, "")
        if args[-1] == "-":
            self.text = input
            return subprocess.CompletedProcess(args, 0, "", "")
        raise AssertionError(f"unexpected crontab call: {args}")


@pytest.fixture(autouse=True)
def isolate(monkeypatch, tmp_path):
    for name in ("CRONMENU_CONFIG_PATH", "CRONMENU_CRONTAB", "CRONMENU_USER",
                 "CRONMENU_LOG_DIR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, '_cronmenu', False):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def crontab(monkeypatch):
    fake = FakeCrontab("0 * * * * echo hi\n0 0 * * * backup.sh\n")
    monkeypatch.setattr(store_module.subprocess, "run", fake)
    return fake


def run_cli(tmp_path, *args):
    return cli.main([
        "--config", str(tmp_path / "config.json"),
        "--log-file", str(tmp_path / "logs" / "cronmenu.log"),
        "--no-color",
        *args,
    ])


def test_list(tmp_path, crontab, capsys):
    assert run_cli(tmp_path, "list") == 0

    out = capsys.readouterr().out
    assert "│ 1 │ 0 * * * * echo hi" in out
    assert "\033[" not in out


def test_list_read_failure_exits_nonzero(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(
        store_module.subprocess, "run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 1, "", "crontab: not allowed")
    )

    assert run_cli(tmp_path, "list") == 1
    assert "Error fetching cron jobs: crontab: not allowed" in capsys.readouterr().out


def test_add(tmp_path, crontab):
    assert run_cli(tmp_path, "add", "*/5 * * * * ping host") == 0
    assert crontab.text == "0 * * * * echo hi\n0 0 * * * backup.sh\n*/5 * * * * ping host\n"


def test_add_to_unconfigured_crontab(tmp_path, monkeypatch):
    fake = FakeCrontab()
    monkeypatch.setattr(store_module.subprocess, "run", fake)

    assert run_cli(tmp_path, "add", "*/5 * * * * ping host") == 0
    assert fake.text == "*/5 * * * * ping host\n"


def test_add_empty_entry_rejected(tmp_path, crontab):
    before = crontab.text

    assert run_cli(tmp_path, "add", "   ") == 1
    assert crontab.text == before


def test_remove(tmp_path, crontab, capsys):
    assert run_cli(tmp_path, "remove", "1") == 0
    assert crontab.text == "0 0 * * * backup.sh\n"
    assert "Cron job removed successfully!" in capsys.readouterr().out


def test_remove_out_of_range(tmp_path, crontab, capsys):
    before = crontab.text

    assert run_cli(tmp_path, "remove", "99") == 1
    assert crontab.text == before
    assert "Invalid choice!" in capsys.readouterr().out


def test_syntax(tmp_path, capsys):
    assert run_cli(tmp_path, "syntax") == 0
    assert "Cron Job Syntax Table" in capsys.readouterr().out


def test_menu_is_default(tmp_path, crontab, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n"))

    assert run_cli(tmp_path) == 0

    out = capsys.readouterr().out
    assert "Cron Job Manager" in out
    assert "Current Cron Jobs" in out


def test_init_and_show_config(tmp_path, capsys):
    assert run_cli(tmp_path, "init") == 0
    assert json.loads((tmp_path / "config.json").read_text())["crontab_command"] == "crontab"

    assert run_cli(tmp_path, "show-config") == 0
    assert "Crontab command: crontab" in capsys.readouterr().out


def test_invalid_config_file(tmp_path, capsys):
    (tmp_path / "config.json").write_text("{broken")

    assert run_cli(tmp_path, "list") == 1
    assert "Error:" in capsys.readouterr().out


def test_invalid_log_level(tmp_path, capsys):
    (tmp_path / "config.json").write_text(json.dumps({"logging": {"level": "LOUD"}}))

    assert run_cli(tmp_path, "list") == 1
    assert "Config error" in capsys.readouterr().out


def test_log_file_written(tmp_path, crontab):
    run_cli(tmp_path, "add", "* * * * * true")

    log_text = (tmp_path / "logs" / "cronmenu.log").read_text()
    assert "Added entry: * * * * * true" in log_text


def test_remove_rejects_underscored_number(tmp_path, monkeypatch, capsys):
    text = "".join(f"{i} * * * * job{i}.sh\n" for i in range(10))
    fake = FakeCrontab(text)
    monkeypatch.setattr(store_module.subprocess, "run", fake)

    assert run_cli(tmp_path, "remove", "1_0") == 1
    assert fake.text == text
    assert "Invalid choice!" in capsys.readouterr().out


def _console_handlers():
    return [
        h for h in logging.getLogger().handlers
        if getattr(h, '_cronmenu', False) and not isinstance(h, logging.FileHandler)
    ]


def test_logs_stay_off_the_console_by_default(tmp_path, crontab):
    run_cli(tmp_path, "list")

    assert _console_handlers() == []


def test_verbose_echoes_logs_to_console(tmp_path, crontab, capsys):
    cli.main([
        "--config", str(tmp_path / "config.json"),
        "--log-file", str(tmp_path / "logs" / "cronmenu.log"),
        "--no-color", "--verbose", "add", "* * * * * true",
    ])

    handlers = _console_handlers()
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG
    assert "Added entry: * * * * * true" in capsys.readouterr().err


def test_non_object_config_file(tmp_path, capsys):
    (tmp_path / "config.json").write_text("[]")

    assert run_cli(tmp_path, "list") == 1
    assert "expected a JSON object" in capsys.readouterr().out
