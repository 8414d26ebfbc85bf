# tests/test_logging.py

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

from name_validator.config import NVConfig
from name_validator.logging import get_logger, list_active_loggers, resolve_log_dir
from name_validator.logging.logger import _open_file_handler

SRC_PATH = Path(__file__).resolve().parent.parent / "src"


def test_get_logger_namespaces_module_loggers():
    log = get_logger("tests.logging")
    assert log.name == "name_validator.tests.logging"
    assert log.propagate is True
    assert "name_validator.tests.logging" in list_active_loggers()


def test_get_logger_keeps_package_names():
    assert get_logger("name_validator.batch.aggregate").name == "name_validator.batch.aggregate"
    assert get_logger().name == "name_validator"


def test_relative_log_dir_follows_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_log_dir(NVConfig({})) == tmp_path / "logs"
    assert resolve_log_dir(NVConfig({"paths": {"logs_dir": "out/logs"}})) == tmp_path / "out" / "logs"


def test_absolute_log_dir_is_kept(tmp_path):
    cfg = NVConfig({"logging": {"dir": str(tmp_path / "x")}, "paths": {"logs_dir": "ignored"}})
    assert resolve_log_dir(cfg) == tmp_path / "x"


def test_unopenable_log_file_gives_no_handler(tmp_path):
    assert _open_file_handler(tmp_path, logging.INFO, rotate=False) is None
    assert _open_file_handler(tmp_path, logging.INFO, rotate=True) is None


def test_import_and_decompose_with_unwritable_log_dir(tmp_path):
    # A regular file where the log directory's parent should be makes
    # mkdir fail regardless of the user's privileges.
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    config_path = tmp_path / "nv.yml"
    config_path.write_text(
        f"paths:\n  logs_dir: {(blocker / 'logs').as_posix()}\n", encoding="utf-8"
    )

    env = dict(os.environ)
    env["NAME_VALIDATOR_CONFIG"] = str(config_path)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_PATH), env.get("PYTHONPATH")]))

    code = (
        "from name_validator import decompose\n"
        "v = decompose('john smith')\n"
        "print(v.first_name, v.last_name)\n"
    )
    proc = subprocess.run(
        [sys.executable, "-c", code],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "John Smith"
    assert "console only" in proc.stderr
    assert not (tmp_path / "logs").exists()
