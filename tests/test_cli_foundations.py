import pytest

from errchain.config import AppConfig, CodeEntry, get_default_config_path
from errchain.core.registry import UNKNOWN_CODE
from errchain.main import bootstrap_registry, main, parse_args


def _catalog():
    return [
        {"code": 100101, "http_status": 500, "message": "Database error"},
        {"code": 110001, "http_status": 404, "message": "User not found", "reference": "docs/users.md"},
    ]


def test_parse_args_uses_default_config_when_not_provided():
    args = parse_args([])
    assert args.config == str(get_default_config_path())
    assert args.code is None
    assert args.mode is None


def test_parse_args_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        parse_args(["--mode", "json"])


def test_bootstrap_registry_registers_catalog():
    config = AppConfig(codes=[CodeEntry(code=100101, message="Database error")])
    registry = bootstrap_registry(config)
    assert 100101 in registry
    assert UNKNOWN_CODE in registry


def test_main_lists_codes(write_config, capsys):
    config_path = write_config({"codes": _catalog()})

    assert main(["--config", str(config_path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert "An internal server error occurred" in lines[0]
    assert "Database error" in lines[1]
    assert "User not found" in lines[2] and "(docs/users.md)" in lines[2]


def test_main_explains_single_code_in_full_mode(write_config, capsys):
    config_path = write_config({"codes": _catalog()})

    assert main(["--config", str(config_path), "--code", "110001", "--mode", "full"]) == 0

    out = capsys.readouterr().out
    assert "User not found" in out
    assert "sample error for code 110001" in out
    assert 'File "' in out


def test_main_unknown_code_exits_2(write_config):
    config_path = write_config({"codes": _catalog()})
    assert main(["--config", str(config_path), "--code", "4242"]) == 2


def test_main_rejects_catalog_reusing_unknown_code(write_config):
    config_path = write_config({"codes": [{"code": UNKNOWN_CODE, "message": "Internal server error"}]})
    assert main(["--config", str(config_path)]) == 1


def test_main_missing_config_exits_1(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
