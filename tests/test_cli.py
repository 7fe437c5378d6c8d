"""Tests for the command-line entry point and config loading."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import io
import json

import pytest

import main
from ddl_transformer.core.config import load_config
from ddl_transformer.core.exceptions import ConfigurationError


class TestLoadConfig:

    def test_defaults(self):
        config = load_config()
        assert config["include_header"] is False
        assert not config["extra_structural_keywords"]

    def test_file_and_overrides(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"include_header": True, "preview": False}), encoding="utf-8")
        config = load_config(str(path), {"preview": True, "include_header": None})
        assert config["include_header"] is True
        assert config["preview"] is True

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text("{nope", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text('{"colour": "red"}', encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(path))
        assert exc_info.value.details["config_key"] == "colour"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(str(tmp_path / "absent.json"))


class TestMain:

    def test_stdin_to_stdout(self, monkeypatch, capsys, users_ddl, users_tsv):
        monkeypatch.setattr("sys.stdin", io.StringIO(users_ddl))
        assert main.main([]) == 0
        captured = capsys.readouterr()
        assert captured.out == users_tsv + "\n"
        assert "users" in captured.err

    def test_file_to_file(self, tmp_path, capsys, users_ddl, users_tsv):
        src = tmp_path / "in.sql"
        dst = tmp_path / "out.tsv"
        src.write_text(users_ddl, encoding="utf-8")
        assert main.main(["--in", str(src), "--out", str(dst), "--no-preview"]) == 0
        assert dst.read_text(encoding="utf-8") == users_tsv
        assert capsys.readouterr().out == ""

    def test_header_flag(self, monkeypatch, capsys, users_ddl):
        monkeypatch.setattr("sys.stdin", io.StringIO(users_ddl))
        assert main.main(["--header"]) == 0
        assert capsys.readouterr().out.split("\n")[1] == "name\ttype\tcomment"

    def test_parse_failure_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("SELECT 1"))
        assert main.main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "table name not found" in captured.err

    def test_bad_config(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        path.write_text('{"extra_structural_keywords": "INDEX"}', encoding="utf-8")
        assert main.main(["--config", str(path)]) == 1
        assert "extra_structural_keywords" in capsys.readouterr().err

    def test_exclusive_sources(self):
        with pytest.raises(SystemExit):
            main.parse_args(["--in", "a.sql", "--from-clipboard"])
