"""Tests for the switchtac command-line front end."""

import json

import pytest

from switchtac.cli import main


def _write(tmp_path, document) -> str:
    path = tmp_path / "switch.json"
    path.write_text(json.dumps(document))
    return str(path)


DOCUMENT = {
    "expression": "day",
    "cases": [
        {"value": 1, "statements": ["x = 1"]},
        {"default": True, "statements": ["x = 0"]},
    ],
}


class TestMain:
    def test_demo_mode(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "No file provided" in out
        assert "0: goto 10" in out
        assert "# End of switch statement" in out

    def test_json_output(self, tmp_path, capsys):
        assert main(["--json", _write(tmp_path, DOCUMENT)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["code"][0] == "0: goto 5"
        assert payload["code"][-1] == "7: # End of switch statement"
        assert payload["logs"]

    def test_logs_flag_appends_trace(self, tmp_path, capsys):
        main(["--logs", _write(tmp_path, DOCUMENT)])
        assert "Switch expression: day" in capsys.readouterr().out

    def test_group_parentheses_flag(self, tmp_path, capsys):
        document = {"expression": "s", "cases": [{"value": 1, "statements": ["a = (b + c) * d"]}]}
        main(["--json", "--group-parentheses", _write(tmp_path, document)])
        code = json.loads(capsys.readouterr().out)["code"]
        assert code[1] == "1: t0 = b + c"

    def test_invalid_document_exits_with_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([_write(tmp_path, {"expression": "", "cases": []})])
        assert excinfo.value.code == 2

    def test_missing_file_exits_with_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.json")])
        assert excinfo.value.code == 2

    def test_reject_duplicate_default(self, tmp_path):
        document = {"expression": "d", "cases": [{"default": True}, {"default": True}]}
        with pytest.raises(SystemExit) as excinfo:
            main(["--reject-duplicate-default", _write(tmp_path, document)])
        assert excinfo.value.code == 2
