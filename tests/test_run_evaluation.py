import importlib.util
import json
from pathlib import Path

import pytest

_SCRIPT = Path(__file__).parent.parent / "scripts" / "run_evaluation.py"


@pytest.fixture
def cli():
    spec = importlib.util.spec_from_file_location("run_evaluation", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_cli_writes_report(cli, tmp_path, capsys):
    out = tmp_path / "report.json"
    code = cli.main(["--ciphers", "des", "--vectors", "3", "--seed", "9", "--output", str(out)])
    assert code == 0
    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["seed"] == 9
    assert [r["mode"] for r in report["roundtrip"]] == ["ECB", "CBC"]
    assert report["sac"] == []
    printed = capsys.readouterr().out
    assert "[PASS] DES/ECB" in printed
    assert "[PASS] DES/CBC" in printed


def test_cli_rejects_unknown_cipher(cli):
    with pytest.raises(SystemExit):
        cli.main(["--ciphers", "rc4"])
