from pathlib import Path
import json
import tempfile

from tin_validator.app.check import main


def datafile(name: str) -> str:
    return str(Path(__file__).parents[2] / "data" / name)


def test10_check(capsys):
    with tempfile.NamedTemporaryFile() as f:
        main([datafile("tins.txt"), f.name, "--show-stats"])
        with open(f.name, encoding="utf-8") as fin:
            got = [json.loads(line) for line in fin]
    assert len(got) == 5
    assert [r["valid"] for r in got] == [True, True, False, False, True]

    err = capsys.readouterr().err
    assert ". Reading from:" in err
    assert "lines" in err


def test20_check_country():
    """
    Lines hold only the TIN when a default country is given
    """
    with tempfile.NamedTemporaryFile() as f:
        main([datafile("tins-es.txt"), f.name, "--country", "ES"])
        with open(f.name, encoding="utf-8") as fin:
            got = [json.loads(line) for line in fin]
    assert len(got) == 3
    assert got[2]["error"] == "InvalidSyntax"
