from pathlib import Path

from apps.cli.run import main


def _dict(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("Crane\nraise\nstare\ntrace\ncared\ncat\n", encoding="utf-8")
    return str(p)


def test_bench_writes_outputs(tmp_path: Path, capsys):
    outdir = tmp_path / "reports"
    rc = main(["-d", _dict(tmp_path), "--seed", "1", "bench", "-t", "3",
               "--progress", "off", "--outdir", str(outdir)])
    assert rc == 0
    out = capsys.readouterr().out
    assert "per each try" in out and "solved 3/3" in out
    assert len(list(outdir.glob("bench_*.csv"))) == 1
    assert len(list(outdir.glob("bench_*_manifest.json"))) == 1


def test_solve_prints_guesses(tmp_path: Path, capsys):
    rc = main(["-d", _dict(tmp_path), "--seed", "4", "solve", "--strategy", "letter_freq"])
    assert rc == 0
    assert "Solved:" in capsys.readouterr().out


def test_missing_length_exits_nonzero(tmp_path: Path):
    assert main(["-d", _dict(tmp_path), "-l", "7", "solve"]) == 1


def test_missing_dictionary_exits_nonzero(tmp_path: Path):
    assert main(["-d", str(tmp_path / "nope.txt"), "solve"]) == 1


def test_undecodable_dictionary_exits_nonzero(tmp_path: Path):
    p = tmp_path / "latin1.txt"
    p.write_bytes("crane\ncaf\xe9s\n".encode("latin-1"))
    assert main(["-d", str(p), "solve"]) == 1


def test_dictionary_path_is_a_directory(tmp_path: Path):
    assert main(["-d", str(tmp_path), "solve"]) == 1
