from __future__ import annotations

import csv
import json
from pathlib import Path

import A113028_Solver as a113


def test_sweep_writes_artifacts(tmp_path: Path, capsys):
    outdir = tmp_path / "runs"
    results = a113.run_sweep(2, 10, str(outdir), workers=1)

    assert [r.base for r in results] == list(range(2, 11))
    assert all(r.status == "ok" for r in results)
    assert results[-1].value == 9867312

    for base in range(2, 11):
        assert a113.base_done(str(outdir), base)
        summary = json.loads(Path(a113.summary_path(str(outdir), base)).read_text(encoding="utf-8"))
        assert summary["base"] == base
        assert summary["result"]["status"] == "ok"

    bfile = (outdir / "b113028.txt").read_text(encoding="utf-8").splitlines()
    terms = [ln for ln in bfile if not ln.startswith("#")]
    assert terms[:5] == ["2 1", "3 2", "4 54", "5 108", "6 152"]
    assert terms[-1] == "10 9867312"

    with open(outdir / "a113028_table.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[-1]["base"] == "10"
    assert rows[-1]["digits"] == "9 8 7 6 3 2 1"
    assert rows[-1]["lcm"] == "504"

    table = json.loads((outdir / "a113028_table.json").read_text(encoding="utf-8"))
    assert [row["base"] for row in table] == list(range(2, 11))

    log = (outdir / "sweep.log").read_text(encoding="utf-8")
    assert "START bases=2..10" in log
    assert "DONE base=10 value=9867312" in log


def test_sweep_resumes_from_summaries(tmp_path: Path, capsys, monkeypatch):
    outdir = str(tmp_path)
    a113.run_sweep(2, 6, outdir, workers=1)
    capsys.readouterr()

    def no_rerun(params):
        raise AssertionError(f"base {params.base} should have been skipped")

    monkeypatch.setattr(a113, "run_one_base", no_rerun)
    results = a113.run_sweep(2, 6, outdir, workers=1)
    assert [r.value for r in results] == [1, 2, 54, 108, 152]
    assert "already done" in capsys.readouterr().out


def test_sweep_records_failures(tmp_path: Path):
    results = a113.run_sweep(0, 3, str(tmp_path), workers=1)
    status = {r.base: r.status for r in results}
    assert status == {0: "invalid_base", 1: "invalid_base", 2: "ok", 3: "ok"}

    terms = [ln for ln in (tmp_path / "b113028.txt").read_text(encoding="utf-8").splitlines()
             if not ln.startswith("#")]
    assert terms == ["2 1", "3 2"]
    assert "ERROR base=0 status=invalid_base" in (tmp_path / "sweep.log").read_text(encoding="utf-8")


def test_sweep_with_process_pool(tmp_path: Path):
    results = a113.run_sweep(2, 8, str(tmp_path), workers=2)
    assert [r.base for r in results] == list(range(2, 9))
    assert all(r.status == "ok" for r in results)


def test_sweep_cli(tmp_path: Path, capsys):
    outdir = tmp_path / "cli_runs"
    rc = a113.main(["--mode", "sweep", "--start_base", "2", "--end_base", "5",
                    "--workers", "1", "--outdir", str(outdir)])
    assert rc == 0
    out = capsys.readouterr().out
    assert "[+] mode=sweep" in out
    assert (outdir / "b113028.txt").exists()


def test_sweep_cli_reports_failed_bases(tmp_path: Path, capsys):
    rc = a113.main(["--mode", "sweep", "--start_base", "1", "--end_base", "3",
                    "--workers", "1", "--outdir", str(tmp_path)])
    assert rc == a113.EXIT_EXHAUSTED
    assert "bases without an answer: [1]" in capsys.readouterr().out
