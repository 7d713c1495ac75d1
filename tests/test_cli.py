from __future__ import annotations

import json

import A113028_Solver as a113


def test_single_base_success(capsys):
    rc = a113.main(["10"])
    assert rc == a113.EXIT_OK
    assert capsys.readouterr().out.strip() == "10: 9867312 9867312"


def test_default_base_is_ten(capsys):
    assert a113.main([]) == 0
    assert "10: 9867312" in capsys.readouterr().out


def test_debug_flag_traces(capsys):
    assert a113.main(["6", "--debug", "--assertions"]) == 0
    out = capsys.readouterr().out
    assert "[debug] base 6" in out
    assert "[debug] lcm is 4" in out
    assert out.strip().endswith("6: 152 412")


def test_invalid_base_exit_code(capsys):
    for arg in ("1", "0", "ten"):
        assert a113.main([arg]) == a113.EXIT_INVALID
        assert "[!]" in capsys.readouterr().out


def test_no_digits_exit_code(monkeypatch, capsys):
    monkeypatch.setattr(a113, "apply_ten_rule", lambda digits, max_pow: ([], list(digits)))
    assert a113.main(["10"]) == a113.EXIT_INVALID
    assert "pruned" in capsys.readouterr().out


def test_exhausted_exit_code(monkeypatch, capsys):
    def degenerate(base, debug=False):
        return a113.DigitSelection(base=base, prime_powers=(2, 5), max_pow=5, digits=(5, 2), lcm=10)

    monkeypatch.setattr(a113, "select_digits", degenerate)
    assert a113.main(["10"]) == a113.EXIT_EXHAUSTED
    assert capsys.readouterr().out.strip() == "failed for base 10"


def test_version_block(capsys):
    assert a113.main(["--version"]) == 0
    info = json.loads(capsys.readouterr().out)
    assert info["program"] == "A113028_Solver v1"
    assert "sympy_version" in info
    assert len(info["script_sha256"]) == 64
