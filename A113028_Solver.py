#!/usr/bin/env python3
# A113028_Solver.py version 1
"""
Largest self-divisible number with distinct nonzero digits in base b (OEIS A113028)

Purpose
-------
a(b) is the largest integer whose base-b digits are all different, none of them
zero, and which is divisible by each of its own digits.  Divisibility by every
digit is the same as divisibility by the LCM of the digit set, so a candidate
is any multiple of LCM(digits) whose base-b representation is an exact
permutation of those digits.

Digit-set selection
-------------------
Two rules disqualify digit sets outright.

Ten Rule.  If LCM(digits) is a multiple of the base, every multiple of it ends
in a zero.  Write b = p1^e1 * p2^e2 * ...; the LCM reaches b only when every
maximal prime power pi^ei divides it.  We remove all digits that are multiples
of the largest prime power component.  For b=10 that removes 5 (the other
branch, dropping every even digit, is never explored).  For prime and prime
power bases nothing is removed: no LCM of digits below b can be a multiple of b.
For b=12 = 4*3 the digits 4 and 8 go.

Nine Rule.  A multiple of b-1 has a digit sum that is itself a multiple of b-1.
If b-1 is still in the set, the set's digit sum must be 0 mod (b-1); when the
residue r is nonzero and r itself is a digit, that single digit is removed.

Base 6 needs one extra removal (digit 5) that neither rule produces.

For b=10: [9 8 7 6 5 4 3 2 1] -> Ten Rule drops 5 -> sum 40, 40 % 9 = 4 ->
Nine Rule drops 4 -> [9 8 7 6 3 2 1], LCM 504.

These are heuristics: they pick one digit set per base, the one that has held
the answer for every base checked, but no search over alternative subsets is
made.

Descending search
-----------------
Start from the digits in descending order (the largest arrangement), round
down to a multiple of the LCM and read the digits from the top.  At the first
place whose digit is missing from the set (a repeat, a zero, or an excluded
digit) no number sharing that prefix can be an answer, so the candidate jumps
to the prefix decremented by one with every lower place at b-1, and is rounded
again.  The candidate strictly decreases, so the loop either finds the answer
or reaches zero (no permutation of this digit set is divisible by its LCM).

Operating modes
---------------
  --mode single   Solve one base (positional argument, default 10)
  --mode sweep    Solve a range of bases in a process pool, writing per-base
                  summaries, a table and an OEIS style b-file

How to run
----------
1) Install SymPy:
       pip install sympy
2) One base, with the pruning decisions and every candidate traced:
       python3 A113028_Solver.py 10 --debug
3) Sweep bases 2..20 with 8 workers:
       python3 A113028_Solver.py --mode sweep --start_base 2 --end_base 20 --workers 8
4) Check the resulting b-file:
       python3 b113028_Checker.py A113028_Solver_v1_runs/b113028.txt

Use --version to print a machine-readable environment/version block.

Version 1 (Oct 19 2026)
------------------------
* Digit-set selector (Ten Rule, base 6 exception, Nine Rule) with SymPy factoring
* Descending multiple-of-LCM search with place-value jump-ahead
* Tagged per-base results: ok / invalid_base / no_digits / exhausted
* sweep mode: resumable per-base summaries, run log, CSV/JSON table, b-file
"""

from __future__ import annotations

import argparse
import csv
import hashlib
import json
import os
import platform
import subprocess
import sys

# Large bases produce candidates with far more than 4300 decimal digits.
try:
    sys.set_int_max_str_digits(0)
except AttributeError:
    pass

import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from functools import reduce
from multiprocessing import get_context
from typing import Dict, List, Optional, Sequence, Tuple

import sympy
from sympy import factorint, ilcm
from sympy.ntheory.digits import digits as sympy_digits


program_name, program_version = "A113028_Solver", 1

DEFAULT_BASE = 10
_DIGIT_SYMBOLS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Exit codes for the single-base CLI
EXIT_OK = 0
EXIT_EXHAUSTED = 1
EXIT_INVALID = 2


# ----------------------------- errors -----------------------------
class SolverError(Exception):
    """Root of every failure the solver reports for a base."""


class InvalidBase(SolverError, ValueError):
    pass


class NoDigitsRemainError(SolverError):
    pass


class SearchExhausted(SolverError):
    """The descending search reached zero without finding a permutation."""

    def __init__(self, base: int, digits: Sequence[int], lcm: int) -> None:
        self.base = base
        self.digits = tuple(digits)
        self.lcm = lcm
        super().__init__(
            f"no multiple of lcm={lcm} is a permutation of digits {list(self.digits)} in base {base}"
        )


# ----------------------------- small utilities -----------------------------
def utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def sha256_file(path: str) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(1 << 20), b""):
            h.update(chunk)
    return h.hexdigest()

def get_git_commit() -> Optional[str]:
    # Best effort: if this file is inside a git repo, return HEAD commit hash.
    try:
        r = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    s = (r.stdout or "").strip()
    return s if s else None

def env_block(script_path: str, argv: List[str]) -> Dict[str, object]:
    return {
        "program": f"{program_name} v{program_version}",
        "script_path": os.path.abspath(script_path),
        "script_sha256": sha256_file(script_path),
        "git_commit": get_git_commit(),
        "command_line": " ".join(argv),
        "python_version": sys.version.replace("\n", " "),
        "platform": platform.platform(),
        "sympy_version": sympy.__version__,
    }


# ----------------------------- base digits / rendering -----------------------------
def to_base_digits(n: int, base: int) -> List[int]:
    """Digit values of n >= 0 in the given base, most significant first."""
    if n < 0:
        raise ValueError(f"cannot take base-{base} digits of negative {n}")
    return list(sympy_digits(n, base)[1:])

def render_number(n: int, base: int) -> str:
    """Symbols 0-9a-z for bases up to 36, an explicit digit list above that."""
    ds = to_base_digits(n, base)
    if base <= 36:
        return "".join(_DIGIT_SYMBOLS[d] for d in ds)
    return str(ds)

def format_number(n: int, base: int) -> str:
    return f"{n} {render_number(n, base)}"

def has_a113028_property(n: int, base: int) -> bool:
    """True if n's base digits are distinct, nonzero and each divides n."""
    if n <= 0:
        return False
    ds = to_base_digits(n, base)
    if 0 in ds or len(set(ds)) != len(ds):
        return False
    return all(n % d == 0 for d in ds)


# ----------------------------- configuration -----------------------------
@dataclass(frozen=True)
class SolverParams:
    base: int
    debug: bool = False
    assertions: bool = False


def validate_base(base: object) -> int:
    # bool is an int subclass; True is not a base.
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"base must be an integer, got {base!r}")
    if base < 2:
        raise InvalidBase(f"base must be >= 2, got {base}")
    return base

def parse_base(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise InvalidBase(f"base must be an integer, got {text!r}") from None
    return validate_base(value)


# ----------------------------- digit-set selector -----------------------------
@dataclass(frozen=True)
class DigitSelection:
    base: int
    prime_powers: Tuple[int, ...]      # p^e components of base, ascending
    max_pow: int
    digits: Tuple[int, ...]            # descending
    lcm: int
    ten_rule_removed: Tuple[int, ...] = ()
    base6_removed: Tuple[int, ...] = ()
    nine_rule_removed: Optional[int] = None
    nine_rule_residue: Optional[int] = None

    @property
    def digit_set(self) -> frozenset:
        return frozenset(self.digits)


def prime_power_factors(base: int) -> Tuple[int, ...]:
    """Prime-power components of base, ascending.  12 -> (3, 4)."""
    return tuple(sorted(int(p) ** int(e) for p, e in factorint(base).items()))

def apply_ten_rule(digits: Sequence[int], max_pow: int) -> Tuple[List[int], List[int]]:
    """Drop every digit that is a multiple of max_pow.  Returns (kept, removed)."""
    removed = [d for d in digits if d % max_pow == 0]
    kept = [d for d in digits if d % max_pow != 0]
    return kept, removed

def apply_base6_exception(digits: Sequence[int], base: int) -> Tuple[List[int], List[int]]:
    kept = list(digits)
    if base == 6 and 5 in kept:
        kept.remove(5)
        return kept, [5]
    return kept, []

def apply_nine_rule(digits: Sequence[int], base: int) -> Tuple[List[int], Optional[int], Optional[int]]:
    """Fix the digit sum mod (base-1) by removing the digit equal to the residue.

    Only applies when base-1 leads the (descending) digit list.  Returns
    (kept, removed_digit, residue); removed_digit is None when nothing matched.
    """
    kept = list(digits)
    if not kept or kept[0] != base - 1:
        return kept, None, None
    residue = sum(kept) % (base - 1)
    if residue != 0 and residue in kept:
        kept.remove(residue)
        return kept, residue, residue
    return kept, None, residue

def lcm_of_digits(digits: Sequence[int]) -> int:
    if not digits:
        raise NoDigitsRemainError("every candidate digit was pruned; no digit set remains")
    return int(reduce(ilcm, digits))

def select_digits(base: int, debug: bool = False) -> DigitSelection:
    """Prune the alphabet {1..base-1} down to the digit set searched for a(base)."""
    base = validate_base(base)
    if debug:
        print(f"[debug] base {base}")

    prime_powers = prime_power_factors(base)
    max_pow = prime_powers[-1]
    digits = list(range(base - 1, 0, -1))

    digits, ten_removed = apply_ten_rule(digits, max_pow)
    if debug and ten_removed:
        print(f"[debug] removing {','.join(map(str, ten_removed))} for the Ten Rule (max prime power {max_pow})")

    digits, base6_removed = apply_base6_exception(digits, base)
    if debug and base6_removed:
        print("[debug] removing 5 for the exception in base 6")

    digits, nine_removed, residue = apply_nine_rule(digits, base)
    if debug and nine_removed is not None:
        print(f"[debug] removing {nine_removed} for the Nine Rule (digit sum residue {residue} mod {base - 1})")

    lcm = lcm_of_digits(digits)
    if debug:
        print(f"[debug] digits are {digits}")
        print(f"[debug] lcm is {lcm}")

    return DigitSelection(
        base=base,
        prime_powers=prime_powers,
        max_pow=max_pow,
        digits=tuple(digits),
        lcm=lcm,
        ten_rule_removed=tuple(ten_removed),
        base6_removed=tuple(base6_removed),
        nine_rule_removed=nine_removed,
        nine_rule_residue=residue,
    )


# ----------------------------- descending permutation search -----------------------------
@dataclass(frozen=True)
class SearchResult:
    value: int
    iterations: int
    jumps: int


def initial_candidate(digits: Sequence[int], base: int) -> int:
    """The digits read as one base-`base` number, most significant first."""
    n = 0
    for d in digits:
        n = n * base + d
    return n

def jump_below(n: int, base: int, place: int) -> int:
    """Largest value below n whose digits above `place` match n's and whose
    digit at `place` is one less (every lower place becomes base-1)."""
    return n - n % (base ** place) - 1

def search(
    digits: Sequence[int],
    lcm: int,
    base: int,
    debug: bool = False,
    assertions: bool = False,
) -> SearchResult:
    """Largest multiple of lcm whose base digits are exactly a permutation of `digits`.

    Raises SearchExhausted when the candidate drops to zero first.
    """
    width = len(digits)
    wanted = set(digits)
    powers = [base ** place for place in range(width)]

    n = initial_candidate(digits, base)
    if debug:
        print(f"[debug] {format_number(n, base)}")

    iterations = 0
    jumps = 0
    while n > 0:
        iterations += 1
        n -= n % lcm
        if debug:
            print(f"[debug] {format_number(n, base)}")

        available = set(wanted)
        for place in range(width - 1, -1, -1):
            digit = (n // powers[place]) % base
            if digit in available:
                available.remove(digit)
                continue
            nxt = jump_below(n, base, place)
            if assertions:
                assert nxt < n, f"jump did not decrease: {n} -> {nxt}"
            n = nxt
            jumps += 1
            break

        if not available:
            if assertions:
                assert n % lcm == 0
                assert has_a113028_property(n, base), f"accepted {n} fails A113028 in base {base}"
            if debug:
                print(f"[debug] base {base} done in {iterations} iterations!")
            return SearchResult(value=n, iterations=iterations, jumps=jumps)

    raise SearchExhausted(base, digits, lcm)


# ----------------------------- one base -----------------------------
@dataclass
class BaseResult:
    base: int
    status: str                       # ok | invalid_base | no_digits | exhausted
    value: Optional[int] = None
    rendering: str = ""
    digits: List[int] = field(default_factory=list)
    lcm: Optional[int] = None
    iterations: int = 0
    jumps: int = 0
    runtime_sec: float = 0.0
    error: Optional[str] = None


def solve(params: SolverParams) -> Tuple[DigitSelection, SearchResult]:
    selection = select_digits(params.base, debug=params.debug)
    found = search(
        selection.digits,
        selection.lcm,
        selection.base,
        debug=params.debug,
        assertions=params.assertions,
    )
    return selection, found

def run_one_base(params: SolverParams) -> BaseResult:
    """Solve one base and return a tagged result.  Solver errors never escape."""
    t0 = time.time()
    res = BaseResult(base=params.base, status="ok")
    try:
        selection, found = solve(params)
    except InvalidBase as e:
        res.status = "invalid_base"
        res.error = str(e)
    except NoDigitsRemainError as e:
        res.status = "no_digits"
        res.error = str(e)
    except SearchExhausted as e:
        res.status = "exhausted"
        res.digits = list(e.digits)
        res.lcm = e.lcm
        res.error = str(e)
    else:
        res.value = found.value
        res.rendering = render_number(found.value, selection.base)
        res.digits = list(selection.digits)
        res.lcm = selection.lcm
        res.iterations = found.iterations
        res.jumps = found.jumps
    res.runtime_sec = time.time() - t0
    return res


# ----------------------------- sweep artifacts -----------------------------
def base_dir(outdir: str, base: int) -> str:
    return os.path.join(outdir, f"base_{base:03d}")

def summary_path(outdir: str, base: int) -> str:
    return os.path.join(base_dir(outdir, base), f"summary_base_{base:03d}.json")

def base_done(outdir: str, base: int) -> bool:
    return os.path.isfile(summary_path(outdir, base))

def write_base_summary(outdir: str, res: BaseResult, env: Dict[str, object]) -> str:
    ensure_dir(base_dir(outdir, res.base))
    path = summary_path(outdir, res.base)
    summary = {
        "environment": env,
        "base": res.base,
        "written_utc": utc_now_iso(),
        "result": asdict(res),
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2, sort_keys=True)
    return path

def load_base_summary(outdir: str, base: int) -> BaseResult:
    with open(summary_path(outdir, base), encoding="utf-8") as f:
        s = json.load(f)
    return BaseResult(**s["result"])

_TABLE_FIELDS = [
    "base", "status", "value", "rendering", "digits", "lcm",
    "iterations", "jumps", "runtime_sec", "error",
]

def write_table(outdir: str, results: List[BaseResult]) -> None:
    """Write a113028_table.csv, a113028_table.json and b113028.txt."""
    rows = [asdict(r) for r in sorted(results, key=lambda r: r.base)]

    with open(os.path.join(outdir, "a113028_table.csv"), "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=_TABLE_FIELDS, extrasaction="ignore")
        w.writeheader()
        for row in rows:
            out = dict(row)
            out["digits"] = " ".join(map(str, row["digits"]))
            out["runtime_sec"] = round(float(row["runtime_sec"]), 6)
            w.writerow(out)

    with open(os.path.join(outdir, "a113028_table.json"), "w", encoding="utf-8") as f:
        json.dump(rows, f, indent=2, sort_keys=True)

    with open(os.path.join(outdir, "b113028.txt"), "w", encoding="utf-8") as f:
        f.write(f"# A113028 terms written by {program_name} v{program_version}\n")
        for row in rows:
            if row["status"] == "ok":
                f.write(f"{row['base']} {row['value']}\n")


def _init_worker() -> None:
    try:
        sys.set_int_max_str_digits(0)
    except AttributeError:
        pass

def _log(logf, line: str) -> None:
    logf.write(f"{utc_now_iso()} {line}\n")
    logf.flush()

def run_sweep(
    start_base: int,
    end_base: int,
    outdir: str,
    workers: int,
    debug: bool = False,
    assertions: bool = False,
    env: Optional[Dict[str, object]] = None,
) -> List[BaseResult]:
    """Solve every base in [start_base, end_base], skipping bases already summarised."""
    env = env or {}
    ensure_dir(outdir)
    results: Dict[int, BaseResult] = {}
    pending: List[SolverParams] = []

    with open(os.path.join(outdir, "sweep.log"), "a", encoding="utf-8") as logf:
        _log(logf, f"START bases={start_base}..{end_base} workers={workers} debug={debug} assertions={assertions}")

        for base in range(start_base, end_base + 1):
            if base_done(outdir, base):
                try:
                    results[base] = load_base_summary(outdir, base)
                except (OSError, ValueError, KeyError, TypeError) as e:
                    _log(logf, f"ERROR base={base} unreadable summary, recomputing: {e!r}")
                else:
                    print(f"[=] base={base}: already done, skipping.")
                    continue
            pending.append(SolverParams(base=base, debug=debug, assertions=assertions))

        def record(res: BaseResult) -> None:
            results[res.base] = res
            write_base_summary(outdir, res, env)
            if res.status == "ok":
                _log(logf, f"DONE base={res.base} value={res.value} lcm={res.lcm} "
                           f"iterations={res.iterations} jumps={res.jumps} runtime_sec={res.runtime_sec:.3f}")
                print(f"[>] base={res.base} a={format_number(res.value, res.base)} "
                      f"iterations={res.iterations} runtime={res.runtime_sec:.2f} s")
            else:
                _log(logf, f"ERROR base={res.base} status={res.status} error={res.error}")
                print(f"[!] base={res.base} status={res.status}: {res.error}")

        if workers <= 1 or len(pending) <= 1:
            for params in pending:
                record(run_one_base(params))
        else:
            ctx = get_context("fork") if sys.platform == "darwin" else get_context()
            with ctx.Pool(processes=workers, initializer=_init_worker) as pool:
                for res in pool.imap_unordered(run_one_base, pending, chunksize=1):
                    record(res)

        ordered = [results[b] for b in sorted(results)]
        write_table(outdir, ordered)
        ok = sum(1 for r in ordered if r.status == "ok")
        _log(logf, f"END solved={ok}/{len(ordered)}")

    return ordered


# ----------------------------- CLI -----------------------------
def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description=f"{program_name}: largest number with distinct nonzero base-b digits, divisible by each digit (OEIS A113028).",
    )
    ap.add_argument("base", nargs="?", default=str(DEFAULT_BASE),
                    help=f"Base for single mode (default {DEFAULT_BASE}).")
    ap.add_argument("--version", action="store_true",
                    help="Print version/environment info and exit")
    ap.add_argument("--mode", default="single", choices=["single", "sweep"],
                    help="single: solve one base. sweep: solve start_base..end_base in a process pool.")
    ap.add_argument("--start_base", type=int, default=2)
    ap.add_argument("--end_base", type=int, default=20)
    ap.add_argument("--workers", type=int, default=0,
                    help="Worker processes for sweep mode (0 = one per CPU).")
    ap.add_argument("--outdir", default=f"{program_name}_v{program_version}_runs")
    ap.add_argument("--debug", action="store_true",
                    help="Trace every pruning decision, the LCM and each rounded candidate.")
    ap.add_argument("--assertions", action="store_true",
                    help="Re-verify each accepted value and each jump.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    cmdline = [sys.argv[0]] + (list(argv) if argv is not None else sys.argv[1:])

    if args.version:
        print(json.dumps(env_block(__file__, cmdline), indent=2, sort_keys=True))
        return EXIT_OK

    if args.mode == "sweep":
        if args.end_base < args.start_base:
            ap.error("--end_base must be >= --start_base")
        workers = args.workers if args.workers and args.workers > 0 else (os.cpu_count() or 1)
        print(f"[+] {program_name} v{program_version}")
        print(f"[+] mode=sweep outdir={args.outdir}")
        print(f"[+] base range: {args.start_base}..{args.end_base}")
        print(f"[+] workers={workers} debug={args.debug} assertions={args.assertions}")
        print(f"[+] start time (UTC): {utc_now_iso()}\n")

        results = run_sweep(
            args.start_base,
            args.end_base,
            args.outdir,
            workers,
            debug=args.debug,
            assertions=args.assertions,
            env=env_block(__file__, cmdline),
        )
        failed = [r.base for r in results if r.status != "ok"]
        if failed:
            print(f"[!] bases without an answer: {failed}")
        print(f"  table written to {os.path.join(args.outdir, 'a113028_table.csv')}")
        print(f"\n[+] Finished. End time (UTC): {utc_now_iso()}")
        return EXIT_OK if not failed else EXIT_EXHAUSTED

    try:
        base = parse_base(args.base)
        selection, found = solve(SolverParams(base=base, debug=args.debug, assertions=args.assertions))
    except SearchExhausted as e:
        print(f"failed for base {e.base}")
        return EXIT_EXHAUSTED
    except (InvalidBase, NoDigitsRemainError) as e:
        print(f"[!] {e}")
        return EXIT_INVALID

    print(f"{selection.base}: {format_number(found.value, selection.base)}")
    return EXIT_OK


if __name__ == "__main__":
    if sys.platform == "darwin":
        try:
            import multiprocessing as mp
            mp.set_start_method("fork")
        except RuntimeError:
            pass
    raise SystemExit(main())
