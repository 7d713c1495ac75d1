#!/usr/bin/env python3
"""
Check b-file for OEIS sequence A113028: a(n) = largest integer whose base-n digits
are all different (and nonzero) that is divisible by each of its digits

Independent of A113028_Solver: each term is re-derived from its digits with SymPy.
"""

import sys
from functools import reduce

import sympy
from sympy.ntheory.digits import digits as sympy_digits


def check_term(n, a):
    """Check that a's base-n digits are distinct, nonzero and all divide a"""
    ds = sympy_digits(a, n)[1:]
    nonzero = 0 not in ds
    distinct = len(set(ds)) == len(ds)
    non_dividing = [d for d in ds if d == 0 or a % d != 0]
    lcm = reduce(sympy.ilcm, ds) if nonzero else 0

    return {
        'n': n,
        'a': a,
        'digits': ds,
        'lcm': lcm,
        'nonzero': nonzero,
        'distinct': distinct,
        'non_dividing': non_dividing,
        'is_valid': a > 0 and nonzero and distinct and not non_dividing,
    }

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    filename = argv[0] if argv else 'b113028.txt'

    print("Checking A113028 property for b-file...")
    print("=" * 70)

    errors = []
    checked = 0

    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line: continue
            if line[0] == "#": continue

            parts = line.split()
            if len(parts) != 2:
                print(f"Line {line_num}: Invalid format - {line}")
                continue

            try:
                n = int(parts[0])
                a = int(parts[1])
            except ValueError as e:
                print(f"Line {line_num}: Error parsing '{line}' - {e}")
                continue

            if n < 2 or a < 1:
                print(f"Line {line_num}: Out of range - {line}")
                continue

            result = check_term(n, a)
            checked += 1

            if not result['is_valid']:
                errors.append((line_num, result))
                print(f"\n❌ FAILED at line {line_num}:")
                print(f"   n = {n}, a = {a}")
                print(f"   base-{n} digits: {result['digits']}")
                if not result['nonzero']:
                    print("   Contains a zero digit")
                if not result['distinct']:
                    print("   Digits repeat")
                if result['non_dividing']:
                    print(f"   Digits not dividing a: {result['non_dividing']}")
            else:
                print(f"n = {n} a = {a:,} digits = {result['digits']} lcm = {result['lcm']} "
                      f"with a/lcm factorization {sympy.factorint(a // result['lcm'])}")

    print("\n" + "=" * 70)
    print(f"Checked {checked} entries")

    if errors:
        print(f"\n⚠️  Found {len(errors)} ERRORS:")
        for line_num, result in errors:
            print(f"   Line {line_num}: n={result['n']}, a={result['a']}")
    else:
        print("\n✓ All entries have distinct nonzero digits dividing the term!")

    return len(errors) == 0

if __name__ == '__main__':
    success = main()
    sys.exit(0 if success else 1)
