#!/usr/bin/env python3
"""Verify the ISO 4217 currency table against Babel CLDR data.

Compares the hardcoded ISO_4217_CURRENCIES constant against
babel.numbers.list_currencies() and get_currency_precision().
Reports discrepancies between ISO 4217 standard data and Babel's CLDR data.

This script is informational: discrepancies are expected because Babel's
CLDR data may reflect common usage patterns rather than the ISO standard.
The hardcoded constant is authoritative for ISO 4217 compliance.

Checks:
    1. Structural: Table entries that are malformed (bad code, numeric
       code out of range, duplicate numeric code).
    2. Unrecognized: Table currencies not known to Babel.
    3. Discrepancies: Table minor units differ from Babel precision.
       Pseudo-currencies (no minor units) are skipped.
    4. Not in table: Babel currencies with no table entry. Mostly
       historical codes; shown only with --verbose.

Exit codes:
    0: All checks passed (discrepancies are warnings, not failures).
    1: Structural errors (malformed entries, import failures).

Usage:
    verify_iso4217.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys


def _check_structure(table: dict[str, tuple[int, int]]) -> list[str]:
    """Check codes, numeric ranges and numeric uniqueness."""
    from moneyengine.constants import (  # noqa: PLC0415
        ISO_CURRENCY_CODE_LENGTH,
        MAX_NUMERIC_CODE,
    )

    result: list[str] = []
    seen: dict[int, str] = {}
    for code, (numeric, _digits) in sorted(table.items()):
        if len(code) != ISO_CURRENCY_CODE_LENGTH or not code.isascii() or not code.isupper():
            result.append(f"  {code}: Not a three-letter upper-case code")
        if not 0 <= numeric <= MAX_NUMERIC_CODE:
            result.append(f"  {code}: Numeric code {numeric} out of range")
        elif numeric in seen:
            result.append(f"  {code}: Numeric code {numeric} also used by {seen[numeric]}")
        else:
            seen[numeric] = code
    return result


def _check_unrecognized(
    table: dict[str, tuple[int, int]],
    babel_currencies: set[str],
) -> list[str]:
    """Check table currencies not recognized by Babel."""
    return [
        f"  {code}: In ISO_4217_CURRENCIES but not recognized by Babel"
        for code in sorted(table)
        if code not in babel_currencies
    ]


def _check_discrepancies(table: dict[str, tuple[int, int]]) -> list[str]:
    """Compare table minor units against Babel precision."""
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    result: list[str] = []
    for code, (_numeric, digits) in sorted(table.items()):
        if digits < 0:
            continue
        babel_val = get_currency_precision(code)
        if digits != babel_val:
            result.append(f"  {code}: ISO 4217={digits}, Babel CLDR={babel_val}")
    return result


def _check_not_in_table(
    table: dict[str, tuple[int, int]],
    babel_currencies: set[str],
) -> list[str]:
    """List Babel currencies with no table entry."""
    return [f"  {code}" for code in sorted(babel_currencies) if code not in table]


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _print_report(
    *,
    errors: list[str],
    unrecognized: list[str],
    discrepancies: list[str],
    not_in_table: list[str],
    entry_count: int,
    babel_count: int,
    verbose: bool,
) -> None:
    """Print formatted report."""
    print("ISO 4217 Currency Table Verification")
    print("=" * 50)
    print(f"Table entries:    {entry_count}")
    print(f"Babel currencies: {babel_count}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Malformed table entry",
        errors,
    )
    _print_section(
        "[WARN] Unrecognized currencies",
        "Table currency not known to Babel; symbols fall back to the code",
        unrecognized,
    )
    _print_section(
        "[WARN] ISO 4217 vs Babel discrepancies",
        "Hardcoded ISO 4217 data is authoritative; Babel CLDR may differ",
        discrepancies,
    )

    if not_in_table:
        if verbose:
            _print_section(
                "[INFO] Babel currencies not in table",
                "Mostly historical codes; register_currency() can add them",
                not_in_table,
            )
        else:
            print(
                f"[INFO] {len(not_in_table)} Babel currency(ies) not in table."
                " Use --verbose to list."
            )
            print()

    if not (errors or unrecognized or discrepancies):
        print("[OK] No discrepancies found.")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the ISO 4217 currency table against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List Babel currencies that have no table entry.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run ISO 4217 verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from moneyengine.constants import ISO_4217_CURRENCIES  # noqa: PLC0415

    table = dict(ISO_4217_CURRENCIES)
    babel_currencies = list_currencies()

    errors = _check_structure(table)
    unrecognized = _check_unrecognized(table, babel_currencies)
    discrepancies = _check_discrepancies(table)
    not_in_table = _check_not_in_table(table, babel_currencies)

    _print_report(
        errors=errors,
        unrecognized=unrecognized,
        discrepancies=discrepancies,
        not_in_table=not_in_table,
        entry_count=len(table),
        babel_count=len(babel_currencies),
        verbose=args.verbose,
    )

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    warnings = len(unrecognized) + len(discrepancies)
    if warnings:
        print(
            f"[PASS] {len(unrecognized)} unrecognized,"
            f" {len(discrepancies)} discrepancy(ies)."
        )
    else:
        print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
