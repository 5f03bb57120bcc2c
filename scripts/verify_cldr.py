#!/usr/bin/env python3
"""Verify the country currency dataset against Babel CLDR data.

Runs countrycurrency.cldr.audit_dataset() over COUNTRY_CURRENCIES and
prints findings grouped by kind.

This script is informational: CLDR discrepancies are expected because
Babel's data may reflect usage patterns or lag ISO 4217 amendments. The
compiled-in dataset is authoritative.

Checks:
    1. Structural: Duplicate country codes (later records unreachable).
    2. Unknown territory or currency codes.
    3. Decimals differing from Babel's currency precision.
    4. Primary currency not among CLDR's current tender for the territory.
       Shown only with --verbose.

Exit codes:
    0: No structural errors (discrepancies are warnings, not failures).
    1: Structural errors, or Babel not installed.

Usage:
    verify_cldr.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict

from countrycurrency.cldr import AuditFinding, BabelImportError, FindingKind, audit_dataset
from countrycurrency.data import COUNTRY_CURRENCIES

_SECTIONS: tuple[tuple[FindingKind, str, str], ...] = (
    (
        FindingKind.DUPLICATE_COUNTRY,
        "[ERROR] Duplicate country codes",
        "Lookups return the first record; later duplicates are unreachable",
    ),
    (
        FindingKind.UNKNOWN_TERRITORY,
        "[WARN] Territories unknown to CLDR",
        "Verify the code against the ISO 3166-1 register",
    ),
    (
        FindingKind.UNKNOWN_CURRENCY,
        "[WARN] Currencies unknown to Babel",
        "New ISO 4217 codes may postdate the installed Babel release",
    ),
    (
        FindingKind.PRECISION_MISMATCH,
        "[WARN] Decimals vs Babel discrepancies",
        "ISO 4217 minor units are authoritative; Babel CLDR may differ",
    ),
)


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _print_report(findings: tuple[AuditFinding, ...], *, verbose: bool) -> None:
    """Print formatted report."""
    by_kind: dict[FindingKind, list[str]] = defaultdict(list)
    for finding in findings:
        by_kind[finding.kind].append(f"  {finding.detail}")

    print("Country Currency Dataset Verification")
    print("=" * 50)
    print(f"Dataset records: {len(COUNTRY_CURRENCIES)}")
    print()

    for kind, header, explanation in _SECTIONS:
        _print_section(header, explanation, by_kind[kind])

    primary = by_kind[FindingKind.PRIMARY_MISMATCH]
    if primary:
        if verbose:
            _print_section(
                "[INFO] Primary currency differs from CLDR tender",
                "CLDR lists current legal tender; funds codes and dollarized"
                " economies often differ",
                primary,
            )
        else:
            print(
                f"[INFO] {len(primary)} primary currency divergence(s)"
                f" from CLDR tender. Use --verbose to list."
            )
            print()

    if not findings:
        print("[OK] All checks passed. No discrepancies found.")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the country currency dataset against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show primary currency divergences from CLDR tender data.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run dataset verification checks."""
    args = _parse_args(argv)

    try:
        findings = audit_dataset()
    except BabelImportError as e:
        print(f"[ERROR] {e}")
        return 1

    _print_report(findings, verbose=args.verbose)

    errors = [f for f in findings if f.kind.is_structural]
    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    if findings:
        print(f"[PASS] {len(findings)} informational finding(s).")
    else:
        print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
