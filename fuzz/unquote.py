#!/usr/bin/env python3
"""Quote/Unquote Integrity Fuzzer (Atheris).

Targets: shquote.quote, shquote.unquote
Tests the roundtrip law and the error offsets on arbitrary input.

Invariants:
- unquote(quote(s)) == s
- unquote(s) either returns a string no longer than s in UTF-8 bytes,
  or raises UnquoteError pointing at a quote character of s whose byte
  offset matches its character offset
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("shquote").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["shquote"]):
    from shquote import UnquoteError, quote, unquote


def _finding(msg: str) -> None:
    _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
    raise RuntimeError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test quote/unquote integrity."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    source = fdp.ConsumeUnicodeNoSurrogates(1024)

    # 1. Roundtrip
    roundtrip = unquote(quote(source))
    if roundtrip != source:
        _finding(f"Roundtrip mismatch: {source!r} -> {roundtrip!r}")

    # 2. Raw input
    try:
        result = unquote(source)
    except UnquoteError as e:
        if source[e.char_cursor] not in ("'", '"'):
            _finding(f"Error at non-quote char {e.char_cursor} in {source!r}")
        expected_byte = len(source[: e.char_cursor].encode("utf-8"))
        if e.byte_cursor != expected_byte:
            _finding(
                f"Byte offset {e.byte_cursor} != {expected_byte} "
                f"at char {e.char_cursor} in {source!r}"
            )
        return

    if len(result.encode("utf-8")) > len(source.encode("utf-8")):
        _finding(f"Output longer than input: {source!r} -> {result!r}")


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
