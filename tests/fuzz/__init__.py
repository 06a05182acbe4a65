"""Fuzz testing infrastructure for shquote.

This package contains:
- shadow_unquote: Simple reference implementation for differential testing
- test_unquote_oracle: Differential property tests against the shadow model

Python 3.13+.
"""
