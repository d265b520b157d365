"""Fuzz testing infrastructure for catalogbridge.

This package contains:
- shadow_reconciler: Simple reference implementation for differential testing
- test_reconciliation_oracle: Differential fuzzer against the real pipeline

Python 3.13+.
"""
