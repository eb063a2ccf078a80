"""Regression tests for the Marine Ecological Impact Engine.

These tests run stored assessment requests end to end and compare the
results against known-good baselines in tests/data/expected.

Usage:
    uv run pytest -m regression
"""
