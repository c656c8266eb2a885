"""
Test suites package.

This repository keeps `testsuites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - page objects and framework reuse from other projects
"""
