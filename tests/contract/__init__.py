"""Contract tests.

Purpose
- Define behavior/invariants once and run them against every timezone rule
  provider to keep them interchangeable.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract (inputs/outputs/effects), not internals.
"""
