"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No implicit "now" and no dependence on the machine's timezone.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
