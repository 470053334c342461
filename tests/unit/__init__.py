"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real filesystem or process I/O; use monkeypatch at boundaries.
- Keep tests small, fast, and deterministic.
"""
