"""Integration tests against the real filesystem and child processes."""
