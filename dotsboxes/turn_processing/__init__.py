"""Move/action processing helpers.

This package centralizes caller-side gating so every move made through a
session is refused or accepted the same way and shows up consistently in logs.
"""
