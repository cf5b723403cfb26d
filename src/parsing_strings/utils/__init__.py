"""Numeric grammar helpers."""
