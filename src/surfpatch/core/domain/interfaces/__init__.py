"""Interfaces implemented by pluggable strategies."""
