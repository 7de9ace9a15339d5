"""Typed forecast models."""
