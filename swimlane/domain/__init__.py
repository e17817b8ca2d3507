"""Serialization helpers for boards and payloads."""
