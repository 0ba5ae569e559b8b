"""Pydantic models for holiday rules and resolved occurrences."""
