"""Schemas - Pydantic payload models returned inside envelopes."""
