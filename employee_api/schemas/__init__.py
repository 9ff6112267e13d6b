"""Schemas — Pydantic models for the REST boundary and the upstream wire format."""
