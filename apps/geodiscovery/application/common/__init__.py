"""Shared application-layer pieces."""
