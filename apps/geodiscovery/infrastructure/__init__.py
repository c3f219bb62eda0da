"""Geo-discovery Infrastructure Layer."""
