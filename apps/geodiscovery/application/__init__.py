"""Geo-discovery Application Layer."""
