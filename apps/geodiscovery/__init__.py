"""Geo-discovery service for the farm marketplace."""
