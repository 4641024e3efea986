"""Destination resolution and packet dispatch."""
