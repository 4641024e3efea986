"""Pydantic models for MAC addresses, destinations and dispatch results."""
