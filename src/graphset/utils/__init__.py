"""Utility functions and validation tools."""
