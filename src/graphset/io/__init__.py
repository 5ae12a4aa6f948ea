"""Readers and writers for text graph formats."""
