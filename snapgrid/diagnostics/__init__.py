"""Diagnostics helpers shared by logging and export paths."""
