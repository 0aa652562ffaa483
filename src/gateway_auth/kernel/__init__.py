"""Kernel – errors and clock shared by every other package."""
