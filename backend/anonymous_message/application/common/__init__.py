"""Shared application building blocks."""
