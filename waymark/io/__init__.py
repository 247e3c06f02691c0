"""Readers for bookmark library files."""
