"""Textual full-screen front end for Waymark."""
