"""Small helpers shared across Waymark."""
