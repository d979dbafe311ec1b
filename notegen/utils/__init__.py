"""Small helpers shared across notegen modules."""
