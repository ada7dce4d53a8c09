"""Data access for stored fields."""
