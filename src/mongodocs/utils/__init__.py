"""Internal utilities for mongodocs."""
