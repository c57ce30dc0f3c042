"""Domain types for the encoding converter."""
