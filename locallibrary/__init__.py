"""Local library catalog service."""
