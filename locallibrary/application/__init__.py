"""Application layer: use cases, protocols and workflow plumbing."""
