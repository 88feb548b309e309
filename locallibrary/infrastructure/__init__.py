"""Infrastructure layer: persistence, HTTP routers and dependency wiring."""
