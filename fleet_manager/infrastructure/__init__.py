"""Infrastructure layer: persistence and security adapters."""
