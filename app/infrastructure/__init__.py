"""Infrastructure layer: persistence and security implementations."""
