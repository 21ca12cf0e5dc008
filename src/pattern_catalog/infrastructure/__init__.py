"""Infrastructure layer - logging, singleton access and registries."""
