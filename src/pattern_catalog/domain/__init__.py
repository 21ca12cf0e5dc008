"""Domain layer - pattern unit model, example port and exceptions."""
