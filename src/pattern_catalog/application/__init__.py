"""Application layer - catalog service, DTOs and registration decorator."""
