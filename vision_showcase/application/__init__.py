"""Application layer: DTOs, use cases and stateful services."""
