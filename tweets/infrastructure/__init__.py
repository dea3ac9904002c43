"""Infrastructure layer - storage clients, documents, mappers and repositories."""
