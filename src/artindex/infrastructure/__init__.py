"""Infrastructure layer — filesystem access for articles and indexes."""
