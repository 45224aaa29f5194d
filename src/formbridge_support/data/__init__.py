"""Static knowledge base content."""
