"""Graph data types consumed by the traversal services."""
