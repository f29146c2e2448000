"""Traversal services: the DFS algorithm family and its support code."""
