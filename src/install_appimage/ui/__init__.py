"""Console presentation helpers."""
