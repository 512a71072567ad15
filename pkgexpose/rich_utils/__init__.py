"""Console helpers built on rich."""
