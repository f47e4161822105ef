"""City proximity search."""
