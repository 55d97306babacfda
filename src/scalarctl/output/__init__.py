"""Output layer — human (Rich), quiet, and JSON formatting of results."""
