"""scalarctl — scalar type descriptors with validation and wire conversion."""

__version__ = "0.1.0"
