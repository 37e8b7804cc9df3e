"""Domain model for a football management simulator: values, entities, nation use cases."""

__version__ = "0.1.0"