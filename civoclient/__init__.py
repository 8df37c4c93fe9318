"""Transport, data classes and mixins for a Civo cloud API client."""

__version__ = "0.1.0"