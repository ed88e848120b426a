"""Core configuration, exceptions and observability."""
