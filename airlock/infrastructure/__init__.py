"""
Infrastructure layer for the airlock controller.

Adapters and in-memory stubs implementing the domain and application
ports, plus structlog configuration.
"""
