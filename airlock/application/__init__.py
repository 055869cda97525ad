"""
Application layer for the airlock controller.

Orchestrates the domain: the registry service dispatches cycle commands
and periodic ticks to airlocks and arbitrates the shared cycle timer.
Imports from the domain layer only.
"""
