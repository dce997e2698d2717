"""Core interfaces.

Why:
- Defines the contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: the core depends on abstractions.
"""
