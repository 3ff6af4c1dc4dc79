"""Application layer - Port definitions.

This layer contains:
- Ports: Abstract interfaces for collaborators the domain cannot own
  (cross-instance uniqueness, the clock)

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
