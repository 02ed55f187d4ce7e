"""Infrastructure layer - Adapters for the domain protocols (ports).

Structure:
- events/: In-memory event bus and the logging event handler
- logging/: structlog console adapter
- persistence/: Repository adapters (in-memory)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
