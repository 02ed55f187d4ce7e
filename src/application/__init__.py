"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that register records
- Queries: Read operations that answer existence checks

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- validators/: Rule sets run by the handlers
- responses/: Request-scoped results with ordered error messages
- services/: Application services over the repositories and event bus
- mappers/, view_models/: Entity to read model projection

The application layer orchestrates domain logic but contains no business rules.
"""
