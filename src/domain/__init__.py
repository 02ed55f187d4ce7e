"""Domain layer - Pure business logic.

Core fiscal and geographic entities, protocols (ports) and domain events.
The domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: DAS, DeclaracaoIR, IdeNFSe, Country, State, District
- protocols/: Repository, event bus and logger interfaces
- events/: Domain events (records created, commands rejected)
"""
