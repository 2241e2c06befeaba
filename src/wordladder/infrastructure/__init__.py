"""Infrastructure layer — graph storage, path sweeps, word ingestion.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from services, commands, or output.
"""
