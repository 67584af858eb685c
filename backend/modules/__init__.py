"""
Feature modules for BioTrack backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py / repository.py: Business logic and data access
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
