"""Domain layer - core business objects and interfaces.

This layer contains:
- Domain entities (messages, likes, users and read projections)
- Repository interfaces
- Mapper interface
- Domain errors
"""
