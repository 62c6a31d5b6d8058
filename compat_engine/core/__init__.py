"""
Core business logic for the compatibility engine.

Submodules:
- compatibility: Category scorers, result cache and the matching engine
"""
