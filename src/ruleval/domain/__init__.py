"""Domain layer — rules, evaluation strategies, and results.

This layer depends only on stdlib and pydantic.
It must never import from the validator or config modules.
"""
