"""Domain layer — predicates, combinators, rules, and checkers.

This layer depends only on stdlib and pydantic.
It must never import from config.
"""
