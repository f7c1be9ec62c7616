"""
Data layer for SkillMatch.

Pydantic models for candidates, requirements and matches, plus JSON loaders
standing in for the external data-access collaborator.
"""
