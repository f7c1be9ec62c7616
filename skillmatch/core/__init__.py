"""
Core business logic modules for SkillMatch.

Submodules:
- matching: Candidate scoring and ranking engine
"""
