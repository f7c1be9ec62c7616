"""
SkillMatch - candidate ranking engine.

Scores employees against job requests and ad-hoc skill searches.
"""

__app_name__ = "SkillMatch"
__version__ = "0.1.0"
