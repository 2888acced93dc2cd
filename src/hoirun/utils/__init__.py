"""
hoirun.utils – Small shared utilities (hierarchy path sanitizing).
"""
from .paths import hierarchy_prefix, join_entry, override_entry, strip_leading_sep

__all__ = ["hierarchy_prefix", "join_entry", "override_entry", "strip_leading_sep"]
