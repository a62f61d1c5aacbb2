"""BIASLENS

A toolkit for running scripted bias-evaluation checklists against AI products.
It records PASS/FAIL outcomes with notes, scores each run on a 0-10 scale,
and keeps community star ratings for named apps.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
