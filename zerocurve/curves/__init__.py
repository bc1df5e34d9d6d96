"""
Curves package - anchor sets and the zero curves built over them.
"""

from .anchors import AnchorPoint, AnchorSet, build_anchor_set
from .zero_curve import CurveEvaluator, ZeroCurve

__all__ = [
    "AnchorPoint",
    "AnchorSet",
    "CurveEvaluator",
    "ZeroCurve",
    "build_anchor_set",
]
