"""
Line and segment primitives.
"""

from .line import Line, Segment

__all__ = ['Line', 'Segment']
