"""
Engraver Image Module

Preview background loading and fitting.
"""

from .background import CoverFit, fit_cover, load_background

__all__ = ['CoverFit', 'fit_cover', 'load_background']
