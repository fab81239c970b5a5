"""Terminal visualization of evolving universes."""

from .painter import GridPainter, Color
from .animator import (
    Animator, FullViewAnimator, AutoPanAnimator, CenterAutoPanAnimator, ANIMATORS
)

__all__ = [
    'GridPainter',
    'Color',
    'Animator',
    'FullViewAnimator',
    'AutoPanAnimator',
    'CenterAutoPanAnimator',
    'ANIMATORS',
]
