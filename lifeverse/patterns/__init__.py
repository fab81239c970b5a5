"""Seed patterns and placement helpers."""

from .library import (
    PATTERNS, get_pattern, pattern_positions, place_pattern,
    create_block_pattern, create_blinker_pattern, create_toad_pattern,
    create_beehive_pattern, create_glider_pattern, create_gosper_glider_gun_pattern
)

__all__ = [
    'PATTERNS',
    'get_pattern',
    'pattern_positions',
    'place_pattern',
    'create_block_pattern',
    'create_blinker_pattern',
    'create_toad_pattern',
    'create_beehive_pattern',
    'create_glider_pattern',
    'create_gosper_glider_gun_pattern',
]
