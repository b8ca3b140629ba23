"""
classic_mechanics 包初始化文件
"""

from . import mechanics
from .models import Race, CharacterClass, Stats, MechanicsTable, DEFAULT_MECHANICS
from .calculator import RatingCalculator
from .base_stats import RACE_OFFSETS, CLASS_BASE_STATS, get_base_stats

__all__ = [
    'mechanics',
    'Race',
    'CharacterClass',
    'Stats',
    'MechanicsTable',
    'DEFAULT_MECHANICS',
    'RatingCalculator',
    'RACE_OFFSETS',
    'CLASS_BASE_STATS',
    'get_base_stats',
]
