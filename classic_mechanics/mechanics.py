"""
战斗机制常量表
存放等级上限与各类 "等级 (rating) -> 百分比" 换算系数
派生常量必须写成基于 MAX_CHARACTER_LEVEL 的表达式，修改等级上限时自动联动
"""

from typing import Final

# ========== 等级 ==========
MAX_CHARACTER_LEVEL: Final[int] = 60
MAX_TALENT_POINTS: Final[int] = MAX_CHARACTER_LEVEL - 9
BOSS_LEVEL: Final[int] = MAX_CHARACTER_LEVEL + 3

# ========== 近战 ==========
EXPERTISE_PER_QUARTER_PERCENT_REDUCTION: Final[float] = 32.79 / 4
MELEE_CRIT_RATING_PER_CRIT_CHANCE: Final[int] = 1
MELEE_HIT_RATING_PER_HIT_CHANCE: Final[int] = 1
ARMOR_PEN_PER_PERCENT_ARMOR: Final[float] = 13.99

# ========== 法术 ==========
SPELL_CRIT_RATING_PER_CRIT_CHANCE: Final[int] = 1
SPELL_HIT_RATING_PER_HIT_CHANCE: Final[int] = 1

# ========== 急速 ==========
HASTE_RATING_PER_HASTE_PERCENT: Final[float] = 32.79

# Shamans, Paladins, Druids get more melee haste per rating than everyone else.
SPECIAL_MELEE_HASTE_RATING_PER_HASTE_PERCENT: Final[float] = 25.22

# ========== 防御 ==========
DEFENSE_RATING_PER_DEFENSE: Final[float] = 4.92
MISS_DODGE_PARRY_BLOCK_CRIT_CHANCE_PER_DEFENSE: Final[float] = 0.04
BLOCK_RATING_PER_BLOCK_CHANCE: Final[float] = 16.39
DODGE_RATING_PER_DODGE_CHANCE: Final[float] = 45.25
PARRY_RATING_PER_PARRY_CHANCE: Final[float] = 45.25

# ========== 韧性 ==========
RESILIENCE_RATING_PER_CRIT_REDUCTION_CHANCE: Final[float] = 94.27
RESILIENCE_RATING_PER_CRIT_DAMAGE_REDUCTION_PERCENT: Final[float] = 94.27 / 2.2
