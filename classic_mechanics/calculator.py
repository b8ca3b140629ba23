import math
from typing import Optional

from .models import CharacterClass, MechanicsTable, DEFAULT_MECHANICS, SPECIAL_MELEE_HASTE_CLASSES

# 每点精准削减 0.25% 的躲闪/招架
EXPERTISE_REDUCTION_PER_POINT = 0.25


class RatingCalculator:
    """等级 (rating) 与百分比之间的换算

    常量名中的方向即换算方向: "X_RATING_PER_Y" 表示每 1% 的 Y 需要多少 X 等级，
    因此 等级 -> 百分比 为除法，百分比 -> 等级 为乘法。
    所有方法都可传入自定义的 MechanicsTable，默认使用 DEFAULT_MECHANICS。
    """

    # ========== 暴击 / 命中 ==========

    @staticmethod
    def melee_crit_chance(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """近战暴击等级 -> 暴击率 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.melee_crit_rating_per_crit_chance

    @staticmethod
    def melee_hit_chance(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """近战命中等级 -> 命中率 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.melee_hit_rating_per_hit_chance

    @staticmethod
    def spell_crit_chance(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """法术暴击等级 -> 暴击率 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.spell_crit_rating_per_crit_chance

    @staticmethod
    def spell_hit_chance(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """法术命中等级 -> 命中率 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.spell_hit_rating_per_hit_chance

    @staticmethod
    def crit_rating_for_chance(percent: float, spell: bool = False,
                               table: Optional[MechanicsTable] = None) -> float:
        """
        暴击率 -> 暴击等级
        天赋提供的 "+X% 暴击" 以等级形式加到技能上，例如 强化背刺 每点 10%

        Args:
            percent: 暴击率 (%)
            spell: 是否为法术暴击
            table: 机制常量表

        Returns:
            等价的暴击等级
        """
        table = table or DEFAULT_MECHANICS
        if spell:
            return percent * table.spell_crit_rating_per_crit_chance
        return percent * table.melee_crit_rating_per_crit_chance

    @staticmethod
    def hit_rating_for_chance(percent: float, spell: bool = False,
                              table: Optional[MechanicsTable] = None) -> float:
        """命中率 -> 命中等级"""
        table = table or DEFAULT_MECHANICS
        if spell:
            return percent * table.spell_hit_rating_per_hit_chance
        return percent * table.melee_hit_rating_per_hit_chance

    # ========== 急速 ==========

    @staticmethod
    def haste_percent(rating: float, character_class: Optional[CharacterClass] = None,
                      melee: bool = True, table: Optional[MechanicsTable] = None) -> float:
        """
        急速等级 -> 急速 (%)
        萨满、圣骑士、德鲁伊的近战急速使用更低的换算系数

        Args:
            rating: 急速等级
            character_class: 职业 (未知时按普通职业处理)
            melee: 是否为近战急速
            table: 机制常量表

        Returns:
            急速百分比
        """
        table = table or DEFAULT_MECHANICS
        if melee and character_class in SPECIAL_MELEE_HASTE_CLASSES:
            return rating / table.special_melee_haste_rating_per_haste_percent
        return rating / table.haste_rating_per_haste_percent

    # ========== 穿透 / 精准 ==========

    @staticmethod
    def armor_reduction_percent(armor_pen_rating: float, table: Optional[MechanicsTable] = None) -> float:
        """护甲穿透等级 -> 目标护甲削减 (%)"""
        table = table or DEFAULT_MECHANICS
        return armor_pen_rating / table.armor_pen_per_percent_armor

    @staticmethod
    def expertise_points(expertise_rating: float, table: Optional[MechanicsTable] = None) -> int:
        """精准等级 -> 精准值 (只计整数点)"""
        table = table or DEFAULT_MECHANICS
        return math.floor(expertise_rating / table.expertise_per_quarter_percent_reduction)

    @staticmethod
    def expertise_reduction_percent(expertise_rating: float, table: Optional[MechanicsTable] = None) -> float:
        """
        精准等级 -> 对手躲闪/招架率削减 (%)
        公式: floor(等级 / 8.1975) * 0.25
        """
        points: int = RatingCalculator.expertise_points(expertise_rating, table)
        return points * EXPERTISE_REDUCTION_PER_POINT

    # ========== 防御 ==========

    @staticmethod
    def defense_skill(defense_rating: float, table: Optional[MechanicsTable] = None) -> int:
        """防御等级 -> 防御技能 (只计整数点)"""
        table = table or DEFAULT_MECHANICS
        return math.floor(defense_rating / table.defense_rating_per_defense)

    @staticmethod
    def defense_avoidance_percent(defense_rating: float, table: Optional[MechanicsTable] = None) -> float:
        """
        防御等级 -> 未命中/躲闪/招架/格挡/被暴击 各自的变化量 (%)
        公式: 防御技能 * 0.04
        """
        table = table or DEFAULT_MECHANICS
        skill: int = RatingCalculator.defense_skill(defense_rating, table)
        return skill * table.miss_dodge_parry_block_crit_chance_per_defense

    @staticmethod
    def block_chance(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """格挡等级 -> 格挡率 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.block_rating_per_block_chance

    @staticmethod
    def dodge_chance(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """躲闪等级 -> 躲闪率 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.dodge_rating_per_dodge_chance

    @staticmethod
    def parry_chance(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """招架等级 -> 招架率 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.parry_rating_per_parry_chance

    # ========== 韧性 ==========

    @staticmethod
    def resilience_crit_reduction(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """韧性等级 -> 被暴击率降低 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.resilience_rating_per_crit_reduction_chance

    @staticmethod
    def resilience_crit_damage_reduction(rating: float, table: Optional[MechanicsTable] = None) -> float:
        """韧性等级 -> 受到暴击伤害降低 (%)"""
        table = table or DEFAULT_MECHANICS
        return rating / table.resilience_rating_per_crit_damage_reduction_percent
