"""
数据模型定义
包含枚举类型 (种族/职业)、属性快照 Stats 与只读机制常量表 MechanicsTable (Pydantic)
"""

from enum import Enum
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field, computed_field

from . import mechanics

# ============================================================================
# 枚举类型 (Enums)
# ============================================================================

class Race(str, Enum):
    """种族"""
    UNKNOWN = "Unknown"
    HUMAN = "Human"
    ORC = "Orc"
    DWARF = "Dwarf"
    NIGHT_ELF = "NightElf"
    UNDEAD = "Undead"
    TAUREN = "Tauren"
    GNOME = "Gnome"
    TROLL = "Troll"
    BLOOD_ELF = "BloodElf"
    DRAENEI = "Draenei"

class CharacterClass(str, Enum):
    """职业"""
    UNKNOWN = "Unknown"
    WARRIOR = "Warrior"
    PALADIN = "Paladin"
    HUNTER = "Hunter"
    ROGUE = "Rogue"
    PRIEST = "Priest"
    SHAMAN = "Shaman"
    MAGE = "Mage"
    WARLOCK = "Warlock"
    DRUID = "Druid"

# 近战急速换算更优惠的职业
SPECIAL_MELEE_HASTE_CLASSES = frozenset({
    CharacterClass.SHAMAN,
    CharacterClass.PALADIN,
    CharacterClass.DRUID,
})

# ============================================================================
# 属性快照 (Stats)
# ============================================================================

class Stats(BaseModel):
    """基础属性快照 (不可变)"""
    model_config = ConfigDict(frozen=True)

    health: float = 0.0
    mana: float = 0.0
    agility: float = 0.0
    strength: float = 0.0
    intellect: float = 0.0
    spirit: float = 0.0
    stamina: float = 0.0
    attack_power: float = 0.0

    def add(self, other: "Stats") -> "Stats":
        """逐项相加，返回新的 Stats"""
        return Stats(**{
            name: getattr(self, name) + getattr(other, name)
            for name in Stats.model_fields
        })

# ============================================================================
# 机制常量表 (Mechanics Table)
# ============================================================================

class MechanicsTable(BaseModel):
    """只读机制常量表

    默认值与 mechanics 模块中的常量完全一致。
    天赋点数与首领等级为派生字段，始终由 max_character_level 计算得出，
    因此修改等级上限时会自动联动。

    常量按模块中的大写名称对外暴露 (见 get / as_dict)。
    """
    model_config = ConfigDict(frozen=True)

    # 等级
    max_character_level: int = Field(default=mechanics.MAX_CHARACTER_LEVEL, gt=9)

    # 近战
    expertise_per_quarter_percent_reduction: float = Field(
        default=mechanics.EXPERTISE_PER_QUARTER_PERCENT_REDUCTION, gt=0
    )
    melee_crit_rating_per_crit_chance: float = Field(default=mechanics.MELEE_CRIT_RATING_PER_CRIT_CHANCE, gt=0)
    melee_hit_rating_per_hit_chance: float = Field(default=mechanics.MELEE_HIT_RATING_PER_HIT_CHANCE, gt=0)
    armor_pen_per_percent_armor: float = Field(default=mechanics.ARMOR_PEN_PER_PERCENT_ARMOR, gt=0)

    # 法术
    spell_crit_rating_per_crit_chance: float = Field(default=mechanics.SPELL_CRIT_RATING_PER_CRIT_CHANCE, gt=0)
    spell_hit_rating_per_hit_chance: float = Field(default=mechanics.SPELL_HIT_RATING_PER_HIT_CHANCE, gt=0)

    # 急速
    haste_rating_per_haste_percent: float = Field(default=mechanics.HASTE_RATING_PER_HASTE_PERCENT, gt=0)
    special_melee_haste_rating_per_haste_percent: float = Field(
        default=mechanics.SPECIAL_MELEE_HASTE_RATING_PER_HASTE_PERCENT, gt=0
    )

    # 防御
    defense_rating_per_defense: float = Field(default=mechanics.DEFENSE_RATING_PER_DEFENSE, gt=0)
    miss_dodge_parry_block_crit_chance_per_defense: float = Field(
        default=mechanics.MISS_DODGE_PARRY_BLOCK_CRIT_CHANCE_PER_DEFENSE, gt=0
    )
    block_rating_per_block_chance: float = Field(default=mechanics.BLOCK_RATING_PER_BLOCK_CHANCE, gt=0)
    dodge_rating_per_dodge_chance: float = Field(default=mechanics.DODGE_RATING_PER_DODGE_CHANCE, gt=0)
    parry_rating_per_parry_chance: float = Field(default=mechanics.PARRY_RATING_PER_PARRY_CHANCE, gt=0)

    # 韧性
    resilience_rating_per_crit_reduction_chance: float = Field(
        default=mechanics.RESILIENCE_RATING_PER_CRIT_REDUCTION_CHANCE, gt=0
    )
    resilience_rating_per_crit_damage_reduction_percent: float = Field(
        default=mechanics.RESILIENCE_RATING_PER_CRIT_DAMAGE_REDUCTION_PERCENT, gt=0
    )

    # ========================================================================
    # 派生字段 (Derived)
    # ========================================================================

    @computed_field
    @property
    def max_talent_points(self) -> int:
        return self.max_character_level - 9

    @computed_field
    @property
    def boss_level(self) -> int:
        return self.max_character_level + 3

    # ========================================================================
    # 查询方法
    # ========================================================================

    def as_dict(self) -> Dict[str, float]:
        """全部常量 (含派生字段)，键为大写常量名"""
        return {name.upper(): value for name, value in self.model_dump().items()}

    def get(self, name: str) -> float:
        constants = self.as_dict()
        if name not in constants:
            raise KeyError(f"机制常量不存在: {name}")
        return constants[name]


DEFAULT_MECHANICS = MechanicsTable()
