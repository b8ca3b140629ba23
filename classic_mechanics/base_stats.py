"""
种族/职业基础属性表

基础属性的测量方法: 用目标等级、未点天赋的裸装角色查看面板数值 (力/敏/耐/智/精)。
数值同样散落在客户端数据表中 (octbasempbyclass.txt, combatratings.txt 等)。
"""

import logging
from typing import Dict

from . import mechanics
from .models import CharacterClass, Race, Stats

logger = logging.getLogger(__name__)

# 各种族相对人类的属性偏移
RACE_OFFSETS: Dict[Race, Stats] = {
    Race.UNKNOWN: Stats(),
    Race.HUMAN: Stats(),
    Race.ORC: Stats(agility=-3, strength=3, intellect=-3, spirit=2, stamina=1),
    Race.DWARF: Stats(agility=-4, strength=5, intellect=-1, spirit=-1, stamina=1),
    Race.NIGHT_ELF: Stats(agility=4, strength=-4),
    Race.UNDEAD: Stats(agility=-2, strength=-1, intellect=-2, spirit=5),
    Race.TAUREN: Stats(agility=-4, strength=5, intellect=-4, spirit=2, stamina=1),
    Race.GNOME: Stats(agility=2, strength=-5, intellect=3),
    Race.TROLL: Stats(agility=2, strength=1, intellect=-4, spirit=1),
    Race.BLOOD_ELF: Stats(agility=2, strength=-3, intellect=3, spirit=-2),
    Race.DRAENEI: Stats(agility=-3, strength=1, spirit=2),
}


def _unmeasured_levels() -> Dict[int, Stats]:
    return {level: Stats() for level in (25, 40, 60)}


# TODO: measure level 25/40/60 baselines for every class except Priest
CLASS_BASE_STATS: Dict[CharacterClass, Dict[int, Stats]] = {
    CharacterClass.UNKNOWN: {},
    CharacterClass.WARRIOR: _unmeasured_levels(),
    CharacterClass.PALADIN: _unmeasured_levels(),
    CharacterClass.HUNTER: _unmeasured_levels(),
    CharacterClass.ROGUE: _unmeasured_levels(),
    CharacterClass.PRIEST: {
        25: Stats(health=222, mana=217, agility=26, strength=22, intellect=53, spirit=55, stamina=44),
        40: Stats(health=457, mana=631, agility=0, strength=26, intellect=78, spirit=81, stamina=39),
        50: Stats(health=792, mana=886, agility=35, strength=29, intellect=98, spirit=102, stamina=45),
        60: Stats(health=1217, mana=1096, agility=40, strength=32, intellect=120, spirit=125, stamina=52),
    },
    CharacterClass.SHAMAN: _unmeasured_levels(),
    CharacterClass.MAGE: _unmeasured_levels(),
    CharacterClass.WARLOCK: _unmeasured_levels(),
    CharacterClass.DRUID: _unmeasured_levels(),
}


def get_base_stats(race: Race, character_class: CharacterClass, level: int = 0) -> Stats:
    """获取 种族+职业+等级 的基础属性。

    Args:
        race: 种族
        character_class: 职业
        level: 角色等级，0 表示满级 (MAX_CHARACTER_LEVEL)

    Returns:
        Stats: 职业基础属性叠加种族偏移

    Raises:
        KeyError: 该职业没有此等级的基础属性
    """
    if level == 0:
        level = mechanics.MAX_CHARACTER_LEVEL
        logger.debug("未指定等级，使用满级 %d", level)

    levels = CLASS_BASE_STATS.get(character_class, {})
    if level not in levels:
        raise KeyError(f"职业基础属性不存在: {character_class.value} @ {level}")

    return levels[level].add(RACE_OFFSETS[race])
