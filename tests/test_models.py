"""
单元测试: 数据模型测试
测试 Stats 与 MechanicsTable 的取值、派生字段、校验与只读性
"""

import pytest
from pydantic import ValidationError

from classic_mechanics import mechanics
from classic_mechanics.models import MechanicsTable, Stats, DEFAULT_MECHANICS


# ============================================================================
# Stats 模型测试
# ============================================================================

class TestStats:
    """属性快照测试"""

    def test_defaults_are_zero(self):
        stats = Stats()
        assert stats.health == 0
        assert stats.attack_power == 0

    def test_add_returns_new_instance(self):
        """测试相加返回新对象且不修改原对象"""
        a = Stats(strength=10, spirit=2)
        b = Stats(strength=-3, stamina=1)

        result = a.add(b)

        assert result == Stats(strength=7, spirit=2, stamina=1)
        assert a.strength == 10
        assert b.strength == -3

    def test_frozen(self):
        stats = Stats(mana=100)
        with pytest.raises(ValidationError):
            stats.mana = 200


# ============================================================================
# MechanicsTable 测试
# ============================================================================

class TestMechanicsTable:
    """机制常量表测试"""

    def test_defaults_match_module_constants(self, default_table):
        """测试默认值与模块常量逐一相等"""
        module_names = {name for name in dir(mechanics) if name.isupper()}
        constants = default_table.as_dict()

        assert set(constants) == module_names
        for name in module_names:
            assert constants[name] == getattr(mechanics, name), name

    def test_derived_fields_default(self, default_table):
        assert default_table.max_talent_points == 51
        assert default_table.boss_level == 63

    def test_derived_fields_follow_level(self, level_70_table):
        """测试修改等级上限后派生字段自动联动"""
        assert level_70_table.max_talent_points == 61
        assert level_70_table.boss_level == 73

    @pytest.mark.parametrize("level", [10, 25, 60, 80])
    def test_derived_invariant(self, level):
        table = MechanicsTable(max_character_level=level)
        assert table.max_talent_points == level - 9
        assert table.boss_level == level + 3

    def test_get_by_name(self, default_table):
        assert default_table.get("BOSS_LEVEL") == 63
        assert default_table.get("ARMOR_PEN_PER_PERCENT_ARMOR") == 13.99

    def test_get_unknown_name(self, default_table):
        with pytest.raises(KeyError, match="NOT_A_CONSTANT"):
            default_table.get("NOT_A_CONSTANT")

    def test_get_is_idempotent(self, default_table):
        assert default_table.get("HASTE_RATING_PER_HASTE_PERCENT") == default_table.get("HASTE_RATING_PER_HASTE_PERCENT")

    def test_assignment_rejected(self, default_table):
        """测试常量表只读"""
        with pytest.raises(ValidationError):
            default_table.max_character_level = 70
        assert default_table.max_character_level == 60

    def test_level_too_low_rejected(self):
        """测试等级上限必须大于 9 (天赋点数至少为 1)"""
        with pytest.raises(ValidationError):
            MechanicsTable(max_character_level=9)

    def test_zero_divisor_rejected(self):
        with pytest.raises(ValidationError):
            MechanicsTable(armor_pen_per_percent_armor=0)

    def test_default_instance(self):
        assert DEFAULT_MECHANICS == MechanicsTable()
