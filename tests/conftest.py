"""
pytest 共享配置和 Fixtures
这个文件会被 pytest 自动加载，所有测试都可以使用这里定义的 fixtures
"""

import sys
from pathlib import Path
import pytest

# 确保 classic_mechanics 模块能被导入
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from classic_mechanics.models import MechanicsTable, CharacterClass, Race


# ============================================================================
# 基础 Fixtures（测试数据）
# ============================================================================

@pytest.fixture
def default_table():
    """默认机制常量表 (满级 60)"""
    return MechanicsTable()

@pytest.fixture
def level_70_table():
    """等级上限提高到 70 的常量表"""
    return MechanicsTable(max_character_level=70)

@pytest.fixture
def orc_priest():
    """兽人牧师 (种族偏移与职业基础属性均非零)"""
    return Race.ORC, CharacterClass.PRIEST
