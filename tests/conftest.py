"""
Spaceport 测试配置

包含通用的 pytest fixtures 和配置。
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio


# ============================================================================
# pytest 标记注册
# ============================================================================

def pytest_configure(config):
    """注册自定义标记"""
    config.addinivalue_line(
        "markers", "e2e: 端到端测试，需要 Spaceport 服务运行"
    )
    config.addinivalue_line(
        "markers", "unit: 单元测试，不需要外部依赖"
    )


# ============================================================================
# 通用配置
# ============================================================================

# 配置 - 支持从环境变量覆盖
SPACEPORT_URL = os.getenv("SPACEPORT_URL", "http://localhost:8080")
API_PREFIX = os.getenv("SPACEPORT_API_PREFIX", "/rest")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_millis(year: int, month: int = 1, day: int = 1) -> int:
    """返回 UTC 日期对应的毫秒时间戳"""
    moment = datetime(year, month, day, tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)


# ============================================================================
# 通用 fixtures
# ============================================================================

@pytest.fixture
def millis():
    """毫秒时间戳工厂"""
    return to_millis


@pytest.fixture
def ship_payload():
    """创建 ShipPayload 的工厂，默认是一个完整有效的 payload"""
    from spaceport.schemas import ShipPayload

    def factory(**overrides):
        data = {
            "name": "Orion",
            "planet": "Mars",
            "shipType": "TRANSPORT",
            "prodDate": to_millis(3000),
            "speed": 0.5,
            "crewSize": 100,
        }
        data.update(overrides)
        return ShipPayload.model_validate(data)

    return factory


@pytest.fixture
def make_ship():
    """创建 Ship 数据库模型的工厂"""
    from spaceport.models import Ship, ShipType

    def factory(**overrides):
        fields = {
            "name": "Orion",
            "planet": "Mars",
            "ship_type": ShipType.TRANSPORT,
            "prod_date": to_millis(3000),
            "speed": 0.5,
            "crew_size": 100,
            "is_used": False,
            "rating": 2.0,
        }
        fields.update(overrides)
        return Ship(**fields)

    return factory


@pytest_asyncio.fixture
async def db():
    """内存 SQLite 数据库服务"""
    from spaceport.database import DatabaseService

    database = DatabaseService("sqlite+aiosqlite:///:memory:")
    await database.initialize()
    await database.create_tables()
    yield database
    await database.close()


# ============================================================================
# E2E 测试 fixtures
# ============================================================================

@pytest.fixture(scope="module")
def spaceport_url() -> str:
    """返回 Spaceport 服务 URL，服务不可达时跳过测试"""
    import requests

    try:
        requests.get(f"{SPACEPORT_URL}/health", timeout=5)
    except requests.RequestException:
        pytest.skip(f"Spaceport 服务不可达: {SPACEPORT_URL}")
    return SPACEPORT_URL


@pytest.fixture(scope="module")
def ships_url(spaceport_url) -> str:
    """返回 ships 端点的完整 URL"""
    return f"{spaceport_url}{API_PREFIX}/ships"
