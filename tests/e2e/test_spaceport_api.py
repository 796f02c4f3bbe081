"""
Spaceport API E2E 测试

需要 Spaceport 服务运行，测试完整的 API 功能。服务不可达时自动跳过。

使用方法:
    # 启动服务
    python -m spaceport.main
    # 设置环境变量（可选）：
    #   SPACEPORT_URL=http://localhost:8080
    #   SPACEPORT_API_PREFIX=/rest

    pytest tests/e2e/ -v
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from typing import Any, Generator

import pytest
import requests


def ship_body(millis, **overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "name": f"e2e-{uuid.uuid4().hex[:8]}",
        "planet": "Mars",
        "shipType": "TRANSPORT",
        "prodDate": millis(3000),
        "speed": 0.5,
        "crewSize": 10,
    }
    body.update(overrides)
    return body


@contextmanager
def fresh_ship(ships_url: str, body: dict[str, Any]) -> Generator[dict, None, None]:
    """
    创建独立的 Ship 用于单个测试，测试结束后自动删除。
    """
    resp = requests.post(ships_url, json=body, timeout=10)
    if resp.status_code != 200:
        raise RuntimeError(f"创建 Ship 失败: {resp.status_code} - {resp.text}")

    ship = resp.json()
    try:
        yield ship
    finally:
        try:
            requests.delete(f"{ships_url}/{ship['id']}", timeout=10)
        except requests.RequestException:
            pass  # 清理失败不影响测试结果


@pytest.mark.e2e
class TestHealthAndBasicEndpoints:
    """健康检查和基础端点"""

    def test_health(self, spaceport_url):
        """/health 健康检查"""
        resp = requests.get(f"{spaceport_url}/health", timeout=5)
        assert resp.status_code == 200, f"健康检查失败: {resp.text}"

    def test_stat(self, spaceport_url):
        """/stat 服务信息"""
        resp = requests.get(f"{spaceport_url}/stat", timeout=5)
        assert resp.status_code == 200
        assert resp.json()["service"] == "spaceport"


@pytest.mark.e2e
class TestShipCrud:
    """Ship 增删改查"""

    def test_create_and_get(self, ships_url, millis):
        """创建 Ship 后可以获取，isUsed 默认为 false"""
        with fresh_ship(ships_url, ship_body(millis, prodDate=millis(3019))) as ship:
            assert ship["isUsed"] is False
            assert ship["rating"] == 40.0

            resp = requests.get(f"{ships_url}/{ship['id']}", timeout=10)
            assert resp.status_code == 200
            assert resp.json() == ship

    def test_create_invalid(self, ships_url, millis):
        """校验失败返回 400"""
        for speed in (0.0, 1.0):
            resp = requests.post(ships_url, json=ship_body(millis, speed=speed), timeout=10)
            assert resp.status_code == 400

        body = ship_body(millis)
        del body["planet"]
        resp = requests.post(ships_url, json=body, timeout=10)
        assert resp.status_code == 400

    def test_edit_partial(self, ships_url, millis):
        """部分更新保留其他字段并重新计算 rating"""
        with fresh_ship(ships_url, ship_body(millis, prodDate=millis(3019))) as ship:
            resp = requests.post(
                f"{ships_url}/{ship['id']}", json={"isUsed": True}, timeout=10
            )
            assert resp.status_code == 200
            edited = resp.json()
            assert edited["name"] == ship["name"]
            assert edited["isUsed"] is True
            assert edited["rating"] == 20.0

    @pytest.mark.parametrize("bad_id", ["0", "-5", "abc"])
    def test_bad_ids(self, ships_url, bad_id):
        """无效 ID 返回 400"""
        assert requests.get(f"{ships_url}/{bad_id}", timeout=10).status_code == 400
        assert requests.delete(f"{ships_url}/{bad_id}", timeout=10).status_code == 400

    def test_missing_ship(self, ships_url):
        """不存在的 Ship 返回 404"""
        missing = f"{ships_url}/{2**62}"
        assert requests.get(missing, timeout=10).status_code == 404
        assert requests.delete(missing, timeout=10).status_code == 404
        assert requests.post(missing, json={"name": "x"}, timeout=10).status_code == 404

    def test_delete(self, ships_url, millis):
        """删除返回 200 且没有响应体"""
        resp = requests.post(ships_url, json=ship_body(millis), timeout=10)
        ship_id = resp.json()["id"]

        resp = requests.delete(f"{ships_url}/{ship_id}", timeout=10)
        assert resp.status_code == 200
        assert resp.content == b""
        assert requests.get(f"{ships_url}/{ship_id}", timeout=10).status_code == 404


@pytest.mark.e2e
class TestShipQueries:
    """列表、过滤、分页和计数"""

    def test_filter_pagination_and_count(self, ships_url, millis):
        """按唯一 planet 过滤，验证日期区间、分页和计数"""
        planet = f"P-{uuid.uuid4().hex[:10]}"
        years = [2800, 2900, 2950, 2999, 3019]
        created = []
        try:
            for year in years:
                resp = requests.post(
                    ships_url,
                    json=ship_body(millis, planet=planet, prodDate=millis(year)),
                    timeout=10,
                )
                created.append(resp.json())

            params = {"planet": planet, "after": millis(2900), "before": millis(3000)}
            resp = requests.get(f"{ships_url}/count", params=params, timeout=10)
            assert resp.json() == 3

            resp = requests.get(
                ships_url,
                params={"planet": planet, "order": "YEAR", "pageSize": 3, "pageNumber": 1},
                timeout=10,
            )
            assert resp.status_code == 200
            page = resp.json()
            assert [s["id"] for s in page] == [created[3]["id"], created[4]["id"]]

            resp = requests.get(ships_url, params={"pageSize": 0}, timeout=10)
            assert resp.status_code == 400
        finally:
            for ship in created:
                requests.delete(f"{ships_url}/{ship['id']}", timeout=10)
