"""
Tests for the /api/monitor endpoints
"""
from core.models.fault_mode import FaultMode


class TestSnapshot:
    """Test GET /api/monitor/snapshot"""

    def test_default_snapshot(self, client) -> None:
        response = client.get("/api/monitor/snapshot")
        assert response.status_code == 200
        data = response.json()
        assert data["level"] == 5.2
        assert data["gas"] == 320
        assert data["relay_on"] is True
        assert data["buzzer_on"] is False
        assert data["alert_active"] is False
        assert data["threshold_exceeded"] is False
        assert data["manual_mode"] is False
        assert data["manual_relay"] is True
        assert data["fault"] == "none"
        assert data["log"] == []


class TestCommands:

    def test_set_fault(self, client, controller) -> None:
        response = client.put("/api/monitor/fault", json={"mode": "overflow"})
        assert response.status_code == 204
        assert controller.fault is FaultMode.OVERFLOW

        log = client.get("/api/monitor/snapshot").json()["log"]
        assert log[-1]["message"] == "FAULT INJECTED: Simulated sewage overflow"
        assert log[-1]["category"] == "alert"

    def test_set_fault_invalid_mode(self, client, controller) -> None:
        response = client.put("/api/monitor/fault", json={"mode": "flood"})
        assert response.status_code == 422
        assert controller.fault is FaultMode.NONE

    def test_set_manual_mode(self, client) -> None:
        response = client.put("/api/monitor/manual", json={"enabled": True})
        assert response.status_code == 204

        data = client.get("/api/monitor/snapshot").json()
        assert data["manual_mode"] is True
        assert data["log"][-1]["category"] == "manual"

    def test_set_manual_mode_missing_body(self, client) -> None:
        response = client.put("/api/monitor/manual", json={})
        assert response.status_code == 422

    def test_set_manual_relay(self, client) -> None:
        client.put("/api/monitor/manual", json={"enabled": True})
        response = client.put("/api/monitor/manual/relay", json={"on": False})
        assert response.status_code == 204

        data = client.get("/api/monitor/snapshot").json()
        assert data["relay_on"] is False
        assert data["manual_relay"] is False
        assert data["log"][-1]["message"] == "Manual relay -> OFF"

    def test_tick(self, client) -> None:
        client.put("/api/monitor/fault", json={"mode": "gas_leak"})
        response = client.post("/api/monitor/tick")
        assert response.status_code == 200
        assert response.json()["gas"] > 320

    def test_gas_leak_alert_through_api(self, client) -> None:
        client.put("/api/monitor/fault", json={"mode": "gas_leak"})
        for _ in range(30):
            data = client.post("/api/monitor/tick").json()
            if data["alert_active"]:
                break

        assert data["alert_active"] is True
        assert data["relay_on"] is False
        assert data["buzzer_on"] is True


class TestViews:

    def test_history(self, client) -> None:
        assert client.get("/api/monitor/history").json() == {"list": []}

        levels = [client.post("/api/monitor/tick").json()["level"] for _ in range(3)]
        assert client.get("/api/monitor/history").json()["list"] == levels

    def test_payload(self, client) -> None:
        response = client.get("/api/monitor/payload")
        assert response.status_code == 200
        assert response.json() == {"level": 5.2, "gas": 320, "alert": None}


class TestMeta:

    def test_root(self, client) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert "message" in response.json()

    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
