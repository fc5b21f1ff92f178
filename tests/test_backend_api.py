"""Tests for the FastAPI backend: REST endpoints, WebSocket and the runner."""

import asyncio
import json

import orjson
import pytest
from fastapi.testclient import TestClient

from backend.app_factory import AppContext, create_app
from backend.game_runner import GameRunner
from fishgame.game import FishTankGame
from fishgame.state_machine import GameState


@pytest.fixture
def context():
    return AppContext(seed=42, autostart=False)


@pytest.fixture
def client(context):
    app = create_app(context=context)
    with TestClient(app) as test_client:
        yield test_client


def post_command(client, command, data=None):
    body = {"command": command}
    if data is not None:
        body["data"] = data
    return client.post("/api/commands", json=body)


class TestRestApi:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["state"] == "RUNNING"
        assert body["running"] is False

    def test_initial_state(self, client):
        body = client.get("/api/state").json()
        assert body["type"] == "update"
        assert body["frame"] == 0
        assert body["level"] == 1
        assert body["target_population"] == 10
        assert len(body["fishes"]) == 5
        assert body["foods"] == []
        assert body["pointer"] is None

    def test_status(self, client):
        body = client.get("/api/status").json()
        assert body["alive"] == 5
        assert body["clients"] == 0
        assert body["running"] is False

    def test_command_is_queued_until_next_step(self, client, context):
        response = post_command(client, "add_food")

        assert response.status_code == 200
        assert response.json() == {"success": True, "queued": "add_food"}
        assert context.runner.pending_command_count == 1
        assert client.get("/api/state").json()["food_charges"] == 0

        context.runner.step()

        assert context.runner.pending_command_count == 0
        body = client.get("/api/state").json()
        assert body["food_charges"] == 1
        assert body["frame"] == 1

    def test_unknown_command(self, client):
        response = post_command(client, "fly")
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Unknown command: fly"}

    def test_invalid_pointer_data(self, client, context):
        response = post_command(client, "drag_start", {"x": "left"})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid data for drag_start")
        assert context.runner.pending_command_count == 0

    def test_drag_flow(self, client, context):
        runner = context.runner
        post_command(client, "add_food")
        runner.step()

        post_command(client, "drag_start", {"x": 100, "y": 50})
        runner.step()
        body = client.get("/api/state").json()
        assert body["dragging"] is True
        assert body["pointer"] == [100.0, 50.0]

        post_command(client, "drag_release", {"x": 250, "y": 300})
        runner.step()
        body = client.get("/api/state").json()
        assert body["dragging"] is False
        assert body["pointer"] is None
        assert not any(fish["chasing"] for fish in body["fishes"])


class TestWebSocket:
    def test_initial_snapshot_is_binary_json(self, client):
        with client.websocket_connect("/ws") as ws:
            state = orjson.loads(ws.receive_bytes())
        assert state["type"] == "update"
        assert len(state["fishes"]) == 5

    def test_command_reply(self, client, context):
        with client.websocket_connect("/ws") as ws:
            ws.receive_bytes()
            ws.send_text(json.dumps({"command": "restart"}))
            assert ws.receive_json() == {"success": True, "queued": "restart"}
        assert context.runner.pending_command_count == 1

    def test_invalid_json(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_bytes()
            ws.send_text("{not json")
            assert ws.receive_json() == {"success": False, "error": "Invalid JSON payload."}

    def test_non_object_payload(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_bytes()
            ws.send_text("[1, 2]")
            assert ws.receive_json() == {"success": False, "error": "Expected a JSON object."}

    def test_unknown_command_reply(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_bytes()
            ws.send_text(json.dumps({"command": "fly"}))
            assert ws.receive_json()["success"] is False


class TestGameRunner:
    def test_food_timer_adds_charges(self):
        runner = GameRunner(FishTankGame(seed=5))
        for _ in range(125):
            runner.step(16)
        assert runner.game.level.food_charges == 1

    def test_custom_food_interval(self):
        runner = GameRunner(FishTankGame(seed=5), food_interval_ms=160)
        for _ in range(20):
            runner.step(16)
        assert runner.game.level.food_charges == 2

    def test_restart_resets_food_timer(self):
        runner = GameRunner(FishTankGame(seed=5))
        for _ in range(100):
            runner.step(16)
        runner.handle_command("restart")

        runner.step(16)

        assert runner.food_timer.accumulated_ms == 16
        assert runner.game.state is GameState.RUNNING

    def test_serialize_state(self):
        runner = GameRunner(FishTankGame(seed=5))
        payload = orjson.loads(runner.serialize_state(runner.get_state()))
        assert payload["alive"] == 5
        assert payload["casualty_limit"] == 5

    def test_start_and_stop(self):
        runner = GameRunner(FishTankGame(seed=5))
        runner.start()
        assert runner.running
        runner.stop()
        assert not runner.running
        assert runner.thread is None

    def test_status_runs_off_the_event_loop(self):
        runner = GameRunner(FishTankGame(seed=5))
        stats = asyncio.run(runner.get_status_async())
        assert stats["alive"] == 5
        assert stats["frame"] == 0
        assert not stats["running"]
