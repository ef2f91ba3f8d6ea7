from __future__ import annotations

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Set

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from .config import AppConfig, SimulationConfig
from .world import World

logger = logging.getLogger(__name__)

MIN_SPEED_MULTIPLIER = 0.1
MAX_SPEED_MULTIPLIER = 5.0


class SpeedRequest(BaseModel):
    multiplier: float = 1.0


class SimulationController:
    """Steps one ``World`` on an asyncio task and fans snapshots out to websockets.

    ``launch``/``shutdown`` own the stepping task; ``start``/``stop`` only
    pause and resume it, so they are safe to call from any request.
    """

    def __init__(self, config: SimulationConfig, broadcast_interval: int = 1):
        self.config = config
        self.world = World(config)
        self.broadcast_interval = max(1, broadcast_interval)
        self.running = False
        self.tick = 0
        self.speed_multiplier = 1.0
        self.clients: Set[WebSocket] = set()
        self._lock = asyncio.Lock()
        self._loop_task: asyncio.Task | None = None

    async def launch(self) -> None:
        if self._loop_task is None:
            self._loop_task = asyncio.create_task(self._loop())
            logger.info("simulation loop launched with %d boids", len(self.world.agents))
        await self.start()

    async def shutdown(self) -> None:
        await self.stop()
        task, self._loop_task = self._loop_task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            logger.info("simulation loop stopped at tick %d", self.tick)

    async def start(self) -> None:
        self.running = True

    async def stop(self) -> None:
        self.running = False

    async def reset(self) -> None:
        was_running = self.running
        await self.stop()
        async with self._lock:
            self.world.reset()
            self.tick = 0
        logger.info("simulation reset")
        if was_running:
            await self.start()
        await self._broadcast(self.snapshot_payload())

    def set_speed(self, multiplier: float) -> float:
        self.speed_multiplier = max(MIN_SPEED_MULTIPLIER, min(MAX_SPEED_MULTIPLIER, multiplier))
        return self.speed_multiplier

    def status_payload(self) -> Dict[str, Any]:
        return {
            "running": self.running,
            "tick": self.tick,
            "population": len(self.world.agents),
            "metrics": asdict(self.world.snapshot(self.tick).metrics),
        }

    def snapshot_payload(self) -> Dict[str, Any]:
        snapshot = self.world.snapshot(self.tick)
        return {
            "tick": snapshot.tick,
            "metrics": asdict(snapshot.metrics),
            "world": asdict(snapshot.world),
            "render": asdict(self.config.render),
            "agents": snapshot.agents,
        }

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.config.frame_delay / self.speed_multiplier)
            if not self.running:
                continue
            async with self._lock:
                self.world.step(self.tick)
                self.tick += 1
            if self.tick % self.broadcast_interval == 0:
                await self._broadcast(self.snapshot_payload())

    async def _broadcast(self, payload: Dict[str, Any]) -> None:
        if not self.clients:
            return
        text = json.dumps(payload)
        disconnected = [client for client in list(self.clients) if not await _send(client, text)]
        self.clients.difference_update(disconnected)


async def _send(client: WebSocket, text: str) -> bool:
    try:
        await client.send_text(text)
    except WebSocketDisconnect:
        return False
    return True


app_config = AppConfig()
controller = SimulationController(app_config.simulation, app_config.broadcast_interval)
static_dir = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    await controller.launch()
    try:
        yield
    finally:
        await controller.shutdown()


app = FastAPI(title="Flocking Simulation", lifespan=lifespan)
app.mount("/static", StaticFiles(directory=static_dir), name="static")


@app.get("/")
async def index() -> FileResponse:
    return FileResponse(static_dir / "index.html")


@app.get("/api/status")
async def status() -> JSONResponse:
    return JSONResponse(controller.status_payload())


@app.get("/api/snapshot")
async def snapshot() -> JSONResponse:
    return JSONResponse(controller.snapshot_payload())


@app.post("/api/control/start")
async def start_simulation() -> JSONResponse:
    await controller.start()
    return JSONResponse({"running": controller.running})


@app.post("/api/control/stop")
async def stop_simulation() -> JSONResponse:
    await controller.stop()
    return JSONResponse({"running": controller.running})


@app.post("/api/control/reset")
async def reset_simulation() -> JSONResponse:
    await controller.reset()
    return JSONResponse({"running": controller.running, "tick": controller.tick})


@app.post("/api/control/speed")
async def set_speed(request: SpeedRequest) -> JSONResponse:
    return JSONResponse({"multiplier": controller.set_speed(request.multiplier)})


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await websocket.accept()
    controller.clients.add(websocket)
    await websocket.send_json(controller.snapshot_payload())
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        controller.clients.discard(websocket)


__all__ = ["app", "controller"]
