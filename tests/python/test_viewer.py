from flocking.config import SimulationConfig
from flocking.viewer import run_viewer


def test_viewer_runs_headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    config = SimulationConfig(world_width=200.0, world_height=120.0, initial_population=5, frame_delay=0.0)

    assert run_viewer(config, max_ticks=3) == 3
