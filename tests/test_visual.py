import pytest

pygame = pytest.importorskip("pygame")

from game_of_life.visual import GameOfLifeViewer  # noqa: E402


@pytest.fixture
def viewer():
    v = GameOfLifeViewer(rows=20, cols=40, cell_size=5)
    yield v
    pygame.quit()


def test_starts_paused_at_generation_zero(viewer):
    assert not viewer.running
    assert viewer.sim.get_generation() == 0
    assert "PAUSED" in viewer.status_text()


def test_clear_and_paint(viewer):
    viewer.clear_grid()
    assert not viewer.sim.is_any_cell_alive()
    viewer.set_cell(12, 7, True)
    assert viewer.sim.is_cell_alive(1, 2)
    viewer.set_cell(12, 7, False)
    assert not viewer.sim.is_any_cell_alive()


def test_paint_outside_grid_is_ignored(viewer):
    viewer.clear_grid()
    viewer.set_cell(10_000, 10_000, True)
    assert not viewer.sim.is_any_cell_alive()


def test_step_key_and_reset(viewer):
    viewer.clear_grid()
    viewer.add_glider(1, 1)
    assert viewer.sim.count_live_cells() == 5
    assert viewer.handle_key(pygame.K_n)
    assert viewer.sim.get_generation() == 1
    viewer.handle_key(pygame.K_c)
    assert viewer.sim.get_generation() == 0
    assert not viewer.sim.is_any_cell_alive()


def test_speed_and_quit_keys(viewer):
    viewer.handle_key(pygame.K_UP)
    assert viewer.speed == 15
    viewer.handle_key(pygame.K_SPACE)
    assert viewer.running
    assert not viewer.handle_key(pygame.K_ESCAPE)


def test_glider_gun_and_draw(viewer):
    viewer.clear_grid()
    viewer.add_glider_gun()
    assert viewer.sim.count_live_cells() == 36
    viewer.draw()
    viewer.draw_ui()


def test_step_uses_numpy_engine_by_default(viewer, monkeypatch):
    assert viewer.use_numpy

    def fail():
        raise AssertionError("two-phase step used")

    monkeypatch.setattr(viewer.sim, "step", fail)
    viewer.step()
    assert viewer.sim.get_generation() == 1


def test_two_phase_engine_matches_numpy(viewer):
    viewer.clear_grid()
    viewer.add_glider(1, 1)
    two_phase = GameOfLifeViewer(rows=20, cols=40, cell_size=5, use_numpy=False)
    two_phase.clear_grid()
    two_phase.add_glider(1, 1)
    for _ in range(4):
        viewer.step()
        two_phase.step()
    assert (viewer.sim.to_array() == two_phase.sim.to_array()).all()
    assert two_phase.sim.get_generation() == 4
