from types import SimpleNamespace

import matplotlib.pyplot as plt
import numpy as np
from PIL import Image

from rubikview.core.base import MoveRequest
from rubikview.core.config import Config, ViewConfig
from rubikview.puzzle.cube import CubePose
from rubikview.session import Camera
from rubikview.view import InteractiveCube3D, draw_cube, draw_face_net, render_image, visualize_cube_3d
from rubikview.view.visualizer_3d import create_cube_vertices, to_plot


def test_to_plot_puts_y_up():
    np.testing.assert_array_equal(to_plot(np.array([0, 1, 0])), [0, 0, 1])
    np.testing.assert_array_equal(to_plot(np.array([0, 0, 1])), [0, -1, 0])


def test_cube_vertices_centered_on_position(cube):
    c = cube.registry.find_by_address((1, 1, 1))
    pose = CubePose(cube=c, position=np.array([1.0, 1.0, 1.0]), orientation=np.eye(3))
    vertices = create_cube_vertices(pose, size=1.0)
    assert vertices.shape == (8, 3)
    np.testing.assert_allclose(vertices.mean(axis=0), [1, 1, 1])
    np.testing.assert_allclose(vertices.max(axis=0), [1.5, 1.5, 1.5])


def test_draw_cube_one_quad_per_face(cube):
    fig = plt.figure()
    ax = fig.add_subplot(111, projection="3d")
    collection = draw_cube(ax, cube)
    assert len(collection.get_facecolor()) == 26 * 6

    cube.request_move(MoveRequest(vector=(1, 0, 0), duration=1.0))
    cube.tick(0.5)
    assert draw_cube(ax, cube, collection=collection) is collection
    plt.close(fig)


def test_draw_face_net(cube):
    fig, ax = plt.subplots()
    draw_face_net(ax, cube.face_grids())
    assert len(ax.patches) == 54
    plt.close(fig)


def test_visualize_without_net(cube):
    fig = visualize_cube_3d(cube, Camera(30, 45), ViewConfig(show_net=False))
    assert len(fig.axes) == 1
    plt.close(fig)


def test_render_image(cube):
    img = render_image(cube, Camera(25, -35), ViewConfig(figsize=(4, 3)), dpi=50)
    assert isinstance(img, Image.Image)
    assert img.mode == "RGB"
    assert img.size == (200, 150)


def test_interactive_window_feeds_session(quiet_logger):
    with plt.rc_context():
        app = InteractiveCube3D(Config(), logger=quiet_logger)
        app.build()
        assert "r" not in plt.rcParams["keymap.home"]

        app._on_key_press(SimpleNamespace(key="r"))
        app._on_key_release(SimpleNamespace(key="r"))
        app._on_timer()
        assert app.session.cube.busy
        assert app.session.last_move == "right"

        app._timer.stop()
        plt.close(app.fig)
