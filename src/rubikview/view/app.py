"""
Interactive 3D puzzle window.
"""

from typing import Optional

import matplotlib.pyplot as plt

from rubikview.core.config import Config
from rubikview.session import PuzzleSession
from rubikview.utils.display import LiveLogger, StatusDisplay
from rubikview.view.visualizer_3d import draw_cube, draw_face_net, setup_cube_axes


class InteractiveCube3D:
    """A matplotlib window that feeds key events to a puzzle session."""

    def __init__(self, config: Optional[Config] = None, logger: Optional[LiveLogger] = None):
        self.config = config or Config()
        self.logger = logger or LiveLogger(verbose=self.config.runner.verbose)
        self.session = PuzzleSession(self.config, logger=self.logger)
        self.fig = None
        self.ax = None
        self.ax_net = None
        self._collection = None
        self._timer = None
        self._camera_resets = 0
        self._drawn_moves = -1

    def release_default_keymaps(self):
        """Stop matplotlib's own shortcuts (home, fullscreen, ...) from firing on bound keys."""
        controls = self.config.controls
        bound = set(controls.move_keys()) | {controls.reset_view, controls.invert_modifier}
        for name in list(plt.rcParams.keys()):
            if name.startswith("keymap."):
                plt.rcParams[name] = [k for k in plt.rcParams[name] if k.lower() not in bound]

    def build(self) -> plt.Figure:
        """Create the figure, draw the solved puzzle and start the tick timer."""
        self.release_default_keymaps()
        view = self.config.view
        cube = self.session.cube
        spacing = cube.registry.spacing

        self.fig = plt.figure(figsize=view.figsize)
        if view.show_net:
            gs = self.fig.add_gridspec(nrows=1, ncols=2, width_ratios=[1.4, 1.0], wspace=0.1)
            self.ax = self.fig.add_subplot(gs[0, 0], projection="3d")
            self.ax_net = self.fig.add_subplot(gs[0, 1])
        else:
            self.ax = self.fig.add_subplot(111, projection="3d")

        setup_cube_axes(self.ax, self.session.camera, 2.0 * spacing)
        self._collection = draw_cube(self.ax, cube, size=view.cube_size * spacing, body_color=view.body_color)
        self._refresh_net()
        self._write_help()

        self.fig.canvas.mpl_connect("key_press_event", self._on_key_press)
        self.fig.canvas.mpl_connect("key_release_event", self._on_key_release)

        self._timer = self.fig.canvas.new_timer(interval=view.tick_interval_ms)
        self._timer.add_callback(self._on_timer)
        self._timer.start()
        return self.fig

    def _write_help(self):
        c = self.config.controls
        self.fig.text(
            0.02, 0.02,
            f"{c.up.upper()}/{c.down.upper()}/{c.left.upper()}/{c.right.upper()}/"
            f"{c.front.upper()}/{c.back.upper()} turn faces "
            f"(hold {c.invert_modifier} to reverse)   {c.reset_view.upper()}: reset view   "
            f"drag: orbit",
            size=9,
        )

    def _refresh_net(self):
        cube = self.session.cube
        if self.ax_net is not None and self._drawn_moves != cube.engine.completed_moves:
            draw_face_net(self.ax_net, cube.face_grids())
            self._drawn_moves = cube.engine.completed_moves
        status = "SOLVED" if cube.is_solved() else f"{cube.engine.completed_moves} turns"
        last = f"   last: {self.session.last_move}" if self.session.last_move else ""
        self.ax.set_title(f"{status}{last}")

    def _on_key_press(self, event):
        self.session.press(event.key)

    def _on_key_release(self, event):
        self.session.release(event.key)

    def _on_timer(self):
        changed = self.session.tick()
        camera = self.session.camera
        if camera.resets != self._camera_resets:
            self._camera_resets = camera.resets
            self.ax.view_init(elev=camera.elev, azim=camera.azim)
        if changed:
            view = self.config.view
            spacing = self.session.cube.registry.spacing
            draw_cube(self.ax, self.session.cube, size=view.cube_size * spacing,
                      body_color=view.body_color, collection=self._collection)
            self._refresh_net()
            self.fig.canvas.draw_idle()

    def run(self):
        """Open the window and block until it is closed."""
        StatusDisplay.print_header("rubikview")
        self.logger.log_info("Window open. Close it to quit.")
        self.build()
        plt.show()
        self._timer.stop()
