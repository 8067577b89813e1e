"""
3D visualization of the puzzle with matplotlib.

Puzzle space has Y up; matplotlib's 3D axes have Z up, so points are mapped
(x, y, z) -> (x, -z, y) before drawing.
"""

import io
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from mpl_toolkits.mplot3d import Axes3D
from mpl_toolkits.mplot3d.art3d import Poly3DCollection
import numpy as np
from PIL import Image

from rubikview.core.config import ViewConfig
from rubikview.puzzle.cube import CubePose, RubiksCube
from rubikview.puzzle.facelets import FACE_COLORS, Grid, sticker_faces
from rubikview.session import Camera


# Unit cube corners, indexed as in CUBE_FACES
CUBE_CORNERS = np.array([
    [-1, -1, -1],  # 0
    [1, -1, -1],   # 1
    [1, 1, -1],    # 2
    [-1, 1, -1],   # 3
    [-1, -1, 1],   # 4
    [1, -1, 1],    # 5
    [1, 1, 1],     # 6
    [-1, 1, 1],    # 7
], dtype=float) / 2.0

# local outward normal -> corner indices
CUBE_FACES: Dict[Tuple[int, int, int], Tuple[int, int, int, int]] = {
    (0, 0, -1): (0, 1, 2, 3),
    (0, 0, 1): (4, 5, 6, 7),
    (0, -1, 0): (0, 1, 5, 4),
    (0, 1, 0): (2, 3, 7, 6),
    (-1, 0, 0): (0, 3, 7, 4),
    (1, 0, 0): (1, 2, 6, 5),
}

# Net layout: face -> (column, row) of its 3x3 block, row 0 at the bottom
NET_LAYOUT: Dict[str, Tuple[int, int]] = {
    "U": (1, 2),
    "L": (0, 1),
    "F": (1, 1),
    "R": (2, 1),
    "B": (3, 1),
    "D": (1, 0),
}

PLOT_BASIS = np.array([
    [1, 0, 0],
    [0, 0, -1],
    [0, 1, 0],
], dtype=float)


def to_plot(points: np.ndarray) -> np.ndarray:
    """Map puzzle coordinates (Y up) to matplotlib coordinates (Z up)."""
    return np.asarray(points, dtype=float) @ PLOT_BASIS.T


def create_cube_vertices(pose: CubePose, size: float = 0.98) -> np.ndarray:
    """
    Corners of a posed unit cube.

    Args:
        pose: Position and orientation of the cube
        size: Edge length; below 1 leaves a gap between neighbours

    Returns:
        8x3 array of corners in puzzle coordinates
    """
    local = CUBE_CORNERS * size
    return local @ np.asarray(pose.orientation, dtype=float).T + pose.position


def cube_polygons(pose: CubePose, size: float, body_color: str) -> Tuple[List[np.ndarray], List[str]]:
    """The six faces of a cube as plot-space quads with their colors."""
    vertices = to_plot(create_cube_vertices(pose, size))
    stickers = dict(sticker_faces(pose.cube))
    quads = []
    colors = []
    for normal, idx in CUBE_FACES.items():
        quads.append(vertices[list(idx)])
        face = stickers.get(normal)
        colors.append(FACE_COLORS[face] if face else body_color)
    return quads, colors


def draw_cube(ax: Axes3D, cube: RubiksCube, size: float = 0.98,
              body_color: str = "#222222",
              collection: Optional[Poly3DCollection] = None) -> Poly3DCollection:
    """
    Draw every unit cube as one polygon collection.

    Passing the collection from a previous call updates it in place.
    """
    quads: List[np.ndarray] = []
    colors: List[str] = []
    for pose in cube.poses():
        q, c = cube_polygons(pose, size, body_color)
        quads.extend(q)
        colors.extend(c)

    if collection is None:
        collection = Poly3DCollection(quads, facecolors=colors, edgecolors="black", linewidths=0.6)
        ax.add_collection3d(collection)
    else:
        collection.set_verts(quads)
        collection.set_facecolor(colors)
    return collection


def setup_cube_axes(ax: Axes3D, camera: Camera, extent: float = 2.0):
    ax.set_xlim([-extent, extent])
    ax.set_ylim([-extent, extent])
    ax.set_zlim([-extent, extent])
    try:
        ax.set_box_aspect((1, 1, 1))
    except AttributeError:
        pass
    ax.set_axis_off()
    ax.view_init(elev=camera.elev, azim=camera.azim)


def draw_face_net(ax: plt.Axes, grids: Dict[str, Grid]):
    """Draw the unfolded cube map on a 2D axes."""
    ax.clear()
    for face, (col, row) in NET_LAYOUT.items():
        grid = grids[face]
        for r in range(3):
            for c in range(3):
                x = col * 3 + c
                y = row * 3 + (2 - r)
                color = FACE_COLORS.get(grid[r][c], "#808080")
                ax.add_patch(Rectangle((x, y), 1, 1, facecolor=color, edgecolor="black", linewidth=0.8))
        ax.text(col * 3 + 1.5, row * 3 + 1.5, face, ha="center", va="center",
                fontsize=9, alpha=0.5)
    ax.set_xlim(0, 12)
    ax.set_ylim(0, 9)
    ax.set_aspect("equal")
    ax.set_axis_off()


def visualize_cube_3d(cube: RubiksCube, camera: Camera,
                      view: Optional[ViewConfig] = None,
                      title: str = "3x3x3 Cube") -> plt.Figure:
    """
    Draw the puzzle, and its cube map when enabled, on a new figure.

    Args:
        cube: The puzzle
        camera: Viewing angles
        view: View configuration (cube size, colors, net panel)
        title: Figure title

    Returns:
        matplotlib Figure object
    """
    view = view or ViewConfig()
    extent = 2.0 * cube.registry.spacing

    fig = plt.figure(figsize=view.figsize)
    if view.show_net:
        gs = fig.add_gridspec(nrows=1, ncols=2, width_ratios=[1.4, 1.0], wspace=0.1)
        ax = fig.add_subplot(gs[0, 0], projection="3d")
        ax_net = fig.add_subplot(gs[0, 1])
        draw_face_net(ax_net, cube.face_grids())
    else:
        ax = fig.add_subplot(111, projection="3d")

    setup_cube_axes(ax, camera, extent)
    draw_cube(ax, cube, size=view.cube_size * cube.registry.spacing, body_color=view.body_color)

    status = "SOLVED" if cube.is_solved() else f"{cube.engine.completed_moves} turns"
    fig.suptitle(f"{title}\n{status}")
    return fig


def render_image(cube: RubiksCube, camera: Camera,
                 view: Optional[ViewConfig] = None, dpi: int = 100) -> Image.Image:
    """Render the puzzle to a PIL image."""
    fig = visualize_cube_3d(cube, camera, view)
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi)
    buf.seek(0)
    img = Image.open(buf).convert("RGB")
    plt.close(fig)
    return img


def save_visualization(fig: plt.Figure, filename: str, dpi: int = 150):
    """
    Save a figure to disk.

    Args:
        fig: matplotlib Figure object
        filename: Output file name
        dpi: Resolution
    """
    fig.savefig(filename, dpi=dpi, bbox_inches="tight")
