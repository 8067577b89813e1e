"""
Rendering for rubikview.

- visualizer_3d: matplotlib drawing of the cubes and the cube map
- app: interactive window driven by keyboard input
"""

from rubikview.view.visualizer_3d import (
    draw_cube,
    draw_face_net,
    visualize_cube_3d,
    render_image,
    save_visualization,
)
from rubikview.view.app import InteractiveCube3D

__all__ = [
    "draw_cube",
    "draw_face_net",
    "visualize_cube_3d",
    "render_image",
    "save_visualization",
    "InteractiveCube3D",
]
