# examples/basic_viewer/renderer.py

import logging

import numpy as np
import pygame

from fault_terrain import Mesh

from camera import Camera


class TerrainRenderer:
    """
    Draws a terrain Mesh onto a pygame surface with the painter's algorithm.
    The mesh is only ever read, never modified.
    """
    def __init__(self, logger: logging.Logger, background_color=(10, 10, 20)):
        self.logger = logger
        self.background_color = background_color
        self._triangle_colors = None
        self._mesh = None

    def set_mesh(self, mesh: Mesh):
        """Swaps in a newly generated mesh. Called between frames, never while drawing."""
        self._mesh = mesh
        # Per-triangle flat color is the mean of its three vertex colors.
        self._triangle_colors = (mesh.colors[mesh.triangles].mean(axis=1) * 255).astype(np.uint8)
        self.logger.debug(f"Renderer received mesh with {mesh.triangle_count} triangles.")

    def draw(self, screen: pygame.Surface, camera: Camera):
        screen.fill(self.background_color)
        if self._mesh is None:
            return

        screen_xy, depth = camera.project(self._mesh.positions)
        triangles = self._mesh.triangles

        # Drop any triangle with a vertex at or behind the near plane.
        tri_depth = depth[triangles]
        visible = np.all(tri_depth > camera.near, axis=1)
        visible_indices = np.nonzero(visible)[0]

        # Far to near, so closer triangles overwrite farther ones.
        mean_depth = tri_depth[visible_indices].mean(axis=1)
        draw_order = visible_indices[np.argsort(mean_depth)[::-1]]

        points = screen_xy[triangles[draw_order]]
        colors = self._triangle_colors[draw_order]
        for triangle_points, color in zip(points, colors):
            pygame.draw.polygon(screen, tuple(int(c) for c in color), triangle_points.tolist())
