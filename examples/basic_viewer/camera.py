# examples/basic_viewer/camera.py

import math

import numpy as np


def look_at(eye: np.ndarray, target: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed view matrix looking down -Z."""
    forward = target - eye
    forward = forward / np.linalg.norm(forward)
    side = np.cross(forward, up)
    side = side / np.linalg.norm(side)
    true_up = np.cross(side, forward)

    view = np.identity(4)
    view[0, :3] = side
    view[1, :3] = true_up
    view[2, :3] = -forward
    view[:3, 3] = -view[:3, :3] @ eye
    return view


def perspective(near: float, far: float, fov_y: float, width: int, height: int) -> np.ndarray:
    """OpenGL-style perspective projection for a camera looking down -Z."""
    f = 1.0 / math.tan(fov_y / 2.0)
    aspect = width / height
    projection = np.zeros((4, 4))
    projection[0, 0] = f / aspect
    projection[1, 1] = f
    projection[2, 2] = (far + near) / (near - far)
    projection[2, 3] = (2.0 * far * near) / (near - far)
    projection[3, 2] = -1.0
    return projection


class Camera:
    """A camera that swings back and forth in front of the terrain, always looking at the origin."""

    def __init__(self, config: dict, screen_width: int, screen_height: int):
        camera_config = config['camera']
        self.screen_width = screen_width
        self.screen_height = screen_height

        self.near = camera_config['near']
        self.far = camera_config['far']
        self.fov_y = camera_config['fov_y_radians']
        self.eye_height = camera_config['eye_height']
        self.eye_distance = camera_config['eye_distance']
        self.orbit_speed = camera_config['orbit_speed']

        self.target = np.zeros(3)
        self.up = np.array([0.0, 1.0, 0.0])
        self.angle = 0.0

        self.projection = perspective(self.near, self.far, self.fov_y, screen_width, screen_height)

    @property
    def eye(self) -> np.ndarray:
        return np.array([math.cos(self.angle), self.eye_height, self.eye_distance])

    def update(self, time_delta: float):
        self.angle += time_delta * self.orbit_speed

    def resize(self, screen_width: int, screen_height: int):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.projection = perspective(self.near, self.far, self.fov_y, screen_width, screen_height)

    def project(self, positions: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """
        Projects world positions to screen pixels.

        Returns:
            tuple: (screen_xy, depth). screen_xy is (n, 2) in pixels; depth is the
            distance in front of the camera, which is <= 0 for points behind it.
        """
        homogeneous = np.column_stack((positions, np.ones(len(positions))))
        clip = homogeneous @ (self.projection @ look_at(self.eye, self.target, self.up)).T
        depth = clip[:, 3]

        # Points behind the camera are culled by the renderer; avoid dividing by zero here.
        safe_w = np.where(np.abs(depth) > 1e-9, depth, 1e-9)
        ndc_x = clip[:, 0] / safe_w
        ndc_y = clip[:, 1] / safe_w

        screen_x = (ndc_x + 1.0) * 0.5 * self.screen_width
        screen_y = (1.0 - ndc_y) * 0.5 * self.screen_height
        return np.column_stack((screen_x, screen_y)), depth
