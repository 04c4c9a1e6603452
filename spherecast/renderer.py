"""
Renderer module - drives the per-pixel tracing loop.

Implements:
- One camera ray per pixel, shaded by spherecast.shading.get_color
- Optional multi-threaded rendering, one column per task
- Image output through Pillow
"""

from __future__ import annotations
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Callable, List, Tuple

from PIL import Image as PILImage

from .camera import Camera
from .scene import Scene
from .shading import get_color


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    num_threads: int = 1  # 0 = auto-detect

    def __post_init__(self):
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Whitted-style renderer: one primary ray and one shadow ray per light."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, scene: Scene) -> PILImage.Image:
        """Render the scene into an 8-bit RGB image.

        Every pixel is written exactly once. Pixels are independent, so the
        threaded path produces the same image as the sequential one.

        Args:
            scene: The scene to render

        Returns:
            Pillow image of size (scene.width, scene.height)
        """
        width = scene.width
        camera = Camera.from_scene(scene)
        image = PILImage.new('RGB', (width, scene.height))
        completed = [0]
        lock = threading.Lock()

        def render_column(x: int) -> Tuple[int, List[Tuple[int, int, int]]]:
            """Shade all rows of column x."""
            column = [
                get_color(scene, camera.get_ray(x, y)).to_rgb()
                for y in range(scene.height)
            ]

            with lock:
                completed[0] += 1
                if self._progress_callback:
                    self._progress_callback(completed[0] / width)

            return x, column

        if self.settings.num_threads > 1:
            # Pixels are written back on this thread once all columns finish
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                results = list(executor.map(render_column, range(width)))
            for x, column in results:
                for y, rgb in enumerate(column):
                    image.putpixel((x, y), rgb)
        else:
            for x in range(width):
                _, column = render_column(x)
                for y, rgb in enumerate(column):
                    image.putpixel((x, y), rgb)

        return image

    def save_image(self, image: PILImage.Image, filename: str) -> None:
        """Save image to file.

        The format follows the file extension. Errors from Pillow or the
        filesystem are not caught.

        Args:
            image: Rendered image
            filename: Output filename
        """
        image.save(filename)


def render(scene: Scene, settings: RenderSettings = None) -> PILImage.Image:
    """Convenience function to render a scene with default settings."""
    return Renderer(settings).render(scene)
