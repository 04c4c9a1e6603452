#!/usr/bin/env python3
"""
SphereCast - A Whitted-style Python Ray Tracer

Main entry point for rendering scenes.
"""

import argparse
import sys
import time
from pathlib import Path

from spherecast.vec3 import Vec3, Point3
from spherecast.color import Color
from spherecast.shapes import Sphere
from spherecast.lights import DirectionalLight, SphereLight
from spherecast.scene import Scene
from spherecast.scene_parser import load_scene, SceneParseError
from spherecast.renderer import Renderer, RenderSettings


def create_demo_scene() -> Scene:
    """Create the demo scene: three spheres under four lights."""
    objects = [
        Sphere(Point3(0.0, -2.5, -5.0), 1.0, Color(0.4, 1.0, 0.4), albedo=0.5, ks=0.5, kd=0.05),
        Sphere(Point3(0.0, 0.0, -5.0), 1.0, Color(1.0, 0.0, 0.4), albedo=0.5, ks=0.5, kd=0.05),
        Sphere(Point3(3.0, 0.0, -5.0), 2.0, Color(0.4, 0.3, 1.0), albedo=0.5, ks=0.5, kd=0.05),
    ]

    white = Color(1.0, 1.0, 1.0)
    lights = [
        DirectionalLight(Vec3(-1.0, -1.0, -1.0), white, 10.0),
        DirectionalLight(Vec3(0.0, 1.0, 0.0), white, 5.0),
        DirectionalLight(Vec3(0.0, -0.3, 1.0), white, 1.0),
        SphereLight(Point3(-1.2, 0.0, -4.5), white, 30.0),
    ]

    return Scene(
        width=800,
        height=800,
        fov=90.0,
        objects=objects,
        lights=lights,
        shadow_bias=1e-13
    )


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='SphereCast - A Whitted-style Python Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output render.png
  python main.py --scene scenes/demo.yaml --threads 4 --output demo.png
        '''
    )

    parser.add_argument('--scene', type=str, default=None,
                        help='Scene file (YAML or JSON); built-in demo scene if omitted')
    parser.add_argument('--output', type=str, default='output/render.png', help='Output filename')
    parser.add_argument('--threads', type=int, default=1, help='Number of threads (0=auto)')

    args = parser.parse_args(argv)

    # Print header
    print("=" * 60)
    print("SphereCast Ray Tracer")
    print("=" * 60)

    # Create scene
    if args.scene:
        print(f"\nLoading scene: {args.scene}")
        try:
            scene = load_scene(args.scene)
        except SceneParseError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("\nCreating scene: demo")
        scene = create_demo_scene()

    settings = RenderSettings(num_threads=args.threads)

    print(f"\nRender Settings:")
    print(f"  Resolution: {scene.width}x{scene.height}")
    print(f"  Field of view: {scene.fov}")
    print(f"  Threads: {settings.num_threads}")
    print(f"  Objects in scene: {len(scene.objects)}")
    print(f"  Lights in scene: {len(scene.lights)}")

    renderer = Renderer(settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    # Render
    print("\nRendering...")
    start_time = time.time()

    image = renderer.render(scene)

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")
    if elapsed > 0:
        print(f"  Primary rays per second: {(scene.width * scene.height) / elapsed:.0f}")

    # Ensure output directory exists
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Save image
    print(f"\nSaving to: {args.output}")
    renderer.save_image(image, args.output)

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
