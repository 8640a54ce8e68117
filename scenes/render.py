import argparse
import logging

from primitives.color import Color
from scenes.canvas import Canvas, Pixel
from scenes.ppm import Ppm
from scenes.scene import World, Projectile, tick, simulate
from utils.constants import CANVAS_WIDTH, CANVAS_HEIGHT, LAUNCH_SPEED, PLOT_COLOR, OUTPUT_FILE

logger = logging.getLogger(__name__)


def plot_trajectory(canvas, projectile, world, color):
    """
    Plot the projectile's position on every tick until it leaves the
    canvas. Positions are in y-up space, the canvas is left unflipped.
    Returns the number of plotted points.
    """
    plotted = 0
    while True:
        projectile = tick(projectile, world)
        if not canvas.in_bounds(projectile.position):
            break
        canvas.set_pixel(Pixel.from_point(projectile.position), color)
        plotted += 1
    return plotted


def write_ppm(canvas, path):
    # plots are y-up, ppm rows run top-down
    ppm = Ppm.from_canvas(canvas.flip_vertical())
    with open(path, "wb") as f:
        f.write(ppm.to_bytes())
    logger.info("Wrote %dx%d image to %s", ppm.width, ppm.height, path)
    return ppm


def trace_trajectory(projectile, world):
    print("BANG!")
    for state in simulate(projectile, world):
        print(state.position)
    print("BOOM!")


def render_scene(width, height, speed, output):
    canvas = Canvas(width, height)
    plotted = plot_trajectory(canvas, Projectile.launch(speed=speed), World.default(), Color.from_array(PLOT_COLOR))
    logger.info("Plotted %d trajectory points", plotted)
    return write_ppm(canvas, output)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot a projectile's path to a PPM image.")
    parser.add_argument("--width", type=int, default=CANVAS_WIDTH)
    parser.add_argument("--height", type=int, default=CANVAS_HEIGHT)
    parser.add_argument("--speed", type=float, default=LAUNCH_SPEED)
    parser.add_argument("--output", default=OUTPUT_FILE)
    parser.add_argument("--trace", action="store_true", help="print each position instead of plotting")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    if args.trace:
        trace_trajectory(Projectile.launch(speed=args.speed), World.default())
        return 0
    render_scene(args.width, args.height, args.speed, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
