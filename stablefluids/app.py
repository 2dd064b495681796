import argparse
import logging
import time

import glfw
import numpy as np
from OpenGL.GL import *
from PIL import Image

from .config import SimulationConfig
from .grid import Grid2D
from .simulation import PointerState, Simulation

log = logging.getLogger(__name__)


def parse_args(argv=None):
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(description="Interactive stable fluids smoke simulation")
    parser.add_argument("--width", type=int, default=defaults.width, help="window width in pixels")
    parser.add_argument("--height", type=int, default=defaults.height, help="window height in pixels")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size, help="cell size in pixels")
    parser.add_argument("--viscosity", type=float, default=defaults.viscosity)
    parser.add_argument("--diffusion", type=float, default=defaults.diffusion_factor)
    parser.add_argument("--dissolve", type=float, default=defaults.dissolve_factor)
    parser.add_argument("--input-speed", type=float, default=defaults.input_speed)
    parser.add_argument("--impulse", type=float, default=defaults.density_impulse)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def config_from_args(args):
    return SimulationConfig(
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        viscosity=args.viscosity,
        diffusion_factor=args.diffusion,
        dissolve_factor=args.dissolve,
        input_speed=args.input_speed,
        density_impulse=args.impulse,
    )


def save_snapshot(sim, path):
    # Flip vertically because the grid is stored bottom-up
    img = Image.fromarray(np.flipud(sim.image_data()))
    img.save(path)
    log.info("Snapshot saved as %s", path)


def read_pointer(window, config):
    """Cursor in grid space, origin bottom left."""
    xpos, ypos = glfw.get_cursor_pos(window)
    win_width, win_height = glfw.get_window_size(window)
    x = xpos / max(win_width, 1) * config.width
    y = (win_height - ypos) / max(win_height, 1) * config.height
    pressed = glfw.get_mouse_button(window, glfw.MOUSE_BUTTON_LEFT) == glfw.PRESS
    return PointerState(x, y, pressed)


def create_window(width, height, title):
    if not glfw.init():
        raise RuntimeError("Failed to initialise glfw")

    glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
    glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
    glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
    glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, True)

    window = glfw.create_window(width, height, title, None, None)
    if not window:
        glfw.terminate()
        raise RuntimeError("Failed to create glfw window")

    monitor = glfw.get_primary_monitor()
    if monitor:
        mode = glfw.get_video_mode(monitor)
        glfw.set_window_pos(window, (mode.size.width - width) // 2, (mode.size.height - height) // 2)

    glfw.make_context_current(window)
    glfw.swap_interval(1)
    return window


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)
    log.info("Configuration: %s", config.to_dict())

    window = create_window(config.width, config.height, "Stable Fluids")
    grid = Grid2D(config.width, config.height, config.cell_size)
    try:
        grid.create_buffers()
        sim = Simulation(config, grid)
        controls = {"paused": False, "snapshots": 0}

        def key_callback(window, key, scancode, action, mods):
            if action != glfw.PRESS:
                return
            if key == glfw.KEY_ESCAPE:
                glfw.set_window_should_close(window, True)
            elif key == glfw.KEY_SPACE:
                controls["paused"] = not controls["paused"]
                log.info("Simulation %s", "paused" if controls["paused"] else "resumed")
            elif key == glfw.KEY_R:
                sim.reset()
                log.info("Simulation reset")
            elif key == glfw.KEY_S:
                controls["snapshots"] += 1
                save_snapshot(sim, f"snapshot_{controls['snapshots']}.png")

        glfw.set_key_callback(window, key_callback)

        glClearColor(0.0, 0.0, 0.0, 1.0)

        log.info("=" * 60)
        log.info("STABLE FLUIDS")
        log.info("Grid: %dx%d tiles", config.num_tiles_x, config.num_tiles_y)
        log.info("Controls:")
        log.info("  LEFT CLICK + DRAG: add smoke & flow")
        log.info("  SPACE            : pause / resume")
        log.info("  R                : reset")
        log.info("  S                : save snapshot")
        log.info("  ESC              : quit")
        log.info("=" * 60)

        last_time = glfw.get_time()
        fps_time = time.time()
        fps_counter = 0

        while not glfw.window_should_close(window):
            now = glfw.get_time()
            delta_time = now - last_time
            last_time = now

            fb_width, fb_height = glfw.get_framebuffer_size(window)
            glViewport(0, 0, fb_width, fb_height)
            glClear(GL_COLOR_BUFFER_BIT)

            if controls["paused"]:
                grid.render()
            else:
                sim.step(delta_time, read_pointer(window, config))

            glfw.swap_buffers(window)
            glfw.poll_events()

            fps_counter += 1
            current_time = time.time()
            if current_time - fps_time >= 1.0:
                log.info("FPS: %d", fps_counter)
                fps_counter = 0
                fps_time = current_time
    finally:
        grid.delete_buffers()
        glfw.terminate()
        log.info("Window closed")


if __name__ == "__main__":
    main()
