"""Configuration for 3D Boids flocking simulation."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "3D Boids",
    "frame_delay_ms": 50,      # Pause between redraws
}

CAMERA = {
    "fov": 60.0,
    "near_clip": 0.1,
    "far_clip": 1000.0,
    "initial_radius": 180.0,
    "initial_theta": 45.0,
    "initial_phi": 25.0,
    "min_radius": 10.0,
    "max_radius": 800.0,
    "min_phi": -89.0,
    "max_phi": 89.0,
    "keyboard_rotate_speed": 60.0,
    "keyboard_zoom_speed": 60.0,
    "mouse_sensitivity": 0.3
}

GRID = {
    "color": (0.2, 0.2, 0.25)
}

BOIDS = {
    "count": 50,
    "spatial_scale": 100.0,    # Initial positions are drawn from [0, scale)
    "seed": None,              # None = fresh entropy every run
    "snap_to_grid": True,      # Whole-number starting coordinates
    "parallel": True,
    "num_threads": 5,          # None = numba default
    "point_size": 4.0,
}

# Flocking behavior
RULES = {
    "cohesion_divisor": 100.0,   # Move 1% of the way to the perceived centre
    "separation_distance": 1.0,  # Per-axis proximity threshold
    "alignment_divisor": 8.0,    # Match 1/8th of the perceived velocity
}

HOMING = {
    "period": 200,               # Steps between target switches
    "divisor": 200.0,
    "targets": ((40.0, 40.0, 40.0), (60.0, 60.0, 60.0)),
}

BENCHMARK = {
    "iterations": 1000,
}

COLORS = {
    "background": (0.01, 0.01, 0.02, 1.0),
    "boid": (0.95, 0.85, 0.3),
    "target_active": (0.9, 0.25, 0.25),
    "target_idle": (0.35, 0.35, 0.4),
    "text": (0.9, 0.9, 0.9)
}
