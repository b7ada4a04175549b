"""Ray tracer for scenes of planes, spheres, cylinders and cones, with PPM output and an XPM reader."""

__version__ = "0.1.0"