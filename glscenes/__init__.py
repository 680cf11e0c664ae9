"""Scene logic for small 3D graphics demos: transforms, camera, trackball, OBJ models and scenes."""

__version__ = "0.1.0"