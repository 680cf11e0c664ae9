"""Window and rendering settings for each scene."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["OpenGLSettings", "WindowSettings", "AppSettings", "settings_for", "available_apps"]


@dataclass(frozen=True)
class OpenGLSettings:
    samples: int = 0
    vsync: bool = False
    preserve_webgl_drawing_buffer: bool = False


@dataclass(frozen=True)
class WindowSettings:
    width: int = 800
    height: int = 600
    show_fps: bool = True
    show_fullscreen_button: bool = True
    title: str = ""


@dataclass(frozen=True)
class AppSettings:
    name: str
    opengl: OpenGLSettings = field(default_factory=OpenGLSettings)
    window: WindowSettings = field(default_factory=WindowSettings)


_APPS = {
    app.name: app
    for app in (
        AppSettings(
            "lookat",
            OpenGLSettings(samples=4),
            WindowSettings(width=600, height=600, title="LookAt Camera"),
        ),
        AppSettings(
            "mandelbrot",
            OpenGLSettings(samples=2, vsync=True),
            WindowSettings(width=800, height=600, show_fps=False, title="Mandelbrot"),
        ),
        AppSettings(
            "regularpolygons",
            OpenGLSettings(samples=2, preserve_webgl_drawing_buffer=True),
            WindowSettings(width=600, height=600, title="Regular Polygons"),
        ),
        AppSettings(
            "scaperoom",
            OpenGLSettings(samples=4),
            WindowSettings(width=960, height=540, show_fps=False, title="Scape Room"),
        ),
        AppSettings(
            "sierpinski",
            OpenGLSettings(samples=2, preserve_webgl_drawing_buffer=True),
            WindowSettings(
                width=600,
                height=600,
                show_fullscreen_button=False,
                title="Sierpinski Triangle",
            ),
        ),
        AppSettings(
            "starfield",
            OpenGLSettings(samples=4),
            WindowSettings(width=600, height=600, title="Starfield Effect"),
        ),
        AppSettings(
            "viewer1",
            OpenGLSettings(samples=4),
            WindowSettings(width=600, height=600, title="Model Viewer (version 1)"),
        ),
        AppSettings(
            "viewer2",
            OpenGLSettings(samples=4),
            WindowSettings(width=600, height=600, title="Model Viewer (version 1)"),
        ),
    )
}


def settings_for(name: str) -> AppSettings:
    """Return the settings of the named scene."""
    try:
        return _APPS[name]
    except KeyError:
        raise KeyError(f"unknown app {name!r}; choose from {', '.join(available_apps())}") from None


def available_apps() -> tuple[str, ...]:
    """Return the names of all scenes, sorted."""
    return tuple(sorted(_APPS))