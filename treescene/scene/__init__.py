"""Scene module - style options, primitive construction, export."""

from .builder import build_scene, make_line, make_rect
from .export import scene_to_dict, scene_to_json
from .style import SceneStyle, load_style, make_style

__all__ = [
    "SceneStyle",
    "build_scene",
    "load_style",
    "make_line",
    "make_rect",
    "make_style",
    "scene_to_dict",
    "scene_to_json",
]
