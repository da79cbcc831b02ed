"""Scene -> plain dict / JSON for renderers outside Python."""

from typing import Any, Dict, List

import orjson

from ..shared.types import Scene


def _pt(p) -> List[float]:
    return [p.x, p.y]


def scene_to_dict(scene: Scene) -> Dict[str, Any]:
    """Returns {connectors: [...], nodes: [...], bounds: [min_x, min_y, max_x, max_y]}, in draw order."""
    connectors = [
        {
            "from": c.parent_index,
            "to": c.child_index,
            "points": [_pt(c.start), _pt(c.end)],
            "color": c.color,
        }
        for c in scene.connectors
    ]
    nodes = [
        {
            "index": r.index,
            "label": r.label,
            "isLeaf": r.is_leaf,
            "center": _pt(r.center),
            "w": r.width,
            "h": r.height,
            "points": [_pt(p) for p in r.corners],
            "opacity": r.opacity,
            "fillColor": r.fill_color,
            "labelAnchor": _pt(r.label_anchor),
            "labelColor": r.label_color,
            "labelSize": r.label_size,
        }
        for r in scene.rects
    ]
    return {"connectors": connectors, "nodes": nodes, "bounds": list(scene.bounds())}


def scene_to_json(scene: Scene, indent: bool = False) -> bytes:
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(scene_to_dict(scene), option=option)
