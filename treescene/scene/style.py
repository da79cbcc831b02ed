"""
Scene style options. Box sizes are guesses since label extents are not measured;
adjust box_width / box_height to the labels being drawn.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import orjson
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..shared.errors import InvalidParameter

DEFAULT_BOX_W = 0.7
DEFAULT_BOX_H = 0.7

# leaves drawn a bit darker than inner nodes
DEFAULT_LEAF_OPACITY = 0.4
DEFAULT_INNER_OPACITY = 0.15

DEFAULT_FILL_COLOR = "deepskyblue"
DEFAULT_CONNECTOR_COLOR = "silver"
DEFAULT_LABEL_COLOR = "brown"
DEFAULT_LABEL_SIZE = 7


class SceneStyle(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)
    box_width: float = Field(default=DEFAULT_BOX_W, alias="boxWidth")
    box_height: float = Field(default=DEFAULT_BOX_H, alias="boxHeight")
    leaf_opacity: float = Field(default=DEFAULT_LEAF_OPACITY, alias="leafOpacity")
    inner_opacity: float = Field(default=DEFAULT_INNER_OPACITY, alias="innerOpacity")
    fill_color: str = Field(default=DEFAULT_FILL_COLOR, alias="fillColor")
    connector_color: str = Field(default=DEFAULT_CONNECTOR_COLOR, alias="connectorColor")
    label_color: str = Field(default=DEFAULT_LABEL_COLOR, alias="labelColor")
    label_size: float = Field(default=DEFAULT_LABEL_SIZE, alias="labelSize")

    def check(self) -> "SceneStyle":
        """Raise InvalidParameter unless sizes are positive and opacities within [0, 1]."""
        for name in ("box_width", "box_height", "label_size"):
            value = getattr(self, name)
            if not value > 0:
                raise InvalidParameter(f"{name} must be positive, got {value}")
        for name in ("leaf_opacity", "inner_opacity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidParameter(f"{name} must be within [0, 1], got {value}")
        return self


def make_style(data: Optional[Dict[str, Any]] = None, **overrides: Any) -> SceneStyle:
    """Build and check a style from a mapping (camelCase or snake_case keys)."""
    try:
        style = SceneStyle.model_validate({**(data or {}), **overrides})
    except ValidationError as e:
        raise InvalidParameter(f"Invalid style: {e}") from e
    return style.check()


def load_style(path: Union[str, Path]) -> SceneStyle:
    """Read a style from a .yaml/.yml or .json file."""
    path = Path(path)
    raw = path.read_bytes()
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(raw) or {}
        else:
            data = orjson.loads(raw)
    except (yaml.YAMLError, orjson.JSONDecodeError) as e:
        raise InvalidParameter(f"Cannot parse style file {path}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidParameter(f"Style file {path} must contain a mapping")
    return make_style(data)
