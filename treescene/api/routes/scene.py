"""Scene API - build a scene from a JSON tree, default style."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger

from ...layout import LAYOUTS
from ...pipeline import visualize
from ...scene import SceneStyle, make_style, scene_to_dict
from ...shared.adapters import NestedMappingAdapter
from ...shared.errors import TreeSceneError
from ..schemas import SceneRequest

router = APIRouter()


@router.post("")
def build_scene_route(body: SceneRequest):
    adapter = NestedMappingAdapter(label_key=body.label_key, children_key=body.children_key)
    try:
        style = make_style(body.style)
        scene = visualize(
            body.tree,
            adapter,
            style=style,
            layout_fn=LAYOUTS[body.layout],
            mark_root_inner=body.mark_root_inner,
        )
    except TreeSceneError as e:
        logger.warning("Scene request rejected: {}", e)
        return JSONResponse(status_code=422, content={"error": str(e)})
    return {"scene": scene_to_dict(scene)}


@router.get("/style")
async def get_default_style():
    """Default style, camelCase keys."""
    return {"style": SceneStyle().model_dump(by_alias=True)}
