"""Pydantic request schemas for API."""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SceneRequest(BaseModel):
    """Nested tree {label, children: [...]} plus optional style overrides."""
    model_config = ConfigDict(populate_by_name=True)
    tree: Dict[str, Any] = Field(..., description="Root node: {label, children}")
    style: Optional[Dict[str, Any]] = None
    mark_root_inner: bool = Field(default=False, alias="markRootInner")
    label_key: str = Field(default="label", alias="labelKey")
    children_key: str = Field(default="children", alias="childrenKey")
    layout: Literal["level", "tidy"] = "level"
