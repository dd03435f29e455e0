from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from brick.lib.render import RecipeRender


class StepModel(BaseModel):
    id: str
    text: str
    tools: list[str] = []


class StageModel(BaseModel):
    type: Literal["stage"] = "stage"
    id: str
    title: Optional[str] = None
    upstream: Optional[NodeModel] = None
    steps: list[StepModel]
    outputs: list[str] = []


class ConnectionModel(BaseModel):
    type: Literal["connection"] = "connection"
    inputs: list[NodeModel]
    method: str


NodeModel = Annotated[Union[StageModel, ConnectionModel], Field(discriminator="type")]


class RecipeModel(BaseModel):
    title: str
    description: Optional[str] = None
    author: Optional[str] = None
    tail: StageModel


StageModel.model_rebuild()
ConnectionModel.model_rebuild()


class RecipeResponse(BaseModel):
    recipe: RecipeModel

    @classmethod
    def from_render(cls, render: RecipeRender) -> RecipeResponse:
        return cls(recipe=RecipeModel.model_validate(asdict(render)))


class RecipeListResponse(BaseModel):
    recipes: list[str]
