from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from brick.lib.errors import CyclicGraphError, EmptyConnectionError
from brick.lib.models import Connection, Node, Recipe, Stage, Step
from brick.lib.template import render_step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepRender:
    id: str
    text: str
    tools: tuple[str, ...] = ()


@dataclass(frozen=True)
class StageRender:
    id: str
    title: Optional[str]
    upstream: Optional[RenderTree]
    steps: tuple[StepRender, ...]
    outputs: tuple[str, ...] = ()
    type: Literal["stage"] = field(default="stage", init=False)


@dataclass(frozen=True)
class ConnectionRender:
    inputs: tuple[RenderTree, ...]
    method: str
    type: Literal["connection"] = field(default="connection", init=False)


RenderTree = Union[StageRender, ConnectionRender]


@dataclass(frozen=True)
class RecipeRender:
    title: str
    tail: StageRender
    description: Optional[str] = None
    author: Optional[str] = None


def _render_step(step: Step) -> StepRender:
    return StepRender(
        id=step.id,
        text=render_step(step),
        tools=tuple(tool.name for tool in step.tools),
    )


def _enter(node: Node, path: frozenset[int]) -> frozenset[int]:
    # A shared subtree may appear on two paths, never twice on one.
    if id(node) in path:
        raise CyclicGraphError(repr(node))
    return path | {id(node)}


def render_node(node: Node, _path: frozenset[int] = frozenset()) -> RenderTree:
    match node:
        case Stage():
            return render_stage(node, _path)
        case Connection():
            return render_connection(node, _path)
        case _:
            raise TypeError(f"cannot render {type(node).__name__} as a recipe node")


def render_stage(stage: Stage, _path: frozenset[int] = frozenset()) -> StageRender:
    path = _enter(stage, _path)

    upstream = None
    if stage.parent is not None:
        upstream = render_node(stage.parent, path)

    logger.debug(f"rendering stage {stage.id!r} ({len(stage.steps)} steps)")
    return StageRender(
        id=stage.id,
        title=stage.title,
        upstream=upstream,
        steps=tuple(_render_step(s) for s in stage.steps),
        outputs=tuple(output.name for output in stage.outputs),
    )


def render_connection(
    connection: Connection, _path: frozenset[int] = frozenset()
) -> ConnectionRender:
    if not connection.inputs:
        raise EmptyConnectionError(connection.connection_method)
    path = _enter(connection, _path)

    logger.debug(
        f"rendering connection {connection.connection_method!r} "
        f"({len(connection.inputs)} inputs)"
    )
    return ConnectionRender(
        inputs=tuple(render_node(node, path) for node in connection.inputs),
        method=connection.connection_method,
    )


def render_recipe(recipe: Recipe) -> RecipeRender:
    logger.debug(f"rendering recipe {recipe.title!r}")
    return RecipeRender(
        title=recipe.title,
        description=recipe.description,
        author=recipe.author,
        tail=render_stage(recipe.tail),
    )


def iter_stage_renders(tree: RenderTree) -> Iterator[StageRender]:
    """Yield every rendered stage in dependency order, roots first."""
    match tree:
        case StageRender():
            if tree.upstream is not None:
                yield from iter_stage_renders(tree.upstream)
            yield tree
        case ConnectionRender():
            for node in tree.inputs:
                yield from iter_stage_renders(node)
