import logging
from collections.abc import Iterator

from brick.lib.errors import CyclicGraphError, DuplicateIdentifierError
from brick.lib.models import Connection, Ingredient, Node, Recipe, Stage
from brick.lib.template import check_step

logger = logging.getLogger(__name__)


def iter_stages(node: Node) -> Iterator[Stage]:
    """Yield each distinct stage reachable from ``node``, roots first.

    Nodes shared between branches are yielded once.
    """
    seen: set[int] = set()

    def walk(current: Node, path: frozenset[int]) -> Iterator[Stage]:
        if id(current) in path:
            raise CyclicGraphError(repr(current))
        if id(current) in seen:
            return
        seen.add(id(current))
        path = path | {id(current)}

        match current:
            case Stage():
                if current.parent is not None:
                    yield from walk(current.parent, path)
                yield current
            case Connection():
                for upstream in current.inputs:
                    yield from walk(upstream, path)

    yield from walk(node, frozenset())


def _stage_ingredients(stage: Stage) -> Iterator[Ingredient]:
    yield from stage.outputs
    for s in stage.steps:
        for expression in s.step_expressions:
            if isinstance(expression, Ingredient):
                yield expression


def validate_recipe(recipe: Recipe) -> None:
    stage_ids: dict[str, Stage] = {}
    ingredient_ids: dict[str, Ingredient] = {}

    for stage in iter_stages(recipe.tail):
        if stage_ids.setdefault(stage.id, stage) is not stage:
            raise DuplicateIdentifierError("stage", stage.id)

        step_ids: set[str] = set()
        for s in stage.steps:
            if s.id in step_ids:
                raise DuplicateIdentifierError("step", s.id, f"stage {stage.id!r}")
            step_ids.add(s.id)
            check_step(s)

        for ingredient in _stage_ingredients(stage):
            known = ingredient_ids.setdefault(ingredient.id, ingredient)
            if known is not ingredient and known != ingredient:
                raise DuplicateIdentifierError("ingredient", ingredient.id)

    logger.debug(
        f"recipe {recipe.title!r} is valid: {len(stage_ids)} stages, "
        f"{len(ingredient_ids)} ingredients"
    )
