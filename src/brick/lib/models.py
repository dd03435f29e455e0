from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from brick.lib.errors import EmptyConnectionError
from brick.lib.expression import Expression
from brick.lib.ids import IdFactory, slugify, uuid_id
from brick.lib.units import Amount


@dataclass(frozen=True)
class Ingredient(Expression):
    id: str
    name: str
    amount: tuple[Amount, ...]
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.amount:
            raise ValueError(f"ingredient {self.name!r} needs at least one amount")

    def produce_content(self) -> str:
        return self.name


@dataclass(frozen=True)
class Tool:
    id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None


@dataclass(frozen=True)
class Step:
    # Unique within the owning stage
    id: str
    text: str
    step_expressions: tuple[Expression, ...] = ()
    tools: tuple[Tool, ...] = ()


# eq=False: graph nodes compare and hash by identity
@dataclass(frozen=True, eq=False)
class Stage:
    # Globally unique
    id: str
    parent: Optional[Node]
    steps: tuple[Step, ...] = ()
    outputs: tuple[Ingredient, ...] = ()
    title: Optional[str] = None
    type: Literal["stage"] = field(default="stage", init=False)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        return f"Stage(id={self.id!r}, title={self.title!r}, steps={len(self.steps)})"


@dataclass(frozen=True, eq=False)
class Connection:
    inputs: tuple[Node, ...]
    connection_method: str
    type: Literal["connection"] = field(default="connection", init=False)

    def __post_init__(self) -> None:
        if not self.inputs:
            raise EmptyConnectionError(self.connection_method)

    def __repr__(self) -> str:
        return (
            f"Connection(method={self.connection_method!r}, inputs={len(self.inputs)})"
        )


Node = Union[Stage, Connection]


@dataclass(frozen=True)
class Recipe:
    title: str
    tail: Stage
    description: Optional[str] = None
    author: Optional[str] = None


def ingr(
    name: str,
    amount: Amount | Sequence[Amount],
    notes: Optional[str] = None,
    *,
    new_id: IdFactory = uuid_id,
) -> Ingredient:
    amounts = (amount,) if isinstance(amount, Amount) else tuple(amount)
    return Ingredient(id=new_id(), name=name, amount=amounts, notes=notes)


def step(
    text: str,
    expressions: Sequence[Expression],
    tools: Optional[Sequence[Tool]] = None,
    *,
    new_id: IdFactory = uuid_id,
) -> Step:
    return Step(
        id=new_id(),
        text=text,
        step_expressions=tuple(expressions),
        tools=tuple(tools or ()),
    )


def stage(
    parent: Optional[Node],
    steps: Sequence[Step],
    outputs: Optional[Sequence[Ingredient]] = None,
    title: Optional[str] = None,
    *,
    new_id: IdFactory = uuid_id,
) -> Stage:
    """Build a stage.

    Titled stages get a stable id derived from the title; untitled ones get
    whatever ``new_id`` produces.
    """
    stage_id = slugify(title) if title else ""
    return Stage(
        id=stage_id or new_id(),
        parent=parent,
        steps=tuple(steps),
        outputs=tuple(outputs or ()),
        title=title,
    )


def connect(inputs: Sequence[Node], connection_method: str) -> Connection:
    return Connection(inputs=tuple(inputs), connection_method=connection_method)
