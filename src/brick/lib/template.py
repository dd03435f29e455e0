import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from brick.lib.errors import MalformedPlaceholderError, OutOfBoundsReferenceError
from brick.lib.models import Step

logger = logging.getLogger(__name__)

# "$0", "$12", ... unless preceded by a backslash. "$name" is a reference
# with no index and is rejected; any other "$" is plain text. Indices are
# ASCII digits only.
PLACEHOLDER_PATTERN = re.compile(
    r"(?<!\\)\$(?:(?P<index>[0-9]+)|(?P<name>[A-Za-z_]\w*))"
)


@dataclass(frozen=True)
class Placeholder:
    index: int
    start: int
    end: int
    token: str


def find_placeholders(text: str, step_id: str = "") -> Iterator[Placeholder]:
    for match in PLACEHOLDER_PATTERN.finditer(text):
        token = match.group(0)
        if match.group("index") is None:
            raise MalformedPlaceholderError(token, match.start(), step_id)
        yield Placeholder(
            index=int(match.group("index")),
            start=match.start(),
            end=match.end(),
            token=token,
        )


def resolved_placeholders(step: Step) -> Iterator[Placeholder]:
    """Yield the placeholders of ``step``, raising on the first unresolvable one."""
    count = len(step.step_expressions)
    for placeholder in find_placeholders(step.text, step.id):
        if placeholder.index >= count:
            raise OutOfBoundsReferenceError(placeholder.index, step.id, count)
        yield placeholder


def check_step(step: Step) -> None:
    for _ in resolved_placeholders(step):
        pass


def render_step(step: Step) -> str:
    text = step.text
    expressions = step.step_expressions
    parts: list[str] = []
    cursor = 0

    for placeholder in resolved_placeholders(step):
        content = expressions[placeholder.index].produce_content()
        logger.debug(f"step {step.id!r}: {placeholder.token} -> {content!r}")
        parts.append(text[cursor : placeholder.start])
        parts.append(content)
        cursor = placeholder.end

    parts.append(text[cursor:])

    return "".join(parts)
