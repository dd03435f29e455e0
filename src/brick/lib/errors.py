class BrickError(Exception):
    """Base class for every error raised while building or rendering a recipe."""


class TemplateError(BrickError):
    pass


class MalformedPlaceholderError(TemplateError):
    def __init__(self, token: str, offset: int, step_id: str):
        self.token = token
        self.offset = offset
        self.step_id = step_id
        super().__init__(
            f"placeholder {token!r} at offset {offset} in step {step_id!r} has no index"
        )


class OutOfBoundsReferenceError(TemplateError):
    def __init__(self, index: int, step_id: str, expression_count: int):
        self.index = index
        self.step_id = step_id
        self.expression_count = expression_count
        super().__init__(
            f"step {step_id!r} references ${index} but only has "
            f"{expression_count} expression(s)"
        )


class GraphError(BrickError):
    pass


class CyclicGraphError(GraphError):
    def __init__(self, node: str):
        self.node = node
        super().__init__(f"{node} was reached twice on the same path")


class EmptyConnectionError(GraphError):
    def __init__(self, connection_method: str):
        self.connection_method = connection_method
        super().__init__(f"connection {connection_method!r} has no inputs")


class DuplicateIdentifierError(BrickError):
    def __init__(self, kind: str, identifier: str, scope: str | None = None):
        self.kind = kind
        self.identifier = identifier
        self.scope = scope
        where = f" in {scope}" if scope else ""
        super().__init__(f"duplicate {kind} id {identifier!r}{where}")


class RecipeNotFoundError(BrickError, LookupError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"no recipe registered as {slug!r}")
