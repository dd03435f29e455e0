from brick.lib.render import ConnectionRender, RecipeRender, RenderTree, StageRender

INDENT = "  "


def _stage_lines(tree: StageRender, depth: int) -> list[str]:
    lines = []
    if tree.upstream is not None:
        lines.extend(_tree_lines(tree.upstream, depth))

    pad = INDENT * depth
    if tree.title:
        lines.append(f"{pad}[{tree.title}]")
    for n, rendered in enumerate(tree.steps, start=1):
        lines.append(f"{pad}{n}. {rendered.text}")
        if rendered.tools:
            lines.append(f"{pad}{INDENT}tools: {', '.join(rendered.tools)}")
    if tree.outputs:
        lines.append(f"{pad}=> {', '.join(tree.outputs)}")
    return lines


def _connection_lines(tree: ConnectionRender, depth: int) -> list[str]:
    lines = []
    for i, node in enumerate(tree.inputs):
        if i:
            lines.append("")
        lines.extend(_tree_lines(node, depth + 1))
    lines.append(f"{INDENT * depth}↳ {tree.method}")
    return lines


def _tree_lines(tree: RenderTree, depth: int) -> list[str]:
    match tree:
        case StageRender():
            return _stage_lines(tree, depth)
        case ConnectionRender():
            return _connection_lines(tree, depth)
        case _:
            raise TypeError(f"cannot format {type(tree).__name__}")


def format_tree(tree: RenderTree) -> str:
    return "\n".join(_tree_lines(tree, 0))


def format_recipe(render: RecipeRender) -> str:
    lines = [render.title, "=" * len(render.title)]
    if render.description:
        lines.append(render.description)
    if render.author:
        lines.append(f"by {render.author}")
    lines.append("")
    lines.extend(_tree_lines(render.tail, 0))

    return "\n".join(lines) + "\n"
