from brick.lib.models import Recipe, Tool, connect, stage, step
from brick.lib.render import render_node, render_recipe
from brick.lib.text import format_recipe, format_tree


def test_format_recipe_outline(new_id, butter, flour):
    whisk = Tool(id="whisk", name="whisk")
    a = stage(None, [step("Melt $0.", [butter], new_id=new_id)], [butter], "Melt", new_id=new_id)
    b = stage(None, [step("Sift $0.", [flour], [whisk], new_id=new_id)], title="Sift", new_id=new_id)
    tail = stage(connect([a, b], "mix"), [step("Knead.", [], new_id=new_id)], title="Knead", new_id=new_id)
    recipe = Recipe(title="Dough", tail=tail, description="Simple.", author="Sam")

    assert format_recipe(render_recipe(recipe)) == (
        "Dough\n"
        "=====\n"
        "Simple.\n"
        "by Sam\n"
        "\n"
        "  [Melt]\n"
        "  1. Melt butter.\n"
        "  => butter\n"
        "\n"
        "  [Sift]\n"
        "  1. Sift flour.\n"
        "    tools: whisk\n"
        "↳ mix\n"
        "[Knead]\n"
        "1. Knead.\n"
    )


def test_format_tree_connection_lists_method_last(make_stage):
    a = make_stage(None, "first")
    b = make_stage(None, "second")

    lines = format_tree(render_node(connect([a, b], "fold"))).splitlines()

    assert lines == ["  1. first", "", "  1. second", "↳ fold"]
