import pytest

from brick.lib.errors import MalformedPlaceholderError, OutOfBoundsReferenceError
from brick.lib.models import Step, ingr, step
from brick.lib.template import check_step, find_placeholders, render_step
from brick.lib.units import Unit, amount


def test_text_without_placeholders_is_unchanged(new_id):
    s = step("Bake until golden, 9-11 minutes.", [], new_id=new_id)
    assert render_step(s) == s.text


def test_substitutes_ingredient_and_amount(new_id):
    butter = ingr("butter", amount(227, Unit.G), new_id=new_id)
    s = step("Cook $0 for $1", [butter, amount(5, Unit.BLANK)], new_id=new_id)

    assert render_step(s) == "Cook butter for 5"


def test_placeholder_at_start_of_text(new_id, butter):
    s = step("$0 goes in first.", [butter], new_id=new_id)
    assert render_step(s) == "butter goes in first."


def test_placeholders_may_repeat_and_reorder(new_id, butter, flour):
    s = step("$1, then $0, then $1 again", [butter, flour], new_id=new_id)
    assert render_step(s) == "flour, then butter, then flour again"


def test_multi_digit_index(new_id):
    expressions = [amount(i, Unit.BLANK) for i in range(12)]
    s = step("last is $11", expressions, new_id=new_id)
    assert render_step(s) == "last is 11"


def test_escaped_placeholder_keeps_backslash(new_id, butter):
    s = step(r"Use $0, not \$0", [butter], new_id=new_id)
    assert render_step(s) == r"Use butter, not \$0"


def test_escaped_out_of_range_placeholder_is_ignored(new_id):
    s = step(r"costs \$5", [], new_id=new_id)
    assert render_step(s) == r"costs \$5"


def test_lone_dollar_is_literal(new_id):
    s = step("about $ 5 at the store", [], new_id=new_id)
    assert render_step(s) == "about $ 5 at the store"


def test_out_of_bounds_reference(butter, flour):
    s = Step(id="add", text="Add $5", step_expressions=(butter, flour))

    with pytest.raises(OutOfBoundsReferenceError) as exc_info:
        render_step(s)

    assert exc_info.value.index == 5
    assert exc_info.value.step_id == "add"
    assert exc_info.value.expression_count == 2


def test_placeholder_without_index():
    s = Step(id="whisk", text="Whisk $flour well")

    with pytest.raises(MalformedPlaceholderError) as exc_info:
        render_step(s)

    assert exc_info.value.token == "$flour"
    assert exc_info.value.offset == 6
    assert exc_info.value.step_id == "whisk"


def test_render_is_repeatable(new_id, butter):
    s = step("Melt $0.", [butter], new_id=new_id)
    assert render_step(s) == render_step(s) == "Melt butter."


def test_find_placeholders_offsets():
    found = list(find_placeholders(r"a $0 b \$1 c $12"))

    assert [(p.index, p.start, p.end) for p in found] == [(0, 2, 4), (12, 13, 16)]


def test_check_step(butter):
    check_step(Step(id="ok", text="Melt $0", step_expressions=(butter,)))
    with pytest.raises(OutOfBoundsReferenceError):
        check_step(Step(id="bad", text="Melt $1", step_expressions=(butter,)))


@pytest.mark.parametrize("text", ["costs $٣ at the market", "x $٣", "x $١٢"])
def test_non_ascii_digits_are_literal(text):
    s = Step(id="s", text=text, step_expressions=(amount(1, Unit.BLANK),) * 4)

    assert render_step(s) == text
    assert list(find_placeholders(text)) == []


@pytest.mark.parametrize(
    "text,index",
    [("Add $2", 2), ("$0 then $7", 7), ("$1 and $1", None), (r"\$9 and $0", None)],
)
def test_check_step_and_render_step_agree(butter, flour, text, index):
    s = Step(id="s", text=text, step_expressions=(butter, flour))

    if index is None:
        check_step(s)
        render_step(s)
        return
    with pytest.raises(OutOfBoundsReferenceError) as checked:
        check_step(s)
    with pytest.raises(OutOfBoundsReferenceError) as rendered:
        render_step(s)
    assert checked.value.index == rendered.value.index == index
