from brick.lib.ids import IdFactory, uuid_id
from brick.lib.models import Recipe, connect, ingr, stage, step
from brick.lib.units import Unit, amount


def brown_butter_cookies(new_id: IdFactory = uuid_id) -> Recipe:
    g, tsp, blank = Unit.G, Unit.TSP, Unit.BLANK

    butter = ingr("unsalted butter", amount(227, g), new_id=new_id)
    flour = ingr("all-purpose flour", amount(250, g), new_id=new_id)
    baking_soda = ingr("baking soda", amount(1, tsp), new_id=new_id)
    salt = ingr("salt", amount(0.75, tsp), new_id=new_id)
    brown_sugar = ingr("dark brown sugar", amount(215, g), new_id=new_id)
    white_sugar = ingr("granulated sugar", amount(73, g), new_id=new_id)
    eggs = ingr("large eggs", amount(2, blank), new_id=new_id)
    vanilla = ingr("vanilla extract", amount(2, tsp), new_id=new_id)
    chocolate = ingr("chocolate chips", amount(250, g), new_id=new_id)

    brown_butter = ingr("brown butter", butter.amount, new_id=new_id)
    brown_butter_stage = stage(
        None,
        [
            step(
                "Cook $0 in a saucepan over medium heat, stirring often, until it "
                "foams, then browns, 5-8 minutes. Scrape into a large bowl and let "
                "cool slightly, until cool enough to touch (like the temperature of "
                "a warm bath), about 10 minutes.",
                [butter],
                new_id=new_id,
            ),
        ],
        [brown_butter],
        new_id=new_id,
    )

    dry_ingredients = ingr("dry ingredients", amount(1, blank), new_id=new_id)
    dry_ingredients_stage = stage(
        None,
        [
            step(
                "Whisk $0, $1 and $2 in a medium bowl.",
                [flour, baking_soda, salt],
                new_id=new_id,
            ),
        ],
        [dry_ingredients],
        new_id=new_id,
    )

    creamed = stage(
        brown_butter_stage,
        [
            step(
                "Add $0 and $1 to $2. Using an electric mixer on medium speed, beat "
                "until incorporated, about 1 minute.",
                [brown_sugar, white_sugar, brown_butter],
                new_id=new_id,
            ),
            step(
                "Add $0 and $1, increase mixer speed to medium-high, and beat until "
                "mixture lightens and begins to thicken, about 1 minute.",
                [eggs, vanilla],
                new_id=new_id,
            ),
        ],
        new_id=new_id,
    )
    mixed = connect([creamed, dry_ingredients_stage], "mix")
    dough = stage(
        mixed,
        [
            step(
                "Reduce mixer speed to low; add $0 and beat just to combine. Mix in "
                "$1 with a wooden spoon or rubber spatula.",
                [dry_ingredients, chocolate],
                new_id=new_id,
            ),
            step(
                "Let dough sit at room temperature for at least 30 minutes to allow "
                "$0 to hydrate. Dough will look very loose at first, but will "
                "thicken as it sits.",
                [flour],
                new_id=new_id,
            ),
            step(
                "Place a rack in middle of oven; preheat to $0. Using a $1 ice cream "
                "scoop, portion out balls of dough and place on a parchment-lined "
                "baking sheet, spacing about $2 apart (you can also form dough into "
                "ping ping-sized balls with your hands). Do not flatten; cookies "
                "will spread as they bake. Sprinkle with sea salt.",
                [amount(190, Unit.CELSIUS), amount(1, Unit.OZ), amount(3, Unit.INCH)],
                new_id=new_id,
            ),
            step(
                "Bake cookies until edges are golden brown and firm but centers are "
                "still soft, 9-11 minutes. Let cool on baking sheets 10 minutes, "
                "then transfer to a wire rack and let cool completely. Repeat with "
                "remaining dough and a fresh parchment-lined cooled baking sheet.",
                [],
                new_id=new_id,
            ),
        ],
        new_id=new_id,
    )

    return Recipe(title="Brown Butter Chocolate Chip Cookies", tail=dough)
