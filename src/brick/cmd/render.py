import argparse
import logging
import sys

from brick.config import settings
from brick.lib.catalog import default_catalog
from brick.lib.errors import BrickError
from brick.lib.render import render_recipe
from brick.lib.text import format_recipe
from brick.lib.validate import validate_recipe


def main(argv: list[str] | None = None) -> int:
    catalog = default_catalog()

    parser = argparse.ArgumentParser(description="Print a recipe as text.")
    parser.add_argument("slug", nargs="?", help="recipe to render")
    parser.add_argument("--list", action="store_true", help="list known recipes")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())

    if args.list or not args.slug:
        print("\n".join(catalog.slugs()))
        return 0

    try:
        recipe = catalog.get(args.slug)
        validate_recipe(recipe)
        print(format_recipe(render_recipe(recipe)), end="")
    except BrickError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
