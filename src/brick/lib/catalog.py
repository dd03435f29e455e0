import logging
from collections.abc import Callable

from brick.lib.errors import RecipeNotFoundError
from brick.lib.ids import slugify
from brick.lib.models import Recipe
from brick.lib.samples import brown_butter_cookies

RecipeBuilder = Callable[[], Recipe]


class RecipeCatalog:
    def __init__(self):
        self._builders: dict[str, RecipeBuilder] = {}
        self._recipes: dict[str, Recipe] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def register(self, builder: RecipeBuilder, slug: str | None = None) -> str:
        """Register ``builder`` under ``slug``, defaulting to its recipe's title."""
        recipe = None
        if slug is None:
            recipe = builder()
            slug = slugify(recipe.title)
        if slug in self._builders:
            raise ValueError(f"a recipe is already registered as {slug!r}")
        self._builders[slug] = builder
        if recipe is not None:
            self._recipes[slug] = recipe
        self.logger.debug(f"registered recipe {slug!r}")
        return slug

    def get(self, slug: str) -> Recipe:
        """Return the recipe for ``slug``, building it on first use."""
        if (recipe := self._recipes.get(slug)) is not None:
            return recipe
        if (builder := self._builders.get(slug)) is None:
            raise RecipeNotFoundError(slug)
        recipe = self._recipes[slug] = builder()
        return recipe

    def slugs(self) -> list[str]:
        return sorted(self._builders)

    def __contains__(self, slug: str) -> bool:
        return slug in self._builders


def default_catalog() -> RecipeCatalog:
    catalog = RecipeCatalog()
    catalog.register(brown_butter_cookies)
    return catalog
