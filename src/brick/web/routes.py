import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from brick.web.models import RecipeListResponse, RecipeResponse
from brick.lib.catalog import RecipeCatalog, default_catalog
from brick.lib.errors import BrickError, RecipeNotFoundError
from brick.lib.render import RecipeRender, render_recipe
from brick.lib.text import format_recipe

logger = logging.getLogger(__name__)

router = APIRouter()

recipe_catalog = default_catalog()


def get_catalog() -> RecipeCatalog:
    return recipe_catalog


def _render(catalog: RecipeCatalog, slug: str) -> RecipeRender:
    try:
        return render_recipe(catalog.get(slug))
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except BrickError as exc:
        logger.warning(f"recipe {slug!r} failed to render: {exc}")
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/recipes", response_model=RecipeListResponse)
async def list_recipes(catalog: RecipeCatalog = Depends(get_catalog)):
    return RecipeListResponse(recipes=catalog.slugs())


@router.get("/recipes/{slug}", response_model=RecipeResponse)
async def get_recipe(slug: str, catalog: RecipeCatalog = Depends(get_catalog)):
    return RecipeResponse.from_render(_render(catalog, slug))


@router.get("/recipes/{slug}/text", response_class=PlainTextResponse)
async def get_recipe_text(slug: str, catalog: RecipeCatalog = Depends(get_catalog)):
    return format_recipe(_render(catalog, slug))
