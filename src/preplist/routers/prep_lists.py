"""API routes for building preparation lists."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from preplist.config import SpoonStyle
from preplist.document.html import DocumentError, add_prep_list
from preplist.logging_config import get_logger
from preplist.normalize.units import Unit
from preplist.plan.prep_list import PrepListBuilder

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/prep-list", tags=["prep-list"])


# Request/Response schemas
class MentionsRequest(BaseModel):
    """Method ingredient mentions in document order."""

    mentions: list[str] = Field(default_factory=list)
    spoon_style: SpoonStyle | None = Field(
        default=None, description="Override the configured spoon rendering"
    )


class PrepListResponse(BaseModel):
    """Formatted preparation list."""

    ingredients: list[str]
    total: int


class IngredientRecordSchema(BaseModel):
    """A parsed and combined ingredient."""

    name: str
    quantity: float
    unit: Unit


class ParsedIngredientsResponse(BaseModel):
    """Parsed ingredients, combined and sorted but not formatted."""

    ingredients: list[IngredientRecordSchema]
    total: int


class RenderRequest(BaseModel):
    """A document to add a preparation list to."""

    html: str
    selector: str | None = Field(default=None, description="CSS selector for mentions")
    container: str | None = Field(default=None, description="CSS selector for the list target")
    heading: str | None = None
    spoon_style: SpoonStyle | None = None


class RenderResponse(BaseModel):
    """Rewritten document and the list that was inserted."""

    html: str
    ingredients: list[str]


# =============================================================================
# Prep List Endpoints
# =============================================================================


@router.post("/consolidate", response_model=PrepListResponse)
async def consolidate(request: MentionsRequest) -> PrepListResponse:
    """Combine and sort mentions into display strings."""
    logger.info(f"Consolidating {len(request.mentions)} mentions")

    ingredients = PrepListBuilder(request.spoon_style).build(request.mentions)
    return PrepListResponse(ingredients=ingredients, total=len(ingredients))


@router.post("/parse", response_model=ParsedIngredientsResponse)
async def parse(request: MentionsRequest) -> ParsedIngredientsResponse:
    """Combine and sort mentions, returning structured records."""
    logger.info(f"Parsing {len(request.mentions)} mentions")

    records = PrepListBuilder(request.spoon_style).parse(request.mentions)
    return ParsedIngredientsResponse(
        ingredients=[
            IngredientRecordSchema(name=r.name, quantity=r.quantity, unit=r.unit)
            for r in records
        ],
        total=len(records),
    )


@router.post("/render", response_model=RenderResponse)
async def render(request: RenderRequest) -> RenderResponse:
    """
    Add a preparation list to an HTML document.

    Mentions are read from the elements matching ``selector`` and the list is
    appended, under a heading, to the first element matching ``container``.
    """
    try:
        html, ingredients = add_prep_list(
            request.html,
            selector=request.selector,
            container=request.container,
            heading=request.heading,
            spoon_style=request.spoon_style,
        )
    except DocumentError as e:
        logger.warning(f"Failed to render prep list: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return RenderResponse(html=html, ingredients=ingredients)
