"""Layout retrieval endpoint"""

from fastapi import APIRouter, Depends

from notebook_layouts.config import RetrievalProfile
from notebook_layouts.models import RetrievalResult
from notebook_layouts.patterns import CatalogProvider
from notebook_layouts.retrieval import retrieve
from web.backend.models import LayoutRequest
from web.backend.services import get_catalog, get_retrieval_profile

router = APIRouter()


@router.post("/retrieve", response_model=RetrievalResult)
async def retrieve_layouts(
    request: LayoutRequest,
    catalog: CatalogProvider = Depends(get_catalog),
    profile: RetrievalProfile = Depends(get_retrieval_profile),
) -> RetrievalResult:
    """
    Rank catalog patterns against the prompt and return up to three layouts.

    A blank prompt or unknown category is rejected with 400.
    """
    return retrieve(request.to_query(), catalog, profile)
