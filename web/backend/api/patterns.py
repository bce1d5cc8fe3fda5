"""Read-only pattern catalog endpoints"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from notebook_layouts.patterns import PatternCatalog
from web.backend.services import get_catalog

router = APIRouter()


@router.get("")
async def list_patterns(
    category: Optional[str] = Query(None, description="Filter by category"),
    catalog: PatternCatalog = Depends(get_catalog),
) -> Dict[str, Any]:
    if category:
        try:
            patterns = catalog.list_by_category(category)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Unknown category '{category}'")
    else:
        patterns = catalog.list_patterns()
    return {
        "success": True,
        "patterns": [p.model_dump(mode="json") for p in patterns],
        "count": len(patterns),
    }


@router.get("/stats")
async def get_stats(catalog: PatternCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    return {"success": True, "stats": catalog.get_stats()}


@router.get("/{pattern_id}")
async def get_pattern(pattern_id: str, catalog: PatternCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    pattern = catalog.get(pattern_id)
    if pattern is None:
        raise HTTPException(status_code=404, detail=f"Pattern '{pattern_id}' not found")
    return {"success": True, "pattern": pattern.model_dump(mode="json")}
