#!/usr/bin/env python3
"""
Export endpoints - download the current cohort as CSV.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from core.ranking import SortBy
from core.skill_gap_service import SkillGapService
from ..dependencies import get_skill_gap_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/export", tags=["export"])


@router.get("/csv")
def export_csv(
    sort_by: Optional[SortBy] = Query(default=None, description="Defaults to the configured order"),
    service: SkillGapService = Depends(get_skill_gap_service)
):
    """
    Current cohort as a CSV attachment, in the same order as the ranked view.

    Every job is included; the show-only-missing view filter does not apply.
    """
    csv_text = service.export_csv(sort_by)
    filename = service.export_config.filename

    logger.info(f"Exporting {filename} ({len(csv_text)} bytes)")
    return Response(
        content=csv_text,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
