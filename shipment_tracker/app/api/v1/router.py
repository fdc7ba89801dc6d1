"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter
from shipment_tracker.app.api.v1.endpoints import reports, consignments

router = APIRouter()

router.include_router(reports.router)
router.include_router(consignments.router)
