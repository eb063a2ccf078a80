"""API server with health check and assessment endpoints.

Follows the APIRouter pattern: each feature has its own router module,
assembled here into a single FastAPI app.

Endpoints:
    GET  /health                                      - Health check
    POST /assessment/impact                           - Composite impact assessment
    POST /assessment/compliance                       - Compliance checklist evaluation
    GET  /assessment/compliance/{jurisdiction}/checklist - Requirement keys
"""

from fastapi import FastAPI

from marine_impact.api.assessment_router import router as assessment_router
from marine_impact.api.health_router import router as health_router
from marine_impact.common.tracing import TraceIdMiddleware

app = FastAPI(title="Marine Ecological Impact API")

app.add_middleware(TraceIdMiddleware)
app.include_router(health_router)
app.include_router(assessment_router)
