from fastapi import FastAPI

from committee_service.api.errors import register_exception_handlers
from committee_service.api.routes.committee_slots import router as committee_slots_router
from committee_service.api.routes.committees import router as committees_router
from committee_service.api.routes.faculty import router as faculty_router

app = FastAPI(title="Committee Governance API")

register_exception_handlers(app)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(committee_slots_router, prefix="/api")
app.include_router(committees_router, prefix="/api")
app.include_router(faculty_router, prefix="/api")
