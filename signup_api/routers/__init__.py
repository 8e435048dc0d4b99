"""
FastAPI routers.

Each module exposes an APIRouter that app.py includes. Routers only adapt
requests onto controllers; no business rules live here.
"""
