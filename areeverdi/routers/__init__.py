"""
FastAPI routers grouped by resource (aree, zone).

Each file inside this package exposes an APIRouter that is included in the
application built by app.create_app().
"""
