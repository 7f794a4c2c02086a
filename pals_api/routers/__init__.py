"""
FastAPI routers grouped by domain (pals, elements, service pages).

Each file inside this package exposes an APIRouter that is included in the
main application (app.py). Handlers fetch their store from app.state and map
store errors to JSON responses.
"""
