"""
routers/ — FastAPI route modules.

Each file contains a thin APIRouter. Store access lives in
database.py and link construction in services/. Routers validate
input, call those, and return responses.
"""
