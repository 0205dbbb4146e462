from fastapi import APIRouter

from src.party_planner.api.routes import account, auth, board, catalog, guests, projects, selections

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(account.router)
for catalog_router in catalog.routers:
    api_router.include_router(catalog_router)
api_router.include_router(board.router)
api_router.include_router(projects.router)
api_router.include_router(guests.router)
for selection_router in selections.routers:
    api_router.include_router(selection_router)
