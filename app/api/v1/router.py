from fastapi import APIRouter

from app.api.routers import activity, appointments, auth, pets, users

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(pets.router)
api_router.include_router(appointments.router)
api_router.include_router(activity.router)
