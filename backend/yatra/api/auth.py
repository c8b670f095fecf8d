from fastapi import APIRouter, Depends

from yatra.auth import get_current_user
from yatra.models import User
from yatra.schemas import UserResponse

router = APIRouter()


@router.get("/user", response_model=UserResponse)
async def get_auth_user(current_user: User = Depends(get_current_user)):
    return current_user
