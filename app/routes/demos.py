from typing import List
from fastapi import APIRouter

from app.demos import list_demos
from app.pydantic.demo import Demo

router = APIRouter(prefix="/api", tags=["Demos"])


@router.get("/demos", response_model=List[Demo])
def get_demos():
    return list_demos()
