"""Root Route: GET / greeting, doubles as a liveness probe.

Invariants:
    - GET / always returns 200 {"message": "Hello World"} if the process is up
"""

from fastapi import APIRouter

from mockapi.schemas.user import MessageResponse

router = APIRouter(tags=["root"])


@router.get("/", response_model=MessageResponse)
async def hello_world():
    return {"message": "Hello World"}
