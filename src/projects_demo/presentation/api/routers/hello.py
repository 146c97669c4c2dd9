"""Greeting endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/hello", response_class=PlainTextResponse, summary="Say hello")
async def say_hello() -> str:
    return "Hello"
