from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One session per request, taken from the pool built at startup"""
    async with request.app.state.session_factory() as session:
        yield session
