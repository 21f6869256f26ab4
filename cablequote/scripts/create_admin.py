# cablequote/scripts/create_admin.py
import argparse
import asyncio

from cablequote.core.db import AsyncSessionLocal, init_models
from cablequote.core.security import hash_password
from cablequote.models.user_models import User
from cablequote.schemas.user_schemas import UserRole


async def create_admin(name: str, password: str):
    await init_models()
    async with AsyncSessionLocal() as session:
        if await session.get(User, name):
            print(f"User '{name}' already exists")
            return
        admin = User(
            name=name,
            password_hash=hash_password(password),
            role=UserRole.ADMIN.value,
            is_active=True
        )
        session.add(admin)
        await session.commit()
        print("Admin user created!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the first Admin user")
    parser.add_argument("--name", default="admin")
    parser.add_argument("--password", default="admin123")
    args = parser.parse_args()
    asyncio.run(create_admin(args.name, args.password))
