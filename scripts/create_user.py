"""Create a user through the same use case the API uses.

Usage:
    python -m scripts.create_user <name> <email> [password]
If password is omitted, a random one is printed.
All imports use app.*.
"""

import asyncio
import secrets
import sys

from app.api.v1.dependencies import build_user_repository
from app.application.use_cases.users import UserService
from app.domain.entities.user import UserEntity
from app.domain.exceptions import UserServiceException
from app.infrastructure.persistence import database
from app.infrastructure.security.password import get_password_hash


async def create_user(name: str, email: str, password: str) -> UserEntity:
    """Ensure the schema exists and create one user in its own transaction.

    The transaction commits or rolls back before the engine is disposed.
    """
    await database.init_models()
    session_factory = database.AsyncSessionLocal
    assert session_factory is not None
    try:
        async with session_factory() as session, session.begin():
            service = UserService(
                build_user_repository(session), password_hasher=get_password_hash
            )
            return await service.create(
                UserEntity(name=name, email=email, password=password)
            )
    finally:
        await database.dispose_engine()


async def main() -> None:
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.create_user <name> <email> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    name = sys.argv[1]
    email = sys.argv[2]
    password = sys.argv[3] if len(sys.argv) > 3 else secrets.token_urlsafe(12)

    try:
        user = await create_user(name, email, password)
    except UserServiceException as exc:
        print(f"Could not create user: {exc.message}", file=sys.stderr)
        sys.exit(1)

    print(f"Created user: {user.id} ({user.email})")
    if len(sys.argv) <= 3:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
