import uuid

from fastapi_users import FastAPIUsers
from fastapi_users.authentication import AuthenticationBackend, BearerTransport, JWTStrategy

from vendorhub.auth.manager import get_user_manager
from vendorhub.core.config import settings
from vendorhub.models.user import User

bearer_transport = BearerTransport(tokenUrl="api/auth/jwt/login")


def get_jwt_strategy() -> JWTStrategy:
    return JWTStrategy(
        secret=settings.auth_secret,
        lifetime_seconds=settings.jwt_lifetime_seconds,
        token_audience=[settings.jwt_audience],
    )


auth_backend = AuthenticationBackend(
    name="jwt",
    transport=bearer_transport,
    get_strategy=get_jwt_strategy,
)

fastapi_users = FastAPIUsers[User, uuid.UUID](
    get_user_manager,
    [auth_backend],
)

# Authenticated subject; 401 when the bearer token is missing or invalid
current_active_user = fastapi_users.current_user(active=True)
