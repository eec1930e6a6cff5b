from vocab_app.auth.password import PasswordHasher, get_password_hasher
from vocab_app.auth.jwt import TokenIssuer, get_token_issuer
from vocab_app.auth.dependencies import get_current_user, get_current_active_user

__all__ = [
    "PasswordHasher",
    "get_password_hasher",
    "TokenIssuer",
    "get_token_issuer",
    "get_current_user",
    "get_current_active_user",
]
