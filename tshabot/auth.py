"""
Token gate
Handles: credential issuance on /api/init, cookie verification in front of protected routes.

The credential is a self-contained HS256 JWT. There is no session store,
refresh or logout; a token stays valid until its exp passes.
"""

import time
from typing import Awaitable, Callable

import jwt
from fastapi import Request, Response

from tshabot.exceptions import InternalSigningError, Unauthorized

COOKIE_NAME = "auth_token"
APP_CLAIM = "tshawytscha-ai"
ALGORITHM = "HS256"
TOKEN_TTL_SECONDS = 60 * 60 * 24 * 30  # 30 days

Handler = Callable[[Request], Awaitable[Response]]


class TokenGate:
    def __init__(self, secret: str, clock: Callable[[], float] = time.time):
        self._secret = secret
        self._clock = clock

    def issue(self) -> str:
        if not self._secret:
            raise InternalSigningError()
        payload = {
            "app": APP_CLAIM,
            "exp": int(self._clock()) + TOKEN_TTL_SECONDS,
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError):
            raise InternalSigningError()

    def verify(self, token: str) -> None:
        """Raise Unauthorized unless the signature matches and exp is still ahead."""
        if not self._secret:
            raise Unauthorized("Invalid token")
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp"], "verify_exp": False},
            )
        except jwt.InvalidTokenError:
            raise Unauthorized("Invalid token")

        # exp is compared against the injected clock
        exp = payload["exp"]
        if not isinstance(exp, (int, float)) or exp <= self._clock():
            raise Unauthorized("Invalid token")

    async def init_handler(self, request: Request) -> Response:
        token = self.issue()
        response = Response(status_code=200)
        response.set_cookie(
            COOKIE_NAME,
            token,
            httponly=True,
            secure=True,
            samesite="strict",
            path="/",
        )
        return response

    def protect(self, handler: Handler) -> Handler:
        """Wrap handler so it only runs for requests carrying a valid credential cookie."""

        async def gated(request: Request) -> Response:
            token = request.cookies.get(COOKIE_NAME)
            if not token:
                raise Unauthorized()
            self.verify(token)
            return await handler(request)

        return gated
