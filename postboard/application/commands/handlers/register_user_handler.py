"""Register User handler.

Flow:
1. Validate username and password length (password in UTF-8 bytes, bcrypt
   only reads the first 72)
2. Reject a taken email or username
3. Hash the password
4. Create the user
5. Return the new identity
"""

from postboard.application.commands.auth_commands import RegisterUser
from postboard.core.errors import ConflictError
from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import Identity
from postboard.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

MIN_USERNAME_LENGTH = 5
MIN_PASSWORD_LENGTH = 5
MAX_PASSWORD_BYTES = 72


class RegistrationError:
    """Registration-specific error reasons."""

    USERNAME_TOO_SHORT = "username_too_short"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    USER_EXISTS = "user_exists"
    BACKEND_UNAVAILABLE = "backend_unavailable"


class RegisterUserHandler:
    """Handler for RegisterUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[Identity, str]:
        """Handle register user command.

        Returns:
            Success(Identity) for the created user.
            Failure(RegistrationError.*) otherwise.
        """
        if len(cmd.username) < MIN_USERNAME_LENGTH:
            return Failure(error=RegistrationError.USERNAME_TOO_SHORT)
        if len(cmd.password) < MIN_PASSWORD_LENGTH:
            return Failure(error=RegistrationError.PASSWORD_TOO_SHORT)
        if len(cmd.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return Failure(error=RegistrationError.PASSWORD_TOO_LONG)

        for lookup in (
            await self._user_repo.find_by_email(cmd.email),
            await self._user_repo.find_by_username(cmd.username),
        ):
            match lookup:
                case Failure(error=error):
                    self._logger.error(
                        "Registration lookup failed", reason=error.message
                    )
                    return Failure(error=RegistrationError.BACKEND_UNAVAILABLE)
                case Success(value=None):
                    pass
                case Success():
                    self._logger.info(
                        "Registration rejected: user exists", username=cmd.username
                    )
                    return Failure(error=RegistrationError.USER_EXISTS)

        password_hash = self._password_service.hash_password(cmd.password)

        match await self._user_repo.create(cmd.username, cmd.email, password_hash):
            case Success(value=user):
                self._logger.info(
                    "User registered", user_id=str(user.id), username=user.username
                )
                return Success(value=user.identity)
            case Failure(error=ConflictError()):
                return Failure(error=RegistrationError.USER_EXISTS)
            case Failure(error=error):
                self._logger.error("User creation failed", reason=error.message)
                return Failure(error=RegistrationError.BACKEND_UNAVAILABLE)
            case _:
                # Unreachable but needed for type checker
                return Failure(error=RegistrationError.BACKEND_UNAVAILABLE)
