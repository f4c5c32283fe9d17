# order_api/services/auth_service.py
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from order_api.domain.errors import Unauthorized, NotFound, InternalError, TokenError
from order_api.repos.user_repo import UserRepo
from order_api.services.token_service import TokenService
from order_api.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    """
    Bramka uwierzytelniania: nagłówek -> token -> żywy rekord użytkownika.
    Każdy chroniony endpoint przechodzi przez authenticate().
    """

    def __init__(self, db: Session, token_service: TokenService | None = None):
        self.repo = UserRepo(db)
        self.token_service = token_service or TokenService()

    def authenticate(self, header_value: str | bytes | None) -> UUID:
        if header_value is None:
            logger.info("Auth rejected: missing token header")
            raise Unauthorized()

        if isinstance(header_value, bytes):
            try:
                header_value = header_value.decode("ascii")
            except UnicodeDecodeError:
                logger.info("Auth rejected: token header is not valid text")
                raise Unauthorized()

        token = header_value.strip()
        if not token:
            logger.info("Auth rejected: empty token header")
            raise Unauthorized()

        try:
            user_id = self.token_service.verify(token)
        except TokenError as e:
            logger.info(f"Auth rejected: {e}")
            raise Unauthorized()

        # user_id z tokena nie jest zaufany, musi istnieć w bazie
        try:
            user = self.repo.find_by_id(user_id)
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed during auth: {e}")
            raise InternalError()

        if user is None:
            logger.info(f"Auth rejected: user {user_id} from token not found")
            raise NotFound("User in access_token is not found in db")

        return user.user_id
