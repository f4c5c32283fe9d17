from uuid import UUID

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from order_api.domain.errors import Conflict, Forbidden, NotFound, InternalError
from order_api.domain.schemas import UserRegister, UserLogin, UserRead
from order_api.repos.user_repo import UserRepo
from order_api.services.token_service import TokenService
from order_api.utils.logging import get_logger

logger = get_logger(__name__)

password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return password_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)


class UserService:
    def __init__(self, db: Session, token_service: TokenService | None = None):
        self.repo = UserRepo(db)
        self.token_service = token_service or TokenService()

    def register(self, payload: UserRegister) -> str:
        try:
            if self.repo.find_by_email(payload.email):
                raise Conflict()

            user = self.repo.insert(
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                password_hash=hash_password(payload.password),
            )
        except IntegrityError:
            # wyscig: ktos zarejestrowal ten sam email miedzy SELECT a INSERT
            raise Conflict()
        except SQLAlchemyError as e:
            logger.error(f"Registration failed: {e}")
            raise InternalError()

        logger.info(f"User {user.user_id} registered")
        return self.token_service.issue(user.user_id)

    def login(self, payload: UserLogin) -> str:
        try:
            user = self.repo.find_by_email(payload.email)
        except SQLAlchemyError as e:
            logger.error(f"Login lookup failed: {e}")
            raise InternalError()

        if not user or not verify_password(payload.password, user.password):
            logger.info(f"Failed login for {payload.email}")
            raise Forbidden()

        return self.token_service.issue(user.user_id)

    def get_user(self, user_id: UUID) -> UserRead:
        try:
            user = self.repo.find_by_id(user_id)
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed: {e}")
            raise InternalError()

        if not user:
            raise NotFound("User not found")
        return UserRead.model_validate(user)
