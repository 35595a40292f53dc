from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.exceptions import AuthenticationFailure, ValidationError
from models.lists import TaskList
from models.tasks import Task
from models.user_sessions import UserSession
from models.users import User
from schemas.user_schemas import CreateUserRequest
from utils.hashing import verify_password
from utils.logger import get_logger

logger = get_logger(__name__)

class AuthService:

    @staticmethod
    def create_user(request: CreateUserRequest, db: Session) -> User:
        """
        Persists a new user.

        The plaintext password is assigned to the model and hashed by the
        pre-save hook. Email uniqueness is enforced by the store: a duplicate
        surfaces as an IntegrityError and is reported as a validation error.
        """
        model = User(email=request.email, password=request.password)

        db.add(model)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(
                "Registration attempt with existing email",
                extra={"email": request.email}
            )
            raise ValidationError("Email already registered")

        db.refresh(model)
        return model

    @staticmethod
    def find_by_credentials(email: str, password: str, db: Session) -> User:
        """
        Returns the user owning ``email`` if ``password`` matches.

        Unknown email and wrong password raise the same AuthenticationFailure
        so the response never reveals whether an account exists.
        """
        user = db.query(User).filter(User.email == email.strip().lower()).first()

        if not user:
            logger.warning("Login failed - user not found", extra={"email": email})
            raise AuthenticationFailure("Invalid credentials")

        if not verify_password(password, user.password):
            logger.warning(
                "Login failed - invalid password",
                extra={"user_id": user.id, "email": email}
            )
            raise AuthenticationFailure("Invalid credentials")

        logger.debug("User authenticated successfully", extra={"user_id": user.id})
        return user

    @staticmethod
    def get_user_by_id(user_id: int, db: Session) -> User | None:
        return db.query(User).filter(User.id == user_id).one_or_none()

    @staticmethod
    def delete_user(user_id: int, db: Session) -> bool:
        """
        Deletes a user together with their sessions, lists and tasks.

        Returns False when the user no longer exists.
        """
        list_ids = db.query(TaskList.id).filter(TaskList.user_id == user_id)
        db.query(Task).filter(Task.list_id.in_(list_ids.scalar_subquery())).delete(synchronize_session=False)
        db.query(TaskList).filter(TaskList.user_id == user_id).delete(synchronize_session=False)
        db.query(UserSession).filter(UserSession.user_id == user_id).delete(synchronize_session=False)
        deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
        return deleted > 0
