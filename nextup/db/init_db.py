# nextup/db/init_db.py
import logging
from sqlalchemy.orm import Session

from nextup.models.user import User
from nextup.core.config import settings
from nextup.core.security import hash_password

logger = logging.getLogger(__name__)


def init_db(db: Session) -> None:
    """Create the demo account when DEMO_USER_EMAIL and DEMO_USER_PASSWORD are set"""
    email = settings.DEMO_USER_EMAIL
    password = settings.DEMO_USER_PASSWORD
    if not email or not password:
        logger.info("DEMO_USER_EMAIL and DEMO_USER_PASSWORD not set; skipping seed user")
        return

    email = email.strip().lower()
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        logger.info("Demo user already exists, skipping initialization")
        return

    demo_user = User(email=email, password_hash=hash_password(password))
    db.add(demo_user)
    db.commit()

    logger.info(f"Created demo user: {demo_user.email}")
