from sqlalchemy import Column, String

from database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, index=True)
    username = Column(String(256), unique=True, nullable=False, index=True)
    phone = Column(String(64), nullable=True)
    email = Column(String(256), nullable=True)
    # bcrypt hash, never the plaintext
    password = Column(String(128), nullable=False)
