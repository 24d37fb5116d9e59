from sqlalchemy import Column, DateTime, String, Text

from database import Base


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(String(24), primary_key=True, index=True)
    name = Column(String(256), nullable=False)
    email = Column(String(256), nullable=False)
    phone = Column(String(64), nullable=False)
    subject = Column(String(512), nullable=False)
    message = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), nullable=False)
