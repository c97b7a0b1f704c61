from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, Text

from app.db.base import Base, utcnow

CONTEXT_TYPES = ("tutorial", "project", "general")


class ChatMessage(Base):
    """One AI tutor exchange: the user's query and the reply it got."""

    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    message = Column(Text, nullable=False)
    response = Column(Text, nullable=False)

    context_type = Column(Enum(*CONTEXT_TYPES, name="context_type"), nullable=True)
    context_id = Column(Integer, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
