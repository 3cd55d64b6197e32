from sqlalchemy import Column, ForeignKey, Integer, Text, UniqueConstraint

from todolists.database import Base


class TodoList(Base):
    __tablename__ = "todolists"
    # titles are unique per owner, not globally
    __table_args__ = (UniqueConstraint("title", "username", name="todolists_title_username_key"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    username = Column(Text, ForeignKey("users.username", ondelete="CASCADE"), nullable=False)
