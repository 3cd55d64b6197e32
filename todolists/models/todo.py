from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text, false

from todolists.database import Base


class Todo(Base):
    __tablename__ = "todos"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    done = Column(Boolean, nullable=False, default=False, server_default=false())
    todolist_id = Column(
        Integer,
        ForeignKey("todolists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    username = Column(Text, ForeignKey("users.username", ondelete="CASCADE"), nullable=False)
