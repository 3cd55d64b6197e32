from sqlalchemy import Column, Text

from todolists.database import Base


class User(Base):
    __tablename__ = "users"
    username = Column(Text, primary_key=True)
    password = Column(Text, nullable=False)
