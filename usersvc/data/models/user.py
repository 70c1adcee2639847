# usersvc/data/models/user.py
from sqlalchemy import Column, Integer, String
from usersvc.data.database import Base

class UserModel(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
