# bloglist/models/user.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for registered users.
    Stores the username, display name and bcrypt password hash.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)

    blogs = relationship("Blog", back_populates="user", order_by="Blog.id")

    def __repr__(self) -> str:
        return f"<User id={self.id!r} username={self.username!r}>"

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "name": self.name,
            "id": self.id,
            "blogs": [
                {
                    "title": blog.title,
                    "author": blog.author,
                    "url": blog.url,
                    "likes": blog.likes,
                    "id": blog.id
                }
                for blog in self.blogs
            ]
        }
