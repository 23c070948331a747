# bloglist/models/blog.py

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from . import Base


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    author = Column(String, nullable=True)
    url = Column(String, nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    user = relationship("User", back_populates="blogs")

    def __repr__(self) -> str:
        return f"<Blog id={self.id!r} title={self.title!r}>"

    def to_dict(self) -> dict:
        owner = None
        if self.user is not None:
            owner = {
                "username": self.user.username,
                "name": self.user.name,
                "id": self.user.id
            }
        return {
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
            "user": owner,
            "id": self.id
        }
