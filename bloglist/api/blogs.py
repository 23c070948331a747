# bloglist/api/blogs.py

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from bloglist.core import blogs
from bloglist.core.auth import get_identity
from bloglist.core.schemas import BlogCreate, BlogUpdate, Identity
from bloglist.database import get_db


router = APIRouter(prefix="/api/blogs", tags=["blogs"])


# -------------------------------
# Read Endpoints
# -------------------------------

@router.get("")
def list_blogs(db: Session = Depends(get_db)):
    return [blog.to_dict() for blog in blogs.list_blogs(db)]


@router.get("/{blog_id}")
def get_blog(blog_id: str, db: Session = Depends(get_db)):
    return blogs.get_blog(db, blogs.parse_blog_id(blog_id)).to_dict()


# -------------------------------
# Mutation Endpoints
# -------------------------------

@router.post("")
def create_blog(
    body: BlogCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db)
):
    """
    Adds a blog owned by the user behind the bearer token.
    """
    return blogs.create_blog(db, body, identity).to_dict()


@router.put("/{blog_id}")
def update_blog(blog_id: str, body: BlogUpdate, db: Session = Depends(get_db)):
    """
    Updates the given fields of a blog, typically its likes.
    """
    return blogs.update_blog(db, blogs.parse_blog_id(blog_id), body).to_dict()


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blog(
    blog_id: str,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db)
):
    """
    Removes a blog. Only its creator may do so.
    """
    blogs.delete_blog(db, blogs.parse_blog_id(blog_id), identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
