# bloglist/core/blogs.py

from sqlalchemy.orm import Session, joinedload
from bloglist.core.errors import Forbidden, MalformattedId, NotFound, Unauthorized, ValidationError
from bloglist.core.logger import get_logger
from bloglist.core.schemas import MAX_INTEGER, BlogCreate, BlogUpdate, Identity
from bloglist.models.blog import Blog


logger = get_logger("blogs")


def parse_blog_id(raw_id: str) -> int:
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise MalformattedId()
    blog_id = int(raw_id)
    if blog_id > MAX_INTEGER:
        raise NotFound("blog not found")
    return blog_id


def _require_text(field: str, value: str | None):
    if value is None or not value.strip():
        raise ValidationError(f"`{field}` is required")


def _find_blog(db: Session, blog_id: int) -> Blog:
    blog = (
        db.query(Blog)
        .options(joinedload(Blog.user))
        .filter(Blog.id == blog_id)
        .first()
    )
    if blog is None:
        raise NotFound("blog not found")
    return blog


# -------------------------------
# Queries
# -------------------------------

def list_blogs(db: Session) -> list[Blog]:
    return (
        db.query(Blog)
        .options(joinedload(Blog.user))
        .order_by(Blog.id.asc())
        .all()
    )


def get_blog(db: Session, blog_id: int) -> Blog:
    return _find_blog(db, blog_id)


# -------------------------------
# Mutations
# -------------------------------

def create_blog(db: Session, data: BlogCreate, identity: Identity | None) -> Blog:
    """
    Stores a new blog owned by the acting user.
    Likes default to 0 when the payload leaves them out.
    """
    if identity is None:
        raise Unauthorized()
    _require_text("title", data.title)
    _require_text("url", data.url)
    if data.likes is not None and data.likes < 0:
        raise ValidationError("`likes` must not be negative")

    blog = Blog(
        title=data.title,
        author=data.author,
        url=data.url,
        likes=data.likes if data.likes is not None else 0,
        user_id=identity.id
    )
    db.add(blog)
    db.commit()
    logger.info("user %s created blog %s", identity.id, blog.id)
    return _find_blog(db, blog.id)


def update_blog(db: Session, blog_id: int, update: BlogUpdate) -> Blog:
    """
    Applies the fields present in the update. No ownership check.
    """
    blog = _find_blog(db, blog_id)
    changes = update.model_dump(exclude_unset=True)

    for field in ("title", "url"):
        if field in changes:
            _require_text(field, changes[field])
    if "likes" in changes:
        if changes["likes"] is None or changes["likes"] < 0:
            raise ValidationError("`likes` must be a non-negative integer")

    for field, value in changes.items():
        setattr(blog, field, value)
    db.commit()
    return _find_blog(db, blog_id)


def delete_blog(db: Session, blog_id: int, identity: Identity | None):
    if identity is None:
        raise Unauthorized()
    blog = _find_blog(db, blog_id)
    if blog.user_id != identity.id:
        logger.warning("user %s tried to delete blog %s owned by %s", identity.id, blog.id, blog.user_id)
        raise Forbidden()

    db.delete(blog)
    db.commit()
    logger.info("user %s deleted blog %s", identity.id, blog_id)
