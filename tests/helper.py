from bloglist.database import SessionLocal
from bloglist.models import Blog, User


INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


def blogs_in_db():
    session = SessionLocal()
    try:
        return [blog.to_dict() for blog in session.query(Blog).order_by(Blog.id).all()]
    finally:
        session.close()


def users_in_db():
    session = SessionLocal()
    try:
        return [user.to_dict() for user in session.query(User).order_by(User.id).all()]
    finally:
        session.close()


def non_existing_id():
    session = SessionLocal()
    try:
        blog = Blog(title="willremovethissoon", url="http://example.com")
        session.add(blog)
        session.commit()
        blog_id = blog.id
        session.delete(blog)
        session.commit()
        return blog_id
    finally:
        session.close()


def register_and_login(client, username, password, name=None):
    res = client.post("/api/users", json={"username": username, "name": name, "password": password})
    assert res.status_code == 200
    res = client.post("/api/login", json={"username": username, "password": password})
    assert res.status_code == 200
    return res.json()["token"]


def auth(token):
    return {"Authorization": f"bearer {token}"}
