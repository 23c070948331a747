# bloglist_app/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the FastAPI backend
API_URL = os.getenv("BLOGLIST_API_URL", "http://localhost:8000")


class ApiError(Exception):
    """
    Raised when the backend answers with a non-2xx status.
    Carries the status code and the server's error message.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def _auth_header(token):
    return {"Authorization": f"bearer {token}"}


def _handle(res):
    if res.ok:
        if res.status_code == 204 or not res.content:
            return None
        return res.json()
    try:
        message = res.json().get("error", res.text)
    except ValueError:
        message = res.text
    raise ApiError(res.status_code, message)


# -------------------------------
# Authentication
# -------------------------------

def login_user(username, password):
    """
    Logs in and returns {"token", "username", "name"}.
    """
    res = requests.post(f"{API_URL}/api/login", json={"username": username, "password": password})
    return _handle(res)


def register_user(username, name, password):
    payload = {"username": username, "name": name, "password": password}
    res = requests.post(f"{API_URL}/api/users", json=payload)
    return _handle(res)


def list_users():
    res = requests.get(f"{API_URL}/api/users")
    return _handle(res)


# -------------------------------
# Blogs
# -------------------------------

def get_blogs():
    res = requests.get(f"{API_URL}/api/blogs")
    return _handle(res)


def create_blog(token, title, author, url, likes=None):
    """
    Creates a blog owned by the user the token was issued to.
    """
    payload = {"title": title, "author": author, "url": url}
    if likes is not None:
        payload["likes"] = likes
    res = requests.post(f"{API_URL}/api/blogs", json=payload, headers=_auth_header(token))
    return _handle(res)


def update_blog(blog_id, **fields):
    res = requests.put(f"{API_URL}/api/blogs/{blog_id}", json=fields)
    return _handle(res)


def like_blog(blog):
    """
    Adds one like to the given blog dict and returns the updated blog.
    """
    return update_blog(blog["id"], likes=blog["likes"] + 1)


def delete_blog(token, blog_id):
    res = requests.delete(f"{API_URL}/api/blogs/{blog_id}", headers=_auth_header(token))
    return _handle(res)
