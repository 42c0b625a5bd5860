"""
Blog Backend: HTML Views
==========================

What:  The three screens of the blog: post list, post detail, new post form.
How:   Each handler calls the posts API through PostsClient and hands the
       JSON it gets back straight to a Jinja2 template.
Who:   Browsers.

Routes:
    GET  /              list of post titles
    GET  /posts/new     empty create form
    POST /posts/new     submit the form, then show an empty form again
    GET  /posts/{id}    one post

API failures raise ApiClientError, which main.py renders as error.html.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from blog_backend.views.client import PostsClient, get_posts_client

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Views"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def post_list(
    request: Request,
    client: PostsClient = Depends(get_posts_client),
):
    posts = await client.list_posts()
    return templates.TemplateResponse(request, "post_list.html", {"posts": posts})


# Registered before /posts/{post_id} so "new" is not read as an id
@router.get("/posts/new", response_class=HTMLResponse)
async def new_post_form(request: Request):
    return templates.TemplateResponse(request, "new_post.html", {"created": None})


@router.post("/posts/new", response_class=HTMLResponse)
async def submit_new_post(
    request: Request,
    title: str = Form(default=""),
    content: str = Form(default=""),
    client: PostsClient = Depends(get_posts_client),
):
    """Forward the form to POST /api/posts; the re-rendered form starts empty."""
    created = await client.create_post(title=title, content=content)
    return templates.TemplateResponse(request, "new_post.html", {"created": created})


@router.get("/posts/{post_id}", response_class=HTMLResponse)
async def post_detail(
    post_id: str,
    request: Request,
    client: PostsClient = Depends(get_posts_client),
):
    post = await client.get_post(post_id)
    return templates.TemplateResponse(request, "post_detail.html", {"post": post})
