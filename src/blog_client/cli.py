"""Command line entry point for the blog client.

Typical usage:
  blog-client stubs            # serve the three stub services on 8001-8003
  blog-client posts
  blog-client comments 1
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from urllib.parse import urlsplit

from blog_client.core.logging import configure_logging
from blog_client.core.settings import settings
from blog_client.services.client import BlogServiceError, ServiceClient
from blog_client.stubs import (
    StubStore,
    create_comment_service,
    create_post_service,
    create_user_service,
)


def say(msg: str) -> None:
    print(msg)


def fail(msg: str) -> None:
    print(f"[blog-client][FAIL] {msg}", file=sys.stderr)


async def _show_posts() -> None:
    async with ServiceClient() as client:
        posts = await client.list_posts()
    if not posts:
        say("No posts yet. Be the first to create one!")
        return
    for post in posts:
        say(f"#{post.id}  {post.title}  (author {post.author_id}, {post.created_at})")


async def _show_comments(post_id: int) -> None:
    async with ServiceClient() as client:
        comments = await client.list_comments(post_id)
    if not comments:
        say("No comments yet")
        return
    for comment in comments:
        say(f"- {comment.content}  (author {comment.author_id}, {comment.created_at})")


def _port(url: str) -> int:
    parts = urlsplit(url)
    return parts.port or (443 if parts.scheme == "https" else 80)


async def _serve_stubs(host: str) -> None:
    import uvicorn

    store = StubStore.seeded()
    apps = (
        (create_user_service(store), _port(settings.user_service_url)),
        (create_post_service(store), _port(settings.post_service_url)),
        (create_comment_service(store), _port(settings.comment_service_url)),
    )
    servers = [
        uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_level=settings.log_level.lower()))
        for app, port in apps
    ]
    for app, port in apps:
        say(f"[blog-client] {app.title} on http://{host}:{port}")
    await asyncio.gather(*(server.serve() for server in servers))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blog-client", description=settings.app_name)
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("posts", help="List every post")

    comments = sub.add_parser("comments", help="List the comments of a post")
    comments.add_argument("post_id", type=int)

    stubs = sub.add_parser("stubs", help="Run in-memory user, post and comment services")
    stubs.add_argument("--host", default="127.0.0.1")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "posts":
            asyncio.run(_show_posts())
        elif args.command == "comments":
            asyncio.run(_show_comments(args.post_id))
        elif args.command == "stubs":
            asyncio.run(_serve_stubs(args.host))
    except BlogServiceError as exc:
        fail(str(exc))
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
