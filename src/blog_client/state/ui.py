"""Presentation-independent UI state: modals, form buffers, pending actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Modal(str, Enum):
    LOGIN = "login"
    REGISTER = "register"
    NEW_POST = "new_post"


class Action(str, Enum):
    """User actions whose submit affordance is disabled while in flight."""

    LOGIN = "login"
    REGISTER = "register"
    CREATE_POST = "create_post"
    DELETE_POST = "delete_post"
    CREATE_COMMENT = "create_comment"


@dataclass
class LoginForm:
    email: str = ""
    password: str = ""


@dataclass
class RegisterForm:
    username: str = ""
    email: str = ""
    password: str = ""


@dataclass
class PostForm:
    title: str = ""
    content: str = ""


@dataclass
class UiState:
    """Mutable form and modal state.

    Only one modal is open at a time. ``pending`` holds the actions that are
    waiting on the network.
    """

    modal: Modal | None = None
    login_form: LoginForm = field(default_factory=LoginForm)
    register_form: RegisterForm = field(default_factory=RegisterForm)
    post_form: PostForm = field(default_factory=PostForm)
    comment_text: str = ""
    pending: set[Action] = field(default_factory=set)

    def open(self, modal: Modal) -> None:
        self.modal = modal

    def close(self) -> None:
        self.modal = None

    def reset_login(self) -> None:
        self.login_form = LoginForm()

    def reset_register(self) -> None:
        self.register_form = RegisterForm()

    def reset_post(self) -> None:
        self.post_form = PostForm()
