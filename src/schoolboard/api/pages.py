# src/schoolboard/api/pages.py
"""Page routes.

Each page returns the view model its screen renders. Every page except
``/auth`` needs a signed-in caller; anyone else is sent to ``/auth``.
"""

import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, Query, status
from fastapi.responses import RedirectResponse
from fastapi.security import HTTPAuthorizationCredentials

from schoolboard.api.v1.dependencies import SessionDep, bearer_scheme
from schoolboard.core.errors import AuthenticationFailure
from schoolboard.schemas.pages import (
    AuthPage,
    CreatePostPage,
    HomePage,
    PostFilter,
    ProfilePage,
    SchoolPage,
)
from schoolboard.services import views
from schoolboard.services.identity_service import resolve_caller
from schoolboard.services.policy import Caller
from schoolboard.services.store import Store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

AUTH_PAGE = "/auth"
HOME_PAGE = "/"


class AuthRedirect(Exception):
    """Raised by the page guard; the app answers with a redirect to ``/auth``."""


def redirect_to(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


def get_page_caller(
    db: SessionDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    access_token: Annotated[str | None, Cookie()] = None,
) -> Caller | None:
    """Resolve the caller from the bearer header or the ``access_token`` cookie.

    Returns None instead of failing so pages can redirect.
    """
    token = credentials.credentials if credentials is not None else access_token
    if not token:
        return None
    try:
        return resolve_caller(db, token)
    except AuthenticationFailure:
        logger.info("Page request with a stale or invalid token")
        return None


PageCallerDep = Annotated[Caller | None, Depends(get_page_caller)]


def require_page_store(db: SessionDep, caller: PageCallerDep) -> Store:
    if caller is None:
        raise AuthRedirect()
    return Store(db, caller)


PageStoreDep = Annotated[Store, Depends(require_page_store)]


@router.get(AUTH_PAGE, response_model=AuthPage)
async def auth_page(caller: PageCallerDep) -> AuthPage | RedirectResponse:
    """Sign-in and sign-up entry point; signed-in callers go straight home."""
    if caller is not None:
        return redirect_to(HOME_PAGE)
    return AuthPage(sign_up_url="/api/v1/auth/signup", sign_in_url="/api/v1/auth/token")


@router.get(HOME_PAGE, response_model=HomePage)
async def home_page(
    store: PageStoreDep,
    search: str | None = Query(None, description="Filter schools by name"),
) -> HomePage:
    return views.home_view(store, search=search)


@router.get("/profile", response_model=ProfilePage)
async def own_profile_page(store: PageStoreDep) -> ProfilePage:
    return views.profile_view(store)


@router.get("/profile/{profile_id}", response_model=ProfilePage)
async def profile_page(profile_id: uuid.UUID, store: PageStoreDep) -> ProfilePage:
    return views.profile_view(store, profile_id)


@router.get("/create-post", response_model=CreatePostPage)
async def create_post_page(store: PageStoreDep) -> CreatePostPage:
    return views.create_post_view(store)


@router.get("/school/{school_id}", response_model=SchoolPage)
async def school_page(
    school_id: uuid.UUID,
    store: PageStoreDep,
    post_filter: PostFilter = Query("all", alias="filter"),
) -> SchoolPage:
    """School detail with per-type counts, vote tallies, and comment counts."""
    return views.school_view(store, school_id, post_filter=post_filter)

