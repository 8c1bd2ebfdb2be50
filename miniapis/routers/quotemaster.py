from __future__ import annotations

from fastapi import APIRouter, Body, Request, Response
from fastapi.responses import JSONResponse

from miniapis.services.quote_service import (
    EmptyCollectionError,
    InvalidIdError,
    InvalidNameError,
    InvalidPasswordError,
    InvalidQuoteError,
    QuoteService,
)

router = APIRouter(prefix="/quotemaster", tags=["quotemaster"])


def _get_quote_service(request: Request) -> QuoteService:
    svc = getattr(getattr(request.app, "state", None), "quote_service", None)
    if not svc:
        raise RuntimeError("QuoteService not configured")
    return svc


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"errorMessage": message}, status_code=status_code)


@router.get("/random")
def random_quote(request: Request):
    try:
        return _get_quote_service(request).random_quote()
    except EmptyCollectionError:
        return _error("No quotes available", 404)


@router.get("/popular")
def popular_quote(request: Request):
    try:
        return _get_quote_service(request).popular_quote()
    except EmptyCollectionError:
        return _error("No quotes available", 404)


@router.get("/id/{quote_id}")
def quote_by_id(quote_id: str, request: Request):
    try:
        return _get_quote_service(request).quote_by_id(quote_id)
    except InvalidIdError:
        return _error("Invalid quote ID")


@router.post("/like")
def like_quote(request: Request, payload: dict = Body(default={})):
    try:
        _get_quote_service(request).like_quote(payload.get("id"))
    except InvalidIdError:
        return _error("Invalid quote ID")
    return Response(status_code=200)


@router.post("/new")
def new_quote(request: Request, payload: dict = Body(default={})):
    try:
        new_id = _get_quote_service(request).new_quote(payload.get("quote"), payload.get("name"))
    except InvalidQuoteError:
        return _error("Quote must be between 1 and 400 characters long")
    except InvalidNameError:
        return _error("Name must be between 1 and 40 characters long")
    return {"id": new_id}


@router.post("/reset")
def reset_quotes(request: Request, payload: dict = Body(default={})):
    try:
        _get_quote_service(request).reset_quotes(payload.get("pass"))
    except InvalidPasswordError:
        return _error("Invalid password", 403)
    return Response(status_code=200)
