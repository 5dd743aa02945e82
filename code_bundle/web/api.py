"""FastAPI routes for the code-bundle web API."""

from __future__ import annotations

import asyncio
from pathlib import Path

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from code_bundle.assembler import concatenate
from code_bundle.errors import BundleError, CycleError, ResolutionError, ResourceError
from code_bundle.models import file_reference
from code_bundle.resolver import resolve_build_order
from code_bundle.scanner import scan_file

router = APIRouter(prefix="/api")

# Every path the API reads, resolved dependencies included, must sit under one of these.
_ALLOWED_ROOTS = [Path.home()]


# --- Request / Response models ---

class DirectivesRequest(BaseModel):
    path: str

class OrderRequest(BaseModel):
    seed: list[str]
    root: str
    first: list[str] = []


# --- Helpers ---

def _check_allowed(path: Path) -> None:
    if not any(path.is_relative_to(root.resolve()) for root in _ALLOWED_ROOTS):
        raise HTTPException(403, "Path must be under your home directory")


def _validate_path(p: str) -> Path:
    """Ensure path exists and is under home directory."""
    resolved = Path(p).expanduser().resolve()
    if not resolved.exists():
        raise HTTPException(404, f"Path not found: {resolved}")
    _check_allowed(resolved)
    return resolved


def _http_error(e: BundleError) -> HTTPException:
    if isinstance(e, CycleError):
        return HTTPException(409, str(e))
    if isinstance(e, ResolutionError):
        return HTTPException(422, str(e))
    if isinstance(e, ResourceError):
        return HTTPException(404, str(e))
    return HTTPException(400, str(e))


async def _resolve(req: OrderRequest) -> tuple[Path, list[Path]]:
    root = _validate_path(req.root)
    if not root.is_dir():
        raise HTTPException(400, "Root must be a directory")
    if not req.seed:
        raise HTTPException(400, "No seed files given")
    seed = [_validate_path(s) for s in req.seed]
    for f in req.first:
        _check_allowed(file_reference(f, root))
    try:
        files = await asyncio.to_thread(resolve_build_order, seed, root, first=req.first)
    except BundleError as e:
        raise _http_error(e)
    for f in files:
        _check_allowed(f)
    return root, files


# --- Endpoints ---

@router.post("/directives")
async def directives(req: DirectivesRequest):
    path = _validate_path(req.path)
    if not path.is_file():
        raise HTTPException(400, "Path must be a file")
    try:
        tokens = await asyncio.to_thread(scan_file, path)
    except BundleError as e:
        raise _http_error(e)
    return {"path": str(path), "tokens": tokens}


@router.post("/order")
async def order(req: OrderRequest):
    root, files = await _resolve(req)
    return {
        "root": str(root),
        "count": len(files),
        "files": [str(f) for f in files],
    }


@router.post("/bundle")
async def bundle(req: OrderRequest):
    _, files = await _resolve(req)
    try:
        content = await asyncio.to_thread(concatenate, files)
    except BundleError as e:
        raise _http_error(e)
    return {
        "count": len(files),
        "files": [str(f) for f in files],
        "content": content,
    }
