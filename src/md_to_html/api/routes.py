"""API routes: upload, render, parse."""

from __future__ import annotations

from fastapi import APIRouter, File, HTTPException, UploadFile

from ..models import (
    ParseRequest,
    ParseResponse,
    RenderRequest,
    RenderResponse,
    UploadResponse,
)
from ..services.convert import convert_markdown, parse_markdown
from ..services.input_layer import get_upload, save_upload

router = APIRouter(prefix="/api", tags=["api"])


@router.post("/upload", response_model=UploadResponse)
async def api_upload(file: UploadFile = File(...)):
    """Upload a Markdown file. Returns file_id and preview_markdown."""
    if not file.filename or not (file.filename.endswith(".md") or file.filename.endswith(".txt")):
        raise HTTPException(400, "File must be .md or .txt")
    result = save_upload(await file.read(), file.filename)
    return UploadResponse(**result)


@router.post("/render", response_model=RenderResponse)
async def api_render(body: RenderRequest):
    """Render inline markdown, or a previous upload by file_id, to HTML."""
    if body.markdown is not None:
        markdown = body.markdown
    elif body.file_id:
        upload = get_upload(body.file_id)
        if not upload:
            raise HTTPException(404, f"Upload not found: {body.file_id}")
        markdown = upload.get("content", "")
    else:
        raise HTTPException(400, "Either markdown or file_id is required")
    try:
        result = convert_markdown(markdown)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return RenderResponse(html=result.html, node_count=len(result.nodes))


@router.post("/parse", response_model=ParseResponse)
async def api_parse(body: ParseRequest):
    """Return the block node AST for markdown as JSON."""
    try:
        nodes = parse_markdown(body.markdown)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return ParseResponse(nodes=[n.to_dict() for n in nodes])
