from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from pathlib import PurePosixPath
from typing import Any, List, Optional
import json
import asyncio
from sse_starlette.sse import EventSourceResponse  # type: ignore
from relnorm.errors import RelativePathError
from relnorm.joiner import join_relative
from relnorm.normalize import components, join_subpaths, normalize
from relnorm.utils.paths import append
from relnorm.config.settings import settings

app = FastAPI(title=settings.api_title)


class NormalizeRequest(BaseModel):
    # Any JSON value: non-strings are rejected by the normalizer itself
    path: Any = None
    context: Optional[str] = None


class BatchRequest(BaseModel):
    paths: List[Any]
    context: Optional[str] = None


class AppendRequest(BaseModel):
    base: str
    subpath: Any = None
    context: Optional[str] = None


def _context(requested: Optional[str], operation: str) -> str:
    """Caller-supplied label, or ``<context_label>.<operation>`` from settings."""
    return requested or f"{settings.context_label}.{operation}"


def _reject(exc: RelativePathError) -> HTTPException:
    return HTTPException(status_code=400, detail=exc.to_dict())


def _normalize_one(path: Any, context: str) -> dict:
    try:
        return {"path": path, "normalized": normalize(path, context)}
    except RelativePathError as exc:
        return {"path": path, "error": exc.to_dict()}


def _yield_uniform(progress: int, status: str, message: str, results: list | None = None):
    payload = {
        "progress": int(progress),
        "status": status,
        "message": message,
        "results": results if results is not None else [],
    }
    payload_json = json.dumps(payload)
    if settings.echo_payloads:
        # Mirror to console at the same time
        print(payload_json, flush=True)
    return payload_json


# ---------- SSE generator ---------- #

async def _normalize_sse_generator(req: BatchRequest):
    """Async generator yielding one uniform JSON message per normalized path.

    Payload schema (every message):
    {
      "progress": int,          # 0..100
      "status": str,            # "normalizing" | "completed"
      "message": str,
      "results": list           # this path's result; every result on the final message
    }
    """
    context = _context(req.context, "normalize")
    total = len(req.paths)
    results: list[dict] = []

    yield _yield_uniform(0, "normalizing", f"Normalizing {total} path(s)")

    for i, path in enumerate(req.paths, start=1):
        result = _normalize_one(path, context)
        results.append(result)
        progress = min(99, round(100 * i / total))
        status = "rejected" if "error" in result else "normalized"
        yield _yield_uniform(progress, "normalizing", f"Path {i}/{total} {status}", [result])
        await asyncio.sleep(settings.stream_interval)

    rejected = sum(1 for r in results if "error" in r)
    yield _yield_uniform(100, "completed", f"Normalized {total - rejected} path(s), rejected {rejected}", results)


# ---------- Endpoints ---------- #

@app.post("/normalize")
async def normalize_path(req: NormalizeRequest):
    """Normalize a single relative path; rejected inputs are a 400."""
    context = _context(req.context, "normalize")
    try:
        parts = components(req.path, context)
    except RelativePathError as exc:
        raise _reject(exc)
    return {"path": req.path, "normalized": join_relative(parts), "components": parts}


@app.post("/join")
async def join_paths(req: BatchRequest):
    """Join several relative paths into one normalized path."""
    try:
        normalized = join_subpaths(req.paths, _context(req.context, "join"))
    except RelativePathError as exc:
        raise _reject(exc)
    return {"normalized": normalized}


@app.post("/append")
async def append_path(req: AppendRequest):
    """Append a relative path to an absolute base path."""
    context = _context(req.context, "append")
    base = PurePosixPath(req.base)
    if not base.is_absolute():
        raise HTTPException(
            status_code=400,
            detail={
                "kind": "invalid_base",
                "message": f"{context}: The base {req.base!r} is not an absolute path",
                "value": req.base,
                "context": context,
            },
        )
    try:
        result = append(base, req.subpath, context)
    except RelativePathError as exc:
        raise _reject(exc)
    return {"path": str(result)}


@app.post("/normalize-sse")
async def normalize_stream(req: BatchRequest):
    """Endpoint that streams per-path normalization results via Server-Sent Events."""
    return EventSourceResponse(_normalize_sse_generator(req))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
