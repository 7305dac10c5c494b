#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cubecore.config import CubeConfig, configure_logging
from cubecore.cube import CubeCoordinateError
from cubecore.formatting import parse_clockwise, parse_face
from cubecore.service import CubeService


def _create_service() -> CubeService:
    config = CubeConfig.from_env()
    configure_logging(config.log_level)
    return CubeService.create(config)


service = _create_service()
app = FastAPI(title="Cube Core API", version="1.0.0")


class RotateRequest(BaseModel):
    face: str
    direction: str = "cw"
    depth: int = Field(default=0, ge=0)


class ResetRequest(BaseModel):
    size: int | None = Field(default=None, ge=1, le=64)


@app.get("/api/cube")
def api_get_cube() -> dict:
    return {"ok": True, "data": service.snapshot()}


@app.post("/api/cube/rotate")
def api_rotate(payload: RotateRequest) -> dict:
    try:
        face = parse_face(payload.face)
        clockwise = parse_clockwise(payload.direction)
        item = service.rotate(face, clockwise, payload.depth)
    except (CubeCoordinateError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"ok": True, "data": item}


@app.post("/api/cube/reset")
def api_reset(payload: ResetRequest) -> dict:
    return {"ok": True, "data": service.reset(size=payload.size)}


@app.get("/api/cube/faces/{face}/{row}/{col}")
def api_get_face_element(face: str, row: int, col: int) -> dict:
    try:
        parsed = parse_face(face)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        element = service.face_element(parsed, row, col)
    except CubeCoordinateError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"ok": True, "data": {"face": parsed.label, "row": row, "col": col, "element": element}}
