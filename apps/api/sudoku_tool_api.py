# sudoku_tool_api.py
# FastAPI wrapper for the solver/generator tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from cpsudoku.config import load_settings
from cpsudoku.errors import GenerationError, MalformedInputError, UnsolvableError
from cpsudoku.sudoku_tools import candidates_tool, generate_tool, sanity_check, solve_tool

app = FastAPI(title="cpsudoku Solver API")
settings = load_settings()


class SolveRequest(BaseModel):
    puzzle: str | None = None
    grid: list[list[int]] | None = None


class GenerateRequest(BaseModel):
    clues: int = Field(default=17, ge=0, le=81)
    seed: int | None = None


class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


def _board(req: SolveRequest):
    if req.puzzle is not None:
        return req.puzzle
    if req.grid is not None:
        return req.grid
    raise HTTPException(status_code=422, detail="Provide 'puzzle' or 'grid'")


@app.post("/solve")
def api_solve(req: SolveRequest):
    try:
        return solve_tool(_board(req), settings)
    except MalformedInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except UnsolvableError as e:
        raise HTTPException(status_code=409, detail=str(e))


@app.post("/generate")
def api_generate(req: GenerateRequest):
    try:
        return generate_tool(req.clues, seed=req.seed, settings=settings)
    except GenerationError as e:
        raise HTTPException(status_code=503, detail=str(e))


@app.post("/candidates")
def api_cands(req: SolveRequest):
    try:
        return candidates_tool(_board(req))
    except MalformedInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    try:
        return sanity_check(req.original, req.current)
    except MalformedInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
