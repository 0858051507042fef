import logging
import math
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from engine.batch import evaluate_many
from exprtree.analyzer import analyze
from exprtree.config import load_settings
from exprtree.errors import ExpressionError
from exprtree.evaluator import evaluate
from exprtree.parser import parse_expression
from exprtree.printer import format_number, tree_to_dict, tree_to_text

logger = logging.getLogger("exprtree.api")

# deepest tree /ast will return as nested JSON
EXPORT_DEPTH = 200

app = FastAPI(title="exprtree")


class ParseBody(BaseModel):
    expression: str
    strict: Optional[bool] = None
    backend: Optional[Literal["descent", "lark"]] = None


class BatchBody(BaseModel):
    expressions: List[str]
    strict: Optional[bool] = None
    backend: Optional[Literal["descent", "lark"]] = None


def _json_float(x: float):
    # JSON has no nan/inf
    return x if math.isfinite(x) else None


def _parse(body: ParseBody):
    settings = load_settings(strict=body.strict, backend=body.backend)
    return settings, parse_expression(body.expression, strict=settings.strict, backend=settings.backend)


@app.post("/parse")
def parse(body: ParseBody):
    try:
        _, tree = _parse(body)
        meta = analyze(tree)
        return {
            "ok": True,
            "depth": meta.depth,
            "operands": meta.operands,
            "operators": dict(sorted(meta.operators.items())),
        }
    except ExpressionError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/evaluate")
def evaluate_api(body: ParseBody):
    try:
        settings, tree = _parse(body)
        out = evaluate(tree)
        return {"result": _json_float(out), "formatted": format_number(out, settings.precision)}
    except ExpressionError as e:
        logger.info(f"/evaluate {body.expression!r}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/ast")
def ast_view(body: ParseBody):
    try:
        settings, tree = _parse(body)
        as_dict = tree_to_dict(tree, max_depth=EXPORT_DEPTH)
        return {
            "ok": True,
            "pretty": tree_to_text(tree, settings.precision),
            "tree": as_dict,
        }
    except ExpressionError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/batch")
def batch(body: BatchBody):
    settings = load_settings(strict=body.strict, backend=body.backend)
    df = evaluate_many(body.expressions, settings)
    return {
        "rows": [
            {"expression": r.expression,
             "result": _json_float(float(r.result)),
             "error": r.error if isinstance(r.error, str) else None}
            for r in df.itertuples(index=False)
        ]
    }
