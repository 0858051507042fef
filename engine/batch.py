import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from exprtree.config import Settings
from exprtree.errors import ExpressionError
from exprtree.evaluator import evaluate
from exprtree.parser import parse_expression

logger = logging.getLogger("exprtree.batch")

COLUMNS = ["expression", "result", "error"]


def read_expressions(path: str) -> list[str]:
    """One expression per line; blank lines and '#' comments are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        lines = [ln.strip() for ln in f]
    return [ln for ln in lines if ln and not ln.startswith("#")]


def evaluate_many(expressions: Iterable[str], settings: Optional[Settings] = None) -> pd.DataFrame:
    """
    Parse and evaluate each expression independently.
    Failures land in the `error` column (with a NaN result) instead of raising.
    """
    settings = settings or Settings()
    rows = []
    for src in expressions:
        try:
            tree = parse_expression(src, strict=settings.strict, backend=settings.backend)
            rows.append({"expression": src, "result": evaluate(tree), "error": None})
        except ExpressionError as e:
            logger.info(f"{src!r} failed: {e}")
            rows.append({"expression": src, "result": np.nan, "error": str(e)})
    return pd.DataFrame(rows, columns=COLUMNS)
