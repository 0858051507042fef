import numpy as np

BINARY = ["+", "-", "*", "/", "^"]


def _literal(rng: np.random.Generator) -> str:
    if rng.random() < 0.7:
        return str(int(rng.integers(0, 20)))
    return f"{rng.uniform(0, 10):.2f}"


def random_expression(rng: np.random.Generator, depth: int = 3) -> str:
    """Random well-formed expression; `depth` bounds operator nesting."""
    if depth <= 0 or rng.random() < 0.2:
        return _literal(rng)
    roll = rng.random()
    if roll < 0.1:
        return str(rng.choice(["-", "+"])) + _literal(rng)
    if roll < 0.25:
        return "(" + random_expression(rng, depth - 1) + ")"
    op = str(rng.choice(BINARY))
    left = random_expression(rng, depth - 1)
    # keep powers small so results stay finite
    right = str(int(rng.integers(0, 4))) if op == "^" else random_expression(rng, depth - 1)
    return f"{left}{op}{right}"


def make_expressions(n: int = 100, seed: int = 0, depth: int = 3) -> list[str]:
    rng = np.random.default_rng(seed)
    return [random_expression(rng, depth) for _ in range(n)]
