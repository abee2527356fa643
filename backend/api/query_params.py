"""Query-string allow-list shared by the listing endpoints."""
from typing import Callable
from fastapi import Request
from utils.errors import BadRequestError


def only_query_params(*allowed: str) -> Callable[[Request], None]:
    """
    Build a dependency that rejects unknown query parameters with 400.

    Usage:
        @router.get("", dependencies=[Depends(only_query_params("title", "minSalary"))])
    """
    allowed_set = set(allowed)

    def check(request: Request) -> None:
        unknown = sorted(set(request.query_params.keys()) - allowed_set)
        if unknown:
            raise BadRequestError(
                [f"Unknown query parameter: {name}" for name in unknown]
            )

    return check
