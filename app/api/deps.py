import re
from typing import Optional

from fastapi import HTTPException, Path, Query, Request, status

from app.services.container import Container
from app.services.employee_service import EmployeeService


INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse an optionally signed base-10 64-bit integer; None when malformed or out of range."""
    if raw is None or not INTEGER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_employee_service(request: Request) -> EmployeeService:
    return get_container(request).employee_service


def get_employee_id(employee_id: str = Path()) -> int:
    parsed = parse_int(employee_id)
    if parsed is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid employee ID",
        )
    return parsed


def get_page(page: Optional[str] = Query(default=None)) -> int:
    return parse_int(page) or 0


def get_page_size(page_size: Optional[str] = Query(default=None, alias="pageSize")) -> int:
    return parse_int(page_size) or 0
