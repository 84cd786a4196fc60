from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_employee_id, get_employee_service, get_page, get_page_size
from app.models.employee import Employee
from app.services.employee_service import EmployeeService


router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=list[Employee])
def list_employees(
    page: int = Depends(get_page),
    page_size: int = Depends(get_page_size),
    service: EmployeeService = Depends(get_employee_service),
) -> list[Employee]:
    return service.list_employees(page, page_size)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: Employee,
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    service.create_employee(payload)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/{employee_id:path}", response_model=Employee)
def get_employee(
    employee_id: int = Depends(get_employee_id),
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    return service.get_employee(employee_id)


@router.put("/{employee_id:path}")
def update_employee(
    payload: Employee,
    employee_id: int = Depends(get_employee_id),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    service.update_employee(employee_id, payload)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{employee_id:path}")
def delete_employee(
    employee_id: int = Depends(get_employee_id),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_200_OK)
