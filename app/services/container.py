from __future__ import annotations

from dataclasses import dataclass

from app.core.config import Settings, settings as default_settings
from app.repositories.employee_store import EmployeeStore
from app.services.employee_service import EmployeeService


@dataclass
class Container:
    settings: Settings
    store: EmployeeStore
    employee_service: EmployeeService


def build_container(settings: Settings = default_settings) -> Container:
    store = EmployeeStore()
    employee_service = EmployeeService(store=store)

    if settings.seed_sample_data:
        employee_service.seed_sample_employees()

    return Container(
        settings=settings,
        store=store,
        employee_service=employee_service,
    )
