class EmployeeNotFoundError(LookupError):
    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f"employee with ID {employee_id} not found")
