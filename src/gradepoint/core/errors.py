class GradepointError(Exception):
    pass


class InvalidInputError(GradepointError, ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class PeriodNotFoundError(GradepointError, LookupError):
    def __init__(self, period_id: str) -> None:
        super().__init__(f"Unknown period: {period_id}")
        self.period_id = period_id


class LayoutError(GradepointError):
    pass
