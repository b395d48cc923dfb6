class DirectoryError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class IdentityError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")


class BookingValidationError(Exception):
    code = "invalid_booking"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidDateRangeError(BookingValidationError):
    code = "invalid_date_range"


class GuestCountExceededError(BookingValidationError):
    code = "guest_count_exceeded"


class RoomUnavailableError(BookingValidationError):
    code = "room_unavailable"


class InvalidTransitionError(Exception):
    def __init__(self, current: str, requested: str, role: str):
        self.current = current
        self.requested = requested
        self.role = role
        self.message = f"Cannot move booking from '{current}' to '{requested}' as {role}"
        super().__init__(self.message)


class NotFoundError(Exception):
    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        self.message = f"{entity} {record_id} not found"
        super().__init__(self.message)


class AuthenticationError(Exception):
    def __init__(self, message: str = "Not authenticated"):
        self.message = message
        super().__init__(message)


class PermissionDeniedError(Exception):
    def __init__(self, message: str = "Not allowed"):
        self.message = message
        super().__init__(message)
