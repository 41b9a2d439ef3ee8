class TodoistError(Exception):
    pass


class TodoistConfigError(TodoistError):
    pass


class TodoistRequestError(TodoistError):
    """The request could not be built or sent (DNS, connection, TLS, timeout)."""


class TodoistEncodeError(TodoistError):
    pass


class TodoistDecodeError(TodoistError):
    pass


class TodoistHTTPError(TodoistError):
    def __init__(self, action: str, status: int, body: str) -> None:
        super().__init__(f"Failed to {action}: {status} {body}".rstrip())
        self.action = action
        self.status = status
        self.body = body
