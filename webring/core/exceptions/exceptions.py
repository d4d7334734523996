class AppError(Exception):
    """Base class for all application-level errors."""
    pass


class DomainError(AppError):
    """Base for domain logic errors.

    Domain errors are rendered to the caller as ``{"error": message}`` with
    their ``status_code``.
    """
    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MissingParameterError(DomainError):
    status_code = 400

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Missing required parameter: {parameter}")


class NoUrlsAvailableError(DomainError):
    status_code = 404

    def __init__(self):
        super().__init__("No webring URLs available")


class PicturesDirectoryNotFoundError(DomainError):
    status_code = 404

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__("Pictures directory not found")


class PictureNotFoundError(DomainError):
    status_code = 404

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__("Picture not found")


class InfrastructureError(AppError):
    """Base for infrastructure-related errors (external APIs, filesystem)."""
    pass


class DataSourceUnavailableError(InfrastructureError):
    def __init__(self, service: str, detail: str = ""):
        self.service = service
        self.detail = detail
        self.message = f"Error with external service '{service}': {detail}"
        super().__init__(self.message)
