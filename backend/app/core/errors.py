class RegistrationError(Exception):
    """Base for every failure that ends up in front of an attendee."""

    status_code = 500
    default_message = "Server error. Please try again."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RegistrationError):
    status_code = 400
    default_message = "Please enter your SAP ID"


class NotFoundError(RegistrationError):
    status_code = 404
    default_message = (
        "SAP ID not found. You are not registered for this workshop. "
        "Please contact the coordinator."
    )


class InternalError(RegistrationError):
    status_code = 500


class TransportError(RegistrationError):
    """The registration API could not be reached or answered garbage."""

    status_code = 503
    default_message = "Network error. Please check your connection and try again."


class SubmissionInProgress(RegistrationError):
    status_code = 409
    default_message = "Registration is already being submitted. Please wait."
