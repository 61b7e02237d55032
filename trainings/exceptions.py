# exceptions.py


class AgriTrainError(Exception):
    """Base class for errors raised by the trainings app."""


class BackendError(AgriTrainError):
    """
    The store, auth provider or object storage rejected a call
    (constraint violation, bad credentials, row not found).
    The message is shown to the user verbatim.
    """


class AccountNotFound(AgriTrainError):
    """An authenticated identity matched neither a manager nor a trainer."""

    def __init__(self, message="Account not found"):
        super().__init__(message)


class WizardTransitionError(AgriTrainError):
    """Forward move attempted without a valid selection for the current step."""
