__all__ = ["InjectGenError", "BindingError", "InternalConsistencyError"]


class InjectGenError(Exception):
    """Base class for errors raised while building or rendering an injector."""

    pass


class BindingError(InjectGenError):
    """Raised when a binding description is invalid or conflicts with another binding."""

    pass


class InternalConsistencyError(InjectGenError):
    """Raised when rendering meets a value the descriptor tables do not cover."""

    pass
