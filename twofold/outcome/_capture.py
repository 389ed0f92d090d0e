import functools
import logging
from collections.abc import Callable

from ._outcome import Outcome, Success, Failure

logger = logging.getLogger(__name__)


def attempt[**P, T](
    *exception_types: type[Exception],
    logger: logging.Logger = logger,
    level: int = logging.DEBUG,
) -> Callable[[Callable[P, T]], Callable[P, Outcome[T, Exception]]]:
    """Decorator to return the exceptions raised by a function as failures.

    Args:
        exception_types: The exceptions to capture.
            If none are given, any :class:`Exception` is captured.
            Exceptions that are not captured propagate as usual.
        logger: The logger on which captured exceptions are reported.
        level: The level at which captured exceptions are reported.

    Example:
        .. code-block:: python

            @attempt(ZeroDivisionError)
            def divide(a: float, b: float) -> float:
                return a / b

            assert divide(1, 2) == success(0.5)
            assert divide(1, 0).is_failure()
    """

    captured = exception_types or (Exception,)

    def decorator(func: Callable[P, T]) -> Callable[P, Outcome[T, Exception]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T, Exception]:
            try:
                value = func(*args, **kwargs)
            except captured as error:
                logger.log(
                    level,
                    "Captured %r raised by %s.",
                    error,
                    func.__qualname__,
                    exc_info=error,
                )
                return Failure(error)
            return Success(value)

        return wrapper

    return decorator
