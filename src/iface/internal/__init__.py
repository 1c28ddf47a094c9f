from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def wrap_exc(*error_types: type[Exception], prefix: str) -> Iterator[None]:
    """Re-raise exceptions of `error_types` with a message prefix.

    The re-raised error has the same type as the caught one, so each error type must be
    initializable with a single string message argument.
    """
    try:
        yield
    except error_types as e:
        msg = str(e)
        if getattr(e, "wrapped", False) and e.__cause__ is not None:
            src = e.__cause__  # Shorten exception chains to the root and last wrapped only
        else:
            msg = f" - {msg}"
            src = e
        error = type(e)(f"{prefix}{msg}")
        error.wrapped = True  # type: ignore[attr-defined]
        raise error from src
