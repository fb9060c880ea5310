from functools import partial, wraps

import anyio


def blocking(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        return anyio.run(partial(f, *args, **kwargs))

    return wrapper
