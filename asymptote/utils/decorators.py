"""Set of helper decorators used within the asymptote directory.

Contains decorators for enforcing certain conditions, like e.g. singleton-like return value of
the functions. Or various checker function, that checks given parameters of the functions.
"""
from __future__ import annotations

# Standard Imports
from typing import Callable, Any
import functools
import inspect

# Third-Party Imports

# Asymptote Imports
from asymptote.utils.exceptions import InvalidParameterException


def singleton(func: Callable[[], Any]) -> Callable[[], Any]:
    """
    Wraps the function @p func, so it will always return the same result,
    as given by the first call. I.e. the singleton. No params are expected.

    The singleton is registered, so its instance can be reset (e.g. in tests).

    :param func: any function that takes no parameters and returns single value
    :returns: decorated function that will be run only once
    """
    func.instance = None  # type: ignore
    registered_singletons.append(func)

    @functools.wraps(func)
    def wrapper() -> Any:
        """Wrapper function of the @p func"""
        if func.instance is None:  # type: ignore
            func.instance = func()  # type: ignore
        return func.instance  # type: ignore

    return wrapper


registered_singletons: list[Callable[[], Any]] = []


def singleton_with_args(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Wraps the function @p func, so it will always return the same result,
    as given by the first call with given positional and keyword arguments.

    :param function func: any function that takes parameters and returns value
    :returns func: decorated function that will be run only once for give parameters
    """
    func_args_cache[func.__name__] = {}

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """Wrapper function of the @p func"""
        key = tuple(args) + tuple(sorted(kwargs.items()))
        if key not in func_args_cache[func.__name__].keys():
            func_args_cache[func.__name__][key] = func(*args, **kwargs)
        return func_args_cache[func.__name__][key]

    return wrapper


func_args_cache: dict[str, dict[tuple[Any, ...], Any]] = {}


def remove_from_function_args_cache(funcname: str) -> None:
    """Helper function for clearing the key from func args cache

    :param str funcname: function name that we are removing from the cache
    """
    if funcname in func_args_cache.keys():
        func_args_cache[funcname].clear()


def validate_arguments(
    validated_args: list[str], validate: Callable[..., bool], *args: Any, **kwargs: Any
) -> Callable[..., Any]:
    """
    Validates the arguments stated by validated_args with validate function.
    Note that positional and kwarguments are not supported by this decorator

    :param list[str] validated_args: list of validated arguments
    :param function validate: function used for validation
    :param list args: list of additional positional arguments to validate function
    :param dict kwargs: dictionary of additional keyword arguments to validate function
    :returns func: decorated function for which given parameters will be validated
    """

    def inner_decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        """Wrapper function of the @p func"""
        f_args, *_ = inspect.getfullargspec(func)

        @functools.wraps(func)
        def wrapper(*wargs: Any, **wkwargs: Any) -> Any:
            """Wrapper function of the wrapper inner decorator"""
            params = list(zip(f_args[: len(wargs)], wargs)) + list(wkwargs.items())

            for param_name, param_value in params:
                if param_name not in validated_args:
                    continue
                if not validate(param_value, *args, **kwargs):
                    raise InvalidParameterException(param_name, param_value)

            return func(*wargs, **wkwargs)

        return wrapper

    return inner_decorator
