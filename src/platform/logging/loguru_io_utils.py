from inspect import getfile, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    MASK,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)

MAX_CONTENT_LENGTH = 500

# password='abc' / "token": "abc" / hashed_password=b'...'
_SENSITIVE_PATTERN = re.compile(
    r"""(['"]?(?:{keys})['"]?\s*[=:]\s*b?)(['"])(.*?)(\2)""".format(
        keys='|'.join(sorted(SENSITIVE_KEYWORDS, key=len, reverse=True))
    ),
    re.IGNORECASE,
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def increase_call_depth() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if layer <= 0:
        chain_start_time_var.set(0)


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if isinstance(keyword, str) and keyword.lower() in SENSITIVE_KEYWORDS else value


def mask_sensitive(data: Any) -> Any:
    """Mask secrets inside arbitrary values, recursing into dicts, lists and tuples."""
    if isinstance(data, dict):
        return {key: mask_sensitive(should_mask_keyword(key, value)) for key, value in data.items()}
    if isinstance(data, list | tuple):
        return type(data)(mask_sensitive(item) for item in data)
    if isinstance(data, str | int | float | bool) or data is None:
        return data

    text = str(data)
    masked = _SENSITIVE_PATTERN.sub(rf'\1\2{MASK}\4', text)
    return data if masked == text else masked


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    text = str(data)
    if len(text) <= max_length:
        return data
    return f'{text[:max_length]}... (truncated {len(text) - max_length} chars)'
