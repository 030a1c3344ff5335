"""Regular-expression filtering of resource names."""

import re
from typing import List, Pattern, Sequence, Union

from killallgit.exceptions import InvalidPatternError


def compile_pattern(pattern: str) -> Pattern[str]:
    """
    Compile a user-supplied regular expression.

    Raises:
        InvalidPatternError: If the pattern does not compile
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e))


def filter_names(pattern: Union[str, Pattern[str]], names: Sequence[str]) -> List[str]:
    """
    Names in which the pattern is found anywhere, in their original order.

    Args:
        pattern: Regular expression string or compiled pattern
        names: Names as listed by the backend

    Returns:
        Matching names ("feature" matches "feature/x")
    """
    regex = compile_pattern(pattern) if isinstance(pattern, str) else pattern
    return [name for name in names if regex.search(name)]
