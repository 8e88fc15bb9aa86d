"""License matching and prepending logic for license-checker."""
from license_checker.analysis.matching import (
    count_matching_lines,
    match_license,
)
from license_checker.analysis.prepend import (
    check_prepend_target,
    maybe_prepend,
    prepend_license,
    render_prepended,
    should_prepend,
)

__all__ = [
    "check_prepend_target",
    "count_matching_lines",
    "match_license",
    "maybe_prepend",
    "prepend_license",
    "render_prepended",
    "should_prepend",
]
