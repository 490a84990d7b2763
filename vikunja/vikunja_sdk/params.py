#!/usr/bin/env python3
"""
Vikunja Query Parameter Handling

Translates caller-facing query parameters into what the Vikunja API expects:
- Legacy component filters (filter_by / filter_value / filter_comparator /
  filter_concat) become a single `filter` expression
- Endpoint families with their own pagination key get it remapped
- Values are serialized for the query string

Everything here is pure: no I/O, inputs are never mutated.
"""

from typing import Any, Dict, List, Optional, Union

# API parameter names as expected by the Vikunja API
API_PARAMS = {
    # Pagination
    "PAGE": "page",
    "PER_PAGE": "per_page",
    # Search
    "SEARCH": "s",
    # Filtering
    "FILTER": "filter",
    "FILTER_TIMEZONE": "filter_timezone",
    "FILTER_INCLUDE_NULLS": "filter_include_nulls",
    # Sorting
    "SORT_BY": "sort_by",
    "ORDER_BY": "order_by",
    # Expansion
    "EXPAND": "expand",
}

LEGACY_FILTER_KEYS = ("filter_by", "filter_value", "filter_comparator", "filter_concat")

DEFAULT_FILTER_COMPARATOR = "equals"
DEFAULT_FILTER_CONCAT = "and"

FILTER_COMPARATORS = (
    "equals",
    "greater",
    "greater_equals",
    "less",
    "less_equals",
    "like",
    "in",
)

# Caller-facing name -> API name, for keys that survive the filter transform
PARAM_TRANSFORMATIONS: Dict[str, str] = {
    "page": API_PARAMS["PAGE"],
    "per_page": API_PARAMS["PER_PAGE"],
    "s": API_PARAMS["SEARCH"],
    "sort_by": API_PARAMS["SORT_BY"],
    "order_by": API_PARAMS["ORDER_BY"],
    "filter_timezone": API_PARAMS["FILTER_TIMEZONE"],
    "filter_include_nulls": API_PARAMS["FILTER_INCLUDE_NULLS"],
    "expand": API_PARAMS["EXPAND"],
}

# Endpoint path fragment -> key renames applied only on matching endpoints.
# The Unsplash proxy pages with `p` instead of `page`.
PAGINATION_KEY_OVERRIDES: Dict[str, Dict[str, str]] = {
    "/backgrounds/unsplash/": {"page": "p"},
}

# Required/optional parameters of the list endpoints
ENDPOINT_VALIDATIONS: Dict[str, Dict[str, List[str]]] = {
    "/tasks/all": {
        "required": [],
        "optional": [
            "page", "per_page", "s", "sort_by", "order_by", "filter",
            "filter_timezone", "filter_include_nulls", "expand",
        ],
    },
    "/projects/{id}/tasks": {
        "required": [],
        "optional": [
            "page", "per_page", "s", "sort_by", "order_by", "filter",
            "filter_timezone", "filter_include_nulls",
        ],
    },
    "/labels": {
        "required": [],
        "optional": ["page", "per_page", "s"],
    },
    "/teams": {
        "required": [],
        "optional": ["page", "per_page", "s"],
    },
    "/users": {
        "required": [],
        "optional": ["s"],
    },
    "/backgrounds/unsplash/search": {
        "required": [],
        "optional": ["s", "p"],
    },
}

QueryValue = Union[str, int, float, bool, List[Any], None]


def _format_value(value: Any) -> str:
    """Render a scalar the way the API reads it (booleans lowercase)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _filter_clause(field: str, comparator: str, value: Any) -> str:
    if value is None:
        raise ValueError(f"No filter_value given for filter field '{field}'")
    return f"{field} {comparator} {_format_value(value)}"


def transform_filter_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the `filter` expression from legacy filter components.

    Array-valued filter_by and filter_value are paired positionally; a scalar
    filter_value is shared by every field. One comparator and one concat
    operator apply to all clauses. A `filter` string passed on its own is
    left untouched.

    Args:
        params: Query parameters, possibly containing legacy filter keys

    Returns:
        New dict with legacy keys replaced by `filter`

    Raises:
        ValueError: If filter_value is a list shorter than filter_by
                    or a field has no value

    Example:
        transform_filter_params({
            'filter_by': ['done', 'priority'],
            'filter_value': ['false', '5'],
            'filter_comparator': 'greater',
            'filter_concat': 'or',
        })
        # {'filter': 'done greater false or priority greater 5'}
    """
    transformed = dict(params)

    filter_by = params.get("filter_by")
    filter_value = params.get("filter_value")
    comparator = params.get("filter_comparator")

    if not (filter_by or filter_value or comparator):
        return transformed

    comparator = comparator or DEFAULT_FILTER_COMPARATOR
    concat = params.get("filter_concat") or DEFAULT_FILTER_CONCAT

    clauses: List[str] = []
    if isinstance(filter_by, (list, tuple)):
        for index, field in enumerate(filter_by):
            if isinstance(filter_value, (list, tuple)):
                if index >= len(filter_value):
                    raise ValueError(
                        f"filter_value has {len(filter_value)} entries "
                        f"but filter_by has {len(filter_by)}"
                    )
                value = filter_value[index]
            else:
                value = filter_value
            clauses.append(_filter_clause(field, comparator, value))
    elif filter_by:
        clauses.append(_filter_clause(filter_by, comparator, filter_value))

    if clauses:
        transformed["filter"] = f" {concat} ".join(clauses)

    for key in LEGACY_FILTER_KEYS:
        transformed.pop(key, None)

    return transformed


def _key_overrides(endpoint: Optional[str]) -> Dict[str, str]:
    if not endpoint:
        return {}
    overrides: Dict[str, str] = {}
    for fragment, renames in PAGINATION_KEY_OVERRIDES.items():
        if fragment in endpoint:
            overrides.update(renames)
    return overrides


def transform_params(
    params: Optional[Dict[str, Any]], endpoint: Optional[str] = None
) -> Optional[Dict[str, Any]]:
    """
    Transform caller parameters to match API expectations.

    Args:
        params: Input parameters (None passes through as None)
        endpoint: API endpoint, used to look up endpoint-specific key renames

    Returns:
        Transformed parameters, or None
    """
    if params is None:
        return None

    transformed = transform_filter_params(params)
    overrides = _key_overrides(endpoint)

    result: Dict[str, Any] = {}
    for key, value in transformed.items():
        if key in overrides:
            result[overrides[key]] = value
        else:
            result[PARAM_TRANSFORMATIONS.get(key, key)] = value
    return result


def build_query_params(params: Optional[Dict[str, QueryValue]]) -> Dict[str, Any]:
    """
    Serialize parameters for the query string.

    None values are dropped, booleans become 'true'/'false', lists are kept
    so requests sends them as repeated keys (e.g. sort_by=a&sort_by=b).
    """
    if not params:
        return {}

    query: Dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            query[key] = [_format_value(v) for v in value]
        else:
            query[key] = _format_value(value)
    return query


def validate_required_params(
    endpoint: str,
    params: Optional[Dict[str, Any]],
    required: Optional[List[str]] = None,
) -> None:
    """
    Check that every required parameter is present.

    When `required` is omitted the endpoint's entry in ENDPOINT_VALIDATIONS
    is used.

    Raises:
        ValueError: Listing the missing parameter names
    """
    if required is None:
        required = ENDPOINT_VALIDATIONS.get(endpoint, {}).get("required", [])
    if not required:
        return

    missing = [name for name in required if not params or params.get(name) is None]
    if missing:
        raise ValueError(
            f"Missing required parameters for {endpoint}: {', '.join(missing)}"
        )
